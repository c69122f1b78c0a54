"""Core runtime for linkbridge."""
