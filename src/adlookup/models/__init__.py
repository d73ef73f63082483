"""Data models for adlookup."""
