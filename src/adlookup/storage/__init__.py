"""Directory backends for adlookup."""
