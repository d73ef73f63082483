"""Query services for adlookup."""
