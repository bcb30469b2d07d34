"""Schema domain: records, inheritance resolution and consistency checks."""
