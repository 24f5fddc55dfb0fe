"""Watch the IANA TLD list for newly added top-level domains."""
