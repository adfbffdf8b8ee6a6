"""Feature packages grouped by domain."""
