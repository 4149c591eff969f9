"""Transport-backed HTTP template implementations."""
