"""Core HTTP template components."""
