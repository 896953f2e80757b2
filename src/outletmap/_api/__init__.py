"""Remote endpoint calls."""
