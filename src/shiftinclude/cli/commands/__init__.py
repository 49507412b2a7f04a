"""Top-level shiftinclude commands."""
