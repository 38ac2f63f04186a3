"""Top-level windows for Learn Clock."""
