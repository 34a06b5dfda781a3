"""One API REST components."""
