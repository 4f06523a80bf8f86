"""Gateway response interpretation."""
