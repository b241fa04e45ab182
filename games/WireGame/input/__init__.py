"""Wire game input."""
