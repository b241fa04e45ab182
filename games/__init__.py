"""Games package."""
