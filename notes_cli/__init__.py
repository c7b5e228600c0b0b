"""Create dated placeholder notes from per-category settings."""
