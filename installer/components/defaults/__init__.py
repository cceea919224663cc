"""macOS default settings."""
