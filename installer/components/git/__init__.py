"""Git identity configuration."""
