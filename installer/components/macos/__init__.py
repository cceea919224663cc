"""macOS system steps: updates, Rosetta, sudo credentials and restart."""
