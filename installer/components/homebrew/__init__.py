"""Homebrew bootstrap, environment, packages and cleanup."""
