"""Homebrew command helpers for macOS."""
