"""Shared helpers for executing commands, logging and profile files."""
