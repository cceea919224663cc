"""Dock layout through dockutil."""
