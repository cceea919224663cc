"""
macOS provisioning installer.

This package holds the configuration models, the interactive CLI helpers,
the reusable step shapes and the component modules that together make up
the provisioning pipeline.
"""
