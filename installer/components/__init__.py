"""
Component modules for the installer.

Each component provides the provisioning steps for one external tool or one
area of system configuration (Homebrew, the App Store, the Dock, git, ...).
"""
