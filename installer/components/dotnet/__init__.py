"""Optional .NET SDK installation."""
