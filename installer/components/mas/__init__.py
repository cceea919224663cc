"""Mac App Store applications through mas."""
