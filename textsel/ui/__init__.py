"""textual integration for textobject selection."""
