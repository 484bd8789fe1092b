"""Pure helpers over in-memory record collections (no I/O)."""
