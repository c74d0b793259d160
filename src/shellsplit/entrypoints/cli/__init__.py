"""Click-based command-line interface for shellsplit."""
