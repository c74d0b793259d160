"""Entry points (command-line interface) for shellsplit."""
