"""Allow ``python -m shellsplit``."""

from shellsplit.entrypoints.cli.main import shellsplit

if __name__ == "__main__":
    shellsplit()  # pylint: disable=no-value-for-parameter
