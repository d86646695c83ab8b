"""Allow ``python -m cronhint``."""

from cronhint.cli.app import app

if __name__ == "__main__":
    app()
