"""Allow running vsync with ``python -m vsync``."""

from vsync.cli.main import app

if __name__ == "__main__":
    app()
