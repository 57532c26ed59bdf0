"""Allow running as python -m namecraft."""

from .cli import app

if __name__ == "__main__":
    app()
