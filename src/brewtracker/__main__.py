"""
Brewtracker CLI entrypoint.

Executed via:
  python -m brewtracker

Reads data.json from the current directory.
"""

from brewtracker.cli.app import app

if __name__ == "__main__":
    app()
