import sys

from battherm.cli import app

if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
