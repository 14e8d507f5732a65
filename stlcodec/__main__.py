import sys

from .cli import _cli

if __name__ == "__main__":
    sys.exit(_cli())
