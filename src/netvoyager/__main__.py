"""Module entry point for running with python -m netvoyager."""

import sys

from netvoyager.cli import main

if __name__ == "__main__":
    sys.exit(main())
