"""Main entry point for the sdvalidation package when run as a module.

This module enables running sdvalidation directly using 'python -m sdvalidation'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
