"""
Main entry point for emorand.
"""

import sys

from emorand.cli.commands import run

def main():
    """Main entry point"""
    sys.exit(run())

if __name__ == "__main__":
    main()
