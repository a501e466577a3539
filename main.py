#!/usr/bin/env python3
"""
Main Application Entry Point

Command-line interface for the creational pattern examples.
"""

import sys

from creational.cli import main


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)
