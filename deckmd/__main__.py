#!/usr/bin/env python3
"""
Entry point for running deckmd as a module: python -m deckmd
"""

import sys

from deckmd.main import main


if __name__ == '__main__':
    sys.exit(main())
