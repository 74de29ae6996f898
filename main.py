#!/usr/bin/env python3
"""
wangtiler - seamless Wang tilings from a set of 8 tiles.

Run this to render a tiling, or pass --tui for the interactive viewer.
"""

import sys

from wangtiler.main import main

if __name__ == "__main__":
    sys.exit(main())
