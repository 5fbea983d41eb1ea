#!/usr/bin/env python3
"""
Liri - Main entry point.

An interactive command-line tool that shows your favorited tweets and
looks up songs on Spotify and movies on OMDb.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from liri.cli import main

if __name__ == "__main__":
    main()
