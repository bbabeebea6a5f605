#!/usr/bin/env python3
"""
run.py - Main entry point for dropfour

    python run.py play
    python run.py analyze --position 1,1,1,1,0,...
    python run.py benchmark --iterations 500
"""

import os
import sys

# Make the package importable when run from a source checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dropfour.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
