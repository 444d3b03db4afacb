#!/usr/bin/env python3
"""
Mars Rover plateau simulation

Run with: python main.py mission.txt
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from mars_rover.main import main

if __name__ == "__main__":
    sys.exit(main())
