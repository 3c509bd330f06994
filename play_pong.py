#!/usr/bin/env python3
"""
Main script to launch Duel Pong with PyGame graphical interface
"""

import sys

from duel_pong.gui.game_app import main

if __name__ == "__main__":
    sys.exit(main())
