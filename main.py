#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--verbose] [play] [--width W] [--height H] [--mines N] [--seed S]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
