#!/usr/bin/env python3
"""
O.M.G. interpreter entry point.

Usage: python omg.py program.omg [--verbose]
"""

from omglang.interpreter import main

if __name__ == '__main__':
    main()
