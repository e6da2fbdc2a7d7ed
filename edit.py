#!/usr/bin/python3

"""
Entry point script for HexPy.
"""

from src.hexpy.__main__ import main


if __name__ == "__main__":
    main()
