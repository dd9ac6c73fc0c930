"""
Entry point for running stepbar as a module.

Usage: python -m stepbar [command] [options]
"""
from .cli import main

if __name__ == "__main__":
    main()
