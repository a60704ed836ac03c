"""Run with: python -m rebaseview"""
import sys

from rebaseview.main import main

if __name__ == "__main__":
    sys.exit(main())
