"""
Ball bouncing inside a rotating cube.

Requirements:
    pip install -e .

Run:
    python main.py                      # window
    python main.py --headless --ticks 5000 --debug
"""
import sys

from spinbox.cli import main

if __name__ == "__main__":
    sys.exit(main())
