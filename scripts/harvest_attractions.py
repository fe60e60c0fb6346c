# scripts/harvest_attractions.py
"""Run the attractions harvest from a checkout: python -m scripts.harvest_attractions"""
import sys

from pot_attractions.cli import main

if __name__ == "__main__":
    sys.exit(main())
