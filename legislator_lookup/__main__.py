"""Entry point for running the lookup service as a module.

Usage:
    python -m legislator_lookup
"""

from .main import run

if __name__ == "__main__":
    run()
