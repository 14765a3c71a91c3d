"""
Main entry point for running the package directly.

    python -m patternkit --theme italian
"""

from patternkit.cli import run

if __name__ == "__main__":
    run()
