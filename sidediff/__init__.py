"""Side-by-side rendering of unified diffs for the terminal."""

__version__ = "0.1.0"
