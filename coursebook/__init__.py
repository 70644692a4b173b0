"""mdbook preprocessor and renderer for course books, and worked exercise solutions."""

__version__ = "0.1.0"