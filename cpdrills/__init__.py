"""Classic competitive-programming techniques as small, tested functions, with a small command line."""

__version__ = "0.1.0"