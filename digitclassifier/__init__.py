"""Nearest-neighbour classification of labelled sample vectors, with a command line."""

__version__ = "0.1.0"