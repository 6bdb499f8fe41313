"""Game of Life grids and hash tables with pluggable dispersion and exploration."""

__version__ = "1.0.0"