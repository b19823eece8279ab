"""gobake: bake files into Go source literals."""

__version__ = "0.3.0"
