"""A terminal game of macrodata refinement: game state, palettes, screens and the terminal loop."""

__version__ = "0.1.0"