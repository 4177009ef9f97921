"""Cutelin: a line-oriented interpreter for integer variables, nested scopes and print statements."""

__version__ = "1.0.0"

BANNER = f"Cutelin interpreter {__version__} is fired up and ready to go!"
