"""Small console programs and their library code: solid bodies, rationals, HTTP URLs, a stack, a car and text tools."""

__version__ = "1.0.0"