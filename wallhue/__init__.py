"""Recolour images to colour schemes, replace or invert colours and extract their palettes."""

__version__ = "0.2.1"