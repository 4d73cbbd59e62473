"""Plain-text PGM/PPM images: loading, saving, 3x3 convolution filters, timing and command-line tools."""

__version__ = "0.1.0"