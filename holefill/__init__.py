"""holefill — boundary-weighted hole filling for grayscale images."""

__version__ = "0.1.0"
