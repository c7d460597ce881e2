"""Site Editor - compose a one-page website and export it as HTML."""

__version__ = "0.1.0"
