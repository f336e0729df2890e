"""Data model for brain connectivity visual analytics: ROIs, styles, scanned data, subsets, thresholds and interpolation."""

__version__ = "0.1.0"