"""Financial growth projection calculators."""

__version__ = "0.1.0"
