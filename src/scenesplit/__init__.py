"""Scene splitter - break stories into bounded, classified scenes."""

__version__ = "0.1.0"
