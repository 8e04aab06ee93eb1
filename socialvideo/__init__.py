"""Social video analysis API: normalized YouTube metadata and captions."""

__version__ = "0.1.0"
