"""Five-dimensional chess: chess across parallel timelines of boards."""

__version__ = "0.1.0"
