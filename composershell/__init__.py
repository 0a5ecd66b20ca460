"""Console shell, project explorer and package overview for Composer projects."""

__version__ = "1.0.0"