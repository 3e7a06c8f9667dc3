"""Runtime value operations and string-literal unescaping for a small expression language."""

__version__ = "0.1.0"