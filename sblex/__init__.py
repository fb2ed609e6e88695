"""Morphology lookup for Swedish lexical resources: tries, a key-value store and HTTP services."""

__version__ = "0.1.0"