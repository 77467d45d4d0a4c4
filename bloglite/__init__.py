"""Domain core of a small blog engine: articles, content, versions, events and read models."""

__version__ = "0.1.0"