"""Package Express shipping quote calculator."""

__version__ = "0.1.0"
