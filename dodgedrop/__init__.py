"""Dodge Drop: a pygame arcade game of dodging falling blocks."""

__version__ = "1.0.0"