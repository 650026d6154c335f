"""Secure project resolution for the form labeling tool."""

__version__ = "0.1.0"
