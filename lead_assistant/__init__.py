"""Conversational lead-capture assistant for property listing pages."""

__version__ = "0.1.0"
