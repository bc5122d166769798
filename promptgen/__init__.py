"""Project analysis and AI prompt generation."""

__version__ = "0.1.0"
