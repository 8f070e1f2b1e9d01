"""Thin HTTP proxy in front of OpenAI chat and image generation."""

__version__ = "0.1.0"
