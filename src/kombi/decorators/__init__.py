"""Decorators: @traced."""

from kombi.decorators.trace import traced

__all__ = ['traced']
