"""Utilities: symbol tables, errors, example fixtures."""

from .symbols import SYMBOLS, get_symbol
from .errors import RenderError

__all__ = ["SYMBOLS", "get_symbol", "RenderError"]
