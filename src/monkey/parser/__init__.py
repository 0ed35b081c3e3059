# src/monkey/parser/__init__.py
"""
Parser module for the Monkey language.
"""

from .parser import Parser, precedences

__all__ = ["Parser", "precedences"]
