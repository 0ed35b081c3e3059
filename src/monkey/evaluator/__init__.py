# src/monkey/evaluator/__init__.py
from .core import Evaluator, evaluate, recursion_limit
from .utils import NULL, TRUE, FALSE, is_error, is_truthy

__all__ = ['Evaluator', 'evaluate', 'recursion_limit', 'NULL', 'TRUE', 'FALSE', 'is_error', 'is_truthy']
