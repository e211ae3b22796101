from .args import CompareArgs, parse_args
from .controller import main

__all__ = [
    "CompareArgs",
    "main",
    "parse_args",
]
