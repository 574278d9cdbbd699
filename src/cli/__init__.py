"""
ShowIf command-line interface.
"""

from .argparser import setup_argparse
from .utils import console

__all__ = [
    "setup_argparse",
    "console",
]
