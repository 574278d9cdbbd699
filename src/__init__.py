"""
ShowIf - Conditional field visibility for object inspectors

Declarative rules that show or hide an inspector field depending on the
current value of another field, plus a reference inspector host.
"""

__version__ = "1.0.0"
__author__ = "ShowIf"

from .config import get_config
from .showif import (
    Rule,
    Verdict,
    evaluate,
    show_if,
)

__all__ = [
    "__version__",
    "get_config",
    "Rule",
    "Verdict",
    "evaluate",
    "show_if",
]
