"""
Shared protocols for rule evaluation.

The evaluator knows nothing about the host's object model: it only asks a
resolver for a field by path. Any callable works (a closure, a bound
method, an object with ``__call__`` such as ObjectFieldResolver).
"""

from __future__ import annotations

from typing import Callable, Optional

from ..types import ResolvedField


# Returns the field at ``path``, or None when it cannot be resolved
FieldResolver = Callable[[str], Optional[ResolvedField]]
