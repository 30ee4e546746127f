"""
``alternating``
===============

Provides iterator adapters which take turns between the items of two
iterators, with a choice of behaviour once one of them runs out.
"""
from ._version import __version__
from . import policies
from .alternator import (
    Alternating,
    AlternatingAll,
    AlternatingNoRemainder,
    alternate_with,
    alternate_with_all,
    alternate_with_no_remainder,
    turns,
)
from .base import Fused, fuse


__all__ = [
    "__version__",
    "policies",
    "Alternating",
    "AlternatingAll",
    "AlternatingNoRemainder",
    "alternate_with",
    "alternate_with_all",
    "alternate_with_no_remainder",
    "turns",
    "Fused",
    "fuse",
]
