"""
Writer
======

Traces for helper chains:
- Log (monoidal accumulator)
- Written[T, W] (value + log)
- *_w helpers (core helpers that also append a note)
"""

from .log import Log
from .result import Written, written
from .ops import also_mut_w, also_w, apply_ref_w, apply_w

__all__ = (
    "Log",
    "Written",
    "written",
    "apply_w",
    "apply_ref_w",
    "also_w",
    "also_mut_w",
)
