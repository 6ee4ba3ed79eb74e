"""
apply_also: Kotlin-style apply / also helpers for Python.

Chain a transformation or a side effect onto a value inline instead of
splitting initialization into several statements.

Architecture:
- Free functions (apply, apply_ref, also, also_mut) work on any value
- Apply / Also mixins give your own classes the same helpers as methods
- fluent() chains the helpers on values you can't subclass (builtins)
- Traced variants (*_w suffix, fluent_w) record a Log of the steps
- lift.try_* turn exceptions raised by the function into kungfu Results
"""

# Core types
from ._types import Describer, Effect, Mutation, Transform

# Internal helpers (for custom describers)
from . import _helpers

# Core helpers
from .core import also, also_mut, apply, apply_ref

# Method form
from .extension import Also, Apply

# Writer
from . import writer
from .writer import Log, Written, also_mut_w, also_w, apply_ref_w, apply_w, written

# Fluent builders
from .chain import Fluent, FluentW, TracePolicy, fluent, fluent_w

# Exception bridges
from . import lift
from .lift import try_also, try_also_mut, try_apply, try_apply_ref

__all__ = (
    # Types
    "Describer",
    "Effect",
    "Mutation",
    "Transform",
    # Internal helpers
    "_helpers",
    # Core
    "apply",
    "apply_ref",
    "also",
    "also_mut",
    # Method form
    "Apply",
    "Also",
    # Writer
    "writer",
    "Log",
    "Written",
    "written",
    "apply_w",
    "apply_ref_w",
    "also_w",
    "also_mut_w",
    # Fluent
    "Fluent",
    "FluentW",
    "TracePolicy",
    "fluent",
    "fluent_w",
    # Lift
    "lift",
    "try_apply",
    "try_apply_ref",
    "try_also",
    "try_also_mut",
)
