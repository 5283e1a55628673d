from __future__ import annotations
from salat.core.registry import MethodRegistry
from salat.engines.methods import DEFAULT_PARAMS, standard_methods

def build_registry() -> MethodRegistry:
    return MethodRegistry(standard_methods(), default=DEFAULT_PARAMS)
