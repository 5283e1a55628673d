from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Dict, List, Union

from .errors import MethodExistsError
from .types import CalculationMethod, MethodParams

logger = logging.getLogger(__name__)

MethodName = Union[CalculationMethod, str]


def method_key(name: MethodName) -> str:
    if isinstance(name, CalculationMethod):
        return name.value
    return str(name)


@dataclass
class MethodRegistry:
    _methods: Dict[str, MethodParams]
    default: MethodParams

    def get(self, name: MethodName) -> MethodParams:
        """Parameters for ``name``; unknown names fall back to ``default``."""
        key = method_key(name)
        if key not in self._methods:
            logger.debug("Unknown calculation method %r, using default %s", key, self.default)
            return self.default
        return self._methods[key]

    def __contains__(self, name: MethodName) -> bool:
        return method_key(name) in self._methods

    def list(self) -> List[str]:
        return sorted(self._methods.keys())

    def register(self, name: MethodName, params: MethodParams, *, overwrite: bool = False) -> None:
        key = method_key(name)
        if (not overwrite) and (key in self._methods):
            raise MethodExistsError(f"Method '{key}' already exists. Use overwrite=True to replace.")
        self._methods[key] = params
