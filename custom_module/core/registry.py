"""
Explicit kernel availability lookup used by the concrete providers.

A `KernelRegistry` answers two side-effect-free questions: does a backend
ship a kernel, and does a kernel have a registered gradient. It replaces
any reliance on what happens to be registered at import time.
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping

from custom_module.core.errors import ConfigFileError


def _is_string_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


@dataclass(frozen=True)
class KernelRegistry:
    """
    Attributes
    ----------
    kernels : Mapping[str, FrozenSet[str]]
        Backend name to the kernel names implemented by that backend.
    gradients : FrozenSet[str]
        Kernel names with a registered gradient config.
    """

    kernels: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    gradients: FrozenSet[str] = frozenset()

    @classmethod
    def from_mapping(
        cls,
        kernels: Mapping[str, Iterable[str]],
        gradients: Iterable[str] = (),
    ) -> "KernelRegistry":
        frozen: Dict[str, FrozenSet[str]] = {
            backend: frozenset(names) for backend, names in kernels.items()
        }
        return cls(kernels=frozen, gradients=frozenset(gradients))

    @classmethod
    def from_json(cls, path: str | pathlib.Path) -> "KernelRegistry":
        """
        Load a registry from a JSON file shaped like
        ``{"kernels": {"cpu": ["Add"]}, "gradients": ["Add"]}``.
        """
        path = pathlib.Path(path)
        try:
            with open(path) as f_in:
                data = json.load(f_in)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigFileError(f"Cannot read kernel registry {path}: {exc}") from exc
        if not isinstance(data, dict) or not isinstance(data.get("kernels", {}), dict):
            raise ConfigFileError(f"Malformed kernel registry {path}")
        kernels = data.get("kernels", {})
        gradients = data.get("gradients", [])
        for key, value in [*kernels.items(), ("gradients", gradients)]:
            if not _is_string_list(value):
                raise ConfigFileError(
                    f"Malformed kernel registry {path}: '{key}' must be a list of strings"
                )
        return cls.from_mapping(kernels, gradients)

    @property
    def backends(self) -> FrozenSet[str]:
        return frozenset(self.kernels)

    def has_kernel(self, kernel_name: str, backend: str) -> bool:
        return kernel_name in self.kernels.get(backend, frozenset())

    def has_gradient(self, kernel_name: str) -> bool:
        return kernel_name in self.gradients
