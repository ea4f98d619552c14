"""
Shared lookup logic for the concrete import providers.

Subclasses only decide how a statement is spelled for their module system;
identifier naming, backend package resolution and the registry checks live
here so that every provider skips exactly the same kernels.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from custom_module.core.errors import UnsupportedBackendError
from custom_module.core.registry import KernelRegistry
from custom_module.core.types import GradientImportResult, KernelImportResult
from custom_module.providers.naming import (
    BACKEND_PACKAGES,
    CORE_PACKAGE,
    kernel_name_to_variable_name,
    op_name_to_file_name,
)

logger = logging.getLogger(__name__)


class BaseModuleProvider(ABC):
    """
    Parameters
    ----------
    registry : KernelRegistry | None
        Kernel and gradient availability. When None every kernel is assumed
        to exist on every backend and to have a gradient.
    backend_packages : Mapping[str, str] | None
        Backend name to npm package; defaults to the tfjs backends.
    """

    def __init__(
        self,
        registry: KernelRegistry | None = None,
        backend_packages: Mapping[str, str] | None = None,
    ) -> None:
        self.registry = registry
        self.backend_packages = dict(
            backend_packages if backend_packages is not None else BACKEND_PACKAGES
        )

    def backend_path(self, backend: str, kernel_name: str | None = None) -> str:
        try:
            return self.backend_packages[backend]
        except KeyError:
            raise UnsupportedBackendError(backend, kernel_name) from None

    def kernel_config_id(self, kernel_name: str, backend: str) -> str:
        return f"{kernel_name}_{backend}"

    def grad_config_id(self, kernel_name: str) -> str:
        return f"{kernel_name_to_variable_name(kernel_name)}GradConfig"

    def kernel_path(self, kernel_name: str, backend: str) -> str:
        return f"{self.backend_path(backend, kernel_name)}/dist/kernels/{kernel_name}"

    def gradient_path(self, kernel_name: str) -> str:
        return f"{CORE_PACKAGE}/dist/gradients/{kernel_name}_grad"

    def op_path(self, op_name: str, namespace: str | None = None) -> str:
        file_name = op_name_to_file_name(op_name)
        if namespace is None:
            return f"{CORE_PACKAGE}/dist/ops/{file_name}"
        return f"{CORE_PACKAGE}/dist/ops/{namespace}/{file_name}"

    def import_kernel_str(
        self, kernel_name: str, backend: str
    ) -> KernelImportResult:
        kernel_config_id = self.kernel_config_id(kernel_name, backend)
        path = self.kernel_path(kernel_name, backend)
        if self.registry is not None and not self.registry.has_kernel(
            kernel_name, backend
        ):
            logger.debug("Kernel %s not found for backend %s", kernel_name, backend)
            return KernelImportResult(None, kernel_config_id)
        config_name = f"{kernel_name_to_variable_name(kernel_name)}Config"
        return KernelImportResult(
            self.render_named_import(config_name, kernel_config_id, path),
            kernel_config_id,
        )

    def import_gradient_config_str(self, kernel_name: str) -> GradientImportResult:
        grad_config_id = self.grad_config_id(kernel_name)
        if self.registry is not None and not self.registry.has_gradient(kernel_name):
            return GradientImportResult(None, grad_config_id)
        return GradientImportResult(
            self.render_named_import(
                grad_config_id, grad_config_id, self.gradient_path(kernel_name)
            ),
            grad_config_id,
        )

    def import_namespaced_ops_for_converter_str(
        self, namespace: str, op_names: Sequence[str]
    ) -> str:
        result = []
        for op_name in op_names:
            result.append(
                self.render_named_import(
                    op_name,
                    f"{op_name}_{namespace}",
                    self.op_path(op_name, namespace),
                )
            )
        result.append(self.render_namespace_export(namespace, op_names))
        return "\n".join(result)

    @abstractmethod
    def import_core_str(self, forward_mode_only: bool) -> str:
        pass

    @abstractmethod
    def import_converter_str(self) -> str:
        pass

    @abstractmethod
    def import_backend_str(self, backend: str) -> str:
        pass

    @abstractmethod
    def import_op_for_converter_str(self, op_name: str) -> str:
        pass

    @abstractmethod
    def render_named_import(self, symbol: str, alias: str, path: str) -> str:
        """
        Statement binding ``symbol`` exported by ``path`` to ``alias``.
        """

    @abstractmethod
    def render_namespace_export(
        self, namespace: str, op_names: Sequence[str]
    ) -> str:
        """
        Statement exporting ``<op>_<namespace>`` aliases as one namespace object.
        """
