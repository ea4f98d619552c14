"""
Protocol describing what the generators need from an import provider.

A provider knows how to render import statements for one module system.
The generators only concatenate what it returns; they never inspect the
strings or the opaque config identifiers.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from custom_module.core.types import GradientImportResult, KernelImportResult


@runtime_checkable
class ImportProvider(Protocol):
    def import_core_str(self, forward_mode_only: bool) -> str: ...
    def import_converter_str(self) -> str: ...
    def import_backend_str(self, backend: str) -> str: ...
    def import_kernel_str(
        self, kernel_name: str, backend: str
    ) -> KernelImportResult: ...
    def import_gradient_config_str(
        self, kernel_name: str
    ) -> GradientImportResult: ...
    def import_namespaced_ops_for_converter_str(
        self, namespace: str, op_names: Sequence[str]
    ) -> str: ...
    def import_op_for_converter_str(self, op_name: str) -> str: ...
