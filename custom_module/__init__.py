"""Top-level custom_module helpers."""

from custom_module import core, providers
from custom_module.core.bundle import assemble_bundle, get_custom_module_string
from custom_module.core.converter_ops import (
    get_custom_converter_ops_module,
    group_converter_ops,
    split_converter_ops,
)
from custom_module.core.registry import KernelRegistry
from custom_module.core.types import (
    CapabilityConfig,
    CustomModuleFiles,
    GradientImportResult,
    KernelImportResult,
    ModelDescriptor,
)
from custom_module.custom_module import Config, Session

__all__ = [
    "core",
    "providers",
    "assemble_bundle",
    "get_custom_module_string",
    "get_custom_converter_ops_module",
    "group_converter_ops",
    "split_converter_ops",
    "KernelRegistry",
    "CapabilityConfig",
    "CustomModuleFiles",
    "GradientImportResult",
    "KernelImportResult",
    "ModelDescriptor",
    "Config",
    "Session",
]
