"""
Concrete import providers, one per target module system.

Each provider implements `custom_module.core.interfaces.ImportProvider` and
can be handed to either generator unchanged.
"""

from .commonjs import CommonJsModuleProvider
from .esm import EsmModuleProvider
from .naming import op_name_to_file_name

PROVIDERS = {
    "esm": EsmModuleProvider,
    "commonjs": CommonJsModuleProvider,
}

__all__ = [
    "CommonJsModuleProvider",
    "EsmModuleProvider",
    "PROVIDERS",
    "op_name_to_file_name",
]
