"""
Exception hierarchy shared by the generators, providers and the CLI.

The generators themselves never catch anything: provider failures travel to
the caller exactly as the provider raised them.
"""

from __future__ import annotations


class CustomModuleError(Exception):
    """Base class for every error raised by custom_module."""


class DuplicateEntryError(CustomModuleError, ValueError):
    def __init__(self, field: str, name: str) -> None:
        super().__init__(f"Duplicate entry {name!r} in {field}")
        self.field = field
        self.name = name


class InvalidIdentifierError(CustomModuleError, ValueError):
    def __init__(self, identifier: object, reason: str) -> None:
        super().__init__(f"Invalid identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason


class KernelImportError(CustomModuleError):
    """
    Raised by a provider that cannot render an import for a kernel.

    Attributes
    ----------
    kernel_name : str | None
        Kernel that failed to resolve, None when the failure is backend-wide.
    backend : str | None
        Backend the kernel was requested for, None for gradient lookups.
    """

    def __init__(
        self,
        message: str,
        *,
        kernel_name: str | None = None,
        backend: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kernel_name = kernel_name
        self.backend = backend


class UnsupportedBackendError(KernelImportError):
    def __init__(self, backend: str, kernel_name: str | None = None) -> None:
        super().__init__(
            f"Unsupported backend {backend!r}",
            kernel_name=kernel_name,
            backend=backend,
        )


class ConfigFileError(CustomModuleError):
    """Bundle config file is missing or malformed."""
