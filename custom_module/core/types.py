"""
Value types passed into and out of the generators.

These dataclasses are pure data: they are frozen, carry no behaviour beyond
construction-time validation, and are meant to be built once per generator
call. Ordering of the sequences is significant since it fixes the emission
order of the generated documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from custom_module.core.errors import DuplicateEntryError, InvalidIdentifierError
from custom_module.custom_module import Config


def _check_names(field_name: str, names: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(names, str):
        raise InvalidIdentifierError(
            names, f"{field_name} must be a sequence of names, not a string"
        )
    policy = Config().duplicate_policy
    seen: list[str] = []
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise InvalidIdentifierError(
                name, f"{field_name} entries must be non-empty strings"
            )
        if name in seen:
            if policy == "dedupe":
                continue
            raise DuplicateEntryError(field_name, name)
        seen.append(name)
    return tuple(seen)


@dataclass(frozen=True)
class ModelDescriptor:
    """
    Reference to a model whose presence pulls the converter into a bundle.

    Attributes
    ----------
    path : str
        Location of the model artifact (e.g. a ``model.json``).
    name : str | None
        Optional human-readable label.
    """

    path: str
    name: str | None = None


@dataclass(frozen=True)
class CapabilityConfig:
    """
    Closed set of capabilities a consuming application needs.

    Attributes
    ----------
    kernels : tuple[str, ...]
        Kernel names in emission order, unique and case-sensitive.
    backends : tuple[str, ...]
        Backend names in emission order, unique and case-sensitive.
    forward_mode_only : bool
        When True the bundle leaves out every gradient registration.
    models : tuple[ModelDescriptor, ...]
        Models the bundle has to load; any entry triggers the converter
        import.

    Raises
    ------
    DuplicateEntryError
        A kernel or backend is listed twice and the active duplicate policy
        is ``"reject"``.
    InvalidIdentifierError
        A kernel or backend name is empty or not a string.
    """

    kernels: Tuple[str, ...] = ()
    backends: Tuple[str, ...] = ()
    forward_mode_only: bool = True
    models: Tuple[ModelDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kernels", _check_names("kernels", self.kernels))
        object.__setattr__(
            self, "backends", _check_names("backends", self.backends)
        )
        object.__setattr__(self, "forward_mode_only", bool(self.forward_mode_only))
        object.__setattr__(
            self,
            "models",
            tuple(
                m if isinstance(m, ModelDescriptor) else ModelDescriptor(str(m))
                for m in self.models
            ),
        )


@dataclass(frozen=True)
class KernelImportResult:
    """
    Provider answer for one (kernel, backend) pair.

    ``import_statement`` is None when the kernel has no implementation on
    the backend; the pair is then skipped without output.
    """

    import_statement: str | None
    kernel_config_id: str


@dataclass(frozen=True)
class GradientImportResult:
    """
    Provider answer for the gradient config of one kernel.
    """

    import_statement: str | None
    grad_config_id: str


@dataclass(frozen=True)
class CustomModuleFiles:
    """
    Generated documents.

    Attributes
    ----------
    tfjs : str
        Full bundle: core, converter, backends, kernels and gradients.
    core : str
        Core-only bundle used by dependent packages.
    """

    tfjs: str
    core: str
