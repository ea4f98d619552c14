from typing import Any

NAMESPACE_POLICIES = ("reject", "first_segment")
DUPLICATE_POLICIES = ("reject", "dedupe")


class Config:
    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "Config":
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_initialized"):
            self._initialized = True  # Prevents reinitialization
            self._namespace_policy = "reject"
            self._duplicate_policy = "reject"
            self._license_header: str | None = None

    def set_namespace_policy(self, policy: str) -> None:
        """
        Choose how operation identifiers with more than one separator
        are handled by the converter ops grouper
        Parameters
        ----------
        policy: str
            ``"reject"`` raises InvalidIdentifierError, ``"first_segment"``
            keeps the first segment as namespace and the rest as op name
        """
        if policy not in NAMESPACE_POLICIES:
            raise ValueError(f"Unknown namespace policy: {policy}")
        self._namespace_policy = policy

    @property
    def namespace_policy(self) -> str:
        return self._namespace_policy

    def set_duplicate_policy(self, policy: str) -> None:
        if policy not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy: {policy}")
        self._duplicate_policy = policy

    @property
    def duplicate_policy(self) -> str:
        return self._duplicate_policy

    @property
    def license_header(self) -> str | None:
        return self._license_header

    @license_header.setter
    def license_header(self, header: str | None) -> None:
        self._license_header = header

    def set_license_header(self, header: str | None) -> None:
        self._license_header = header


class Session:
    """
    Lightweight context manager to scope Config settings per run.

    Example:
        with Session(namespace_policy="first_segment"):
            ...
    Restores previous Config values on exit so tests/runs stay isolated.
    """

    _UNSET = object()

    def __init__(
        self,
        *,
        namespace_policy: str | None = None,
        duplicate_policy: str | None = None,
        license_header: Any = _UNSET,
    ) -> None:
        cfg = Config()
        self._prev = {
            "namespace_policy": cfg.namespace_policy,
            "duplicate_policy": cfg.duplicate_policy,
            "license_header": cfg.license_header,
        }
        self._namespace_policy = namespace_policy
        self._duplicate_policy = duplicate_policy
        self._license_header = license_header
        self._cfg = cfg

    def __enter__(self) -> "Config":
        if self._namespace_policy is not None:
            self._cfg.set_namespace_policy(self._namespace_policy)
        if self._duplicate_policy is not None:
            self._cfg.set_duplicate_policy(self._duplicate_policy)
        if self._license_header is not Session._UNSET:
            self._cfg.set_license_header(self._license_header)
        return self._cfg

    def __exit__(self, exc_type, exc, tb) -> None:
        self._cfg.set_namespace_policy(self._prev["namespace_policy"])
        self._cfg.set_duplicate_policy(self._prev["duplicate_policy"])
        self._cfg.set_license_header(self._prev["license_header"])
