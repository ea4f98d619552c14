"""
Source generators for custom, tree-shakeable entry modules.

These functions are pure: configuration and a provider in, text out. They do
no file I/O and keep no state between calls.
"""

from custom_module.core import (
    bundle,
    converter_ops,
    errors,
    interfaces,
    lines,
    registry,
    types,
)

__all__ = [
    "bundle",
    "converter_ops",
    "errors",
    "interfaces",
    "lines",
    "registry",
    "types",
]
