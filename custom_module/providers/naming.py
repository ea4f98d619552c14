"""
Identifier and path conventions of the tfjs package layout.
"""

from __future__ import annotations

import re

CORE_PACKAGE = "@tensorflow/tfjs-core"
CONVERTER_PACKAGE = "@tensorflow/tfjs-converter"

BACKEND_PACKAGES = {
    "cpu": "@tensorflow/tfjs-backend-cpu",
    "webgl": "@tensorflow/tfjs-backend-webgl",
    "wasm": "@tensorflow/tfjs-backend-wasm",
    "webgpu": "@tensorflow/tfjs-backend-webgpu",
}

# Ops whose source file does not follow the plain snake_case rule.
_OP_FILE_EXCEPTIONS = {
    "isNaN": "is_nan",
}

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")


def snake_case(name: str) -> str:
    name = _ACRONYM.sub(r"\1_\2", name)
    name = _LOWER_UPPER.sub(r"\1_\2", name)
    return name.lower()


def op_name_to_file_name(op_name: str) -> str:
    """
    Source file (without extension) that defines an op.

    ``resizeBilinear`` -> ``resize_bilinear``, ``conv2dTranspose`` ->
    ``conv2d_transpose``, ``spaceToBatchND`` -> ``space_to_batch_nd``.
    """
    if op_name in _OP_FILE_EXCEPTIONS:
        return _OP_FILE_EXCEPTIONS[op_name]
    return snake_case(op_name)


def kernel_name_to_variable_name(kernel_name: str) -> str:
    return kernel_name[:1].lower() + kernel_name[1:]
