"""
Line helpers shared by the bundle and converter-ops generators.
"""

from __future__ import annotations

from typing import List

from custom_module.custom_module import Config

AUTOGENERATED_BANNER = "// This file is autogenerated."
CONVERTER_OPS_BANNER = "// This file is autogenerated\n"
GRADIENTS_SEPARATOR = "\n//Gradients"


def get_preamble() -> str:
    """
    Banner placed at the top of every bundle document.

    If a license header is configured via ``Config().license_header`` it is
    emitted above the banner. The preamble never depends on the clock so that
    output stays byte-identical between runs.
    """
    header = Config().license_header
    if header:
        return f"{header.rstrip()}\n\n{AUTOGENERATED_BANNER}\n"
    return f"{AUTOGENERATED_BANNER}\n"


def add_line(target: List[str], line: str) -> None:
    target.append(line)


def backend_separator(backend: str) -> str:
    return f"\n//backend = {backend}"


def register_kernel_str(kernel_config_id: str) -> str:
    return f"registerKernel({kernel_config_id});"


def register_gradient_config_str(grad_config_id: str) -> str:
    return f"registerGradient({grad_config_id});"


def join_lines(lines: List[str]) -> str:
    return "\n".join(lines)
