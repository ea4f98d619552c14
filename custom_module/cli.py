"""
Command line driver: reads a bundle config file, runs the generators and
writes the resulting modules to ``outputPath``.

Config file keys
----------------
kernels : list[str]
backends : list[str]
models : list[str]            paths of model.json files, default []
forwardModeOnly : bool        default true
outputPath : str              required
moduleType : "esm" | "commonjs", default "esm"
converterOps : list[str]      ops for the converter module, default []
kernelRegistry : str          optional path of a KernelRegistry JSON file
"""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Tuple

from custom_module.core.bundle import get_custom_module_string
from custom_module.core.converter_ops import get_custom_converter_ops_module
from custom_module.core.errors import ConfigFileError, CustomModuleError
from custom_module.core.registry import KernelRegistry
from custom_module.core.types import CapabilityConfig, ModelDescriptor
from custom_module.logging.logging import setup_logging
from custom_module.providers import PROVIDERS

logger = logging.getLogger(__name__)

TFJS_FILE_NAME = "custom_tfjs.js"
CORE_FILE_NAME = "custom_tfjs_core.js"
CONVERTER_OPS_FILE_NAME = "custom_ops_for_converter.js"


@dataclass(frozen=True)
class BundleFileConfig:
    capabilities: CapabilityConfig
    output_path: pathlib.Path
    module_type: str = "esm"
    converter_ops: Tuple[str, ...] = field(default_factory=tuple)
    kernel_registry: pathlib.Path | None = None


def _string_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigFileError(f"'{key}' must be a list of strings")
    return value


def parse_bundle_config(data: Any, base_dir: pathlib.Path) -> BundleFileConfig:
    """
    Validate a decoded config file. Relative paths resolve against
    ``base_dir`` (the directory holding the config file).
    """
    if not isinstance(data, dict):
        raise ConfigFileError("Config file must contain a JSON object")

    output_path = data.get("outputPath")
    if not isinstance(output_path, str) or not output_path:
        raise ConfigFileError("'outputPath' is required")

    module_type = data.get("moduleType", "esm")
    if module_type not in PROVIDERS:
        raise ConfigFileError(
            f"Unknown moduleType {module_type!r}, expected one of {sorted(PROVIDERS)}"
        )

    forward_mode_only = data.get("forwardModeOnly", True)
    if not isinstance(forward_mode_only, bool):
        raise ConfigFileError("'forwardModeOnly' must be a boolean")

    registry = data.get("kernelRegistry")
    if registry is not None and not isinstance(registry, str):
        raise ConfigFileError("'kernelRegistry' must be a path")

    capabilities = CapabilityConfig(
        kernels=tuple(_string_list(data, "kernels")),
        backends=tuple(_string_list(data, "backends")),
        forward_mode_only=forward_mode_only,
        models=tuple(
            ModelDescriptor(path) for path in _string_list(data, "models")
        ),
    )
    return BundleFileConfig(
        capabilities=capabilities,
        output_path=base_dir / output_path,
        module_type=module_type,
        converter_ops=tuple(_string_list(data, "converterOps")),
        kernel_registry=base_dir / registry if registry else None,
    )


def load_bundle_config(path: str | pathlib.Path) -> BundleFileConfig:
    path = pathlib.Path(path)
    if not path.is_file():
        raise ConfigFileError(f"Config file {path} does not exist")
    try:
        with open(path) as f_in:
            data = json.load(f_in)
    except json.JSONDecodeError as exc:
        raise ConfigFileError(f"Config file {path} is not valid JSON: {exc}") from exc
    return parse_bundle_config(data, path.parent)


def write_bundle(config: BundleFileConfig) -> list[pathlib.Path]:
    """
    Run both generators for ``config`` and write their output files.

    Returns the written paths in write order.
    """
    registry = (
        KernelRegistry.from_json(config.kernel_registry)
        if config.kernel_registry is not None
        else None
    )
    provider = PROVIDERS[config.module_type](registry=registry)
    files = get_custom_module_string(config.capabilities, provider)

    config.output_path.mkdir(parents=True, exist_ok=True)
    outputs = {
        TFJS_FILE_NAME: files.tfjs,
        CORE_FILE_NAME: files.core,
    }
    if config.capabilities.models and config.converter_ops:
        outputs[CONVERTER_OPS_FILE_NAME] = get_custom_converter_ops_module(
            config.converter_ops, provider
        )

    written = []
    for file_name, contents in outputs.items():
        target = config.output_path / file_name
        target.write_text(contents)
        logger.info("Wrote %s", target)
        written.append(target)
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="custom-module",
        description="Generate a custom tree-shakeable tfjs entry module",
    )
    parser.add_argument(
        "--config", required=True, help="Path to the bundle config JSON file"
    )
    parser.add_argument(
        "--log-level", default=None, help="Override the custom_module log level"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    setup_logging(args.log_level)

    try:
        config = load_bundle_config(args.config)
        write_bundle(config)
    except CustomModuleError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
