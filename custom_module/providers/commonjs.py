"""
Import provider rendering CommonJS ``require`` / ``exports`` syntax.
"""

from __future__ import annotations

from typing import Sequence

from custom_module.providers.base import BaseModuleProvider
from custom_module.providers.naming import CONVERTER_PACKAGE, CORE_PACKAGE


def _reexport(path: str) -> str:
    return f"Object.assign(module.exports, require('{path}'));"


class CommonJsModuleProvider(BaseModuleProvider):
    def import_core_str(self, forward_mode_only: bool) -> str:
        import_lines = [
            f"const {{registerKernel}} = require('{CORE_PACKAGE}/dist/base');",
            f"require('{CORE_PACKAGE}/dist/base_side_effects');",
            _reexport(f"{CORE_PACKAGE}/dist/base"),
        ]
        if not forward_mode_only:
            import_lines.append(
                f"const {{registerGradient}} = require('{CORE_PACKAGE}/dist/base');"
            )
        return "\n".join(import_lines)

    def import_converter_str(self) -> str:
        return _reexport(CONVERTER_PACKAGE)

    def import_backend_str(self, backend: str) -> str:
        return _reexport(f"{self.backend_path(backend)}/dist/base")

    def import_op_for_converter_str(self, op_name: str) -> str:
        return f"exports.{op_name} = require('{self.op_path(op_name)}').{op_name};"

    def render_named_import(self, symbol: str, alias: str, path: str) -> str:
        if symbol == alias:
            return f"const {{{symbol}}} = require('{path}');"
        return f"const {{{symbol}: {alias}}} = require('{path}');"

    def render_namespace_export(
        self, namespace: str, op_names: Sequence[str]
    ) -> str:
        members = [f"\t{op_name}: {op_name}_{namespace}," for op_name in op_names]
        return "\n".join([f"exports.{namespace} = {{", *members, "};"])
