"""
Import provider rendering ES module syntax.
"""

from __future__ import annotations

from typing import Sequence

from custom_module.providers.base import BaseModuleProvider
from custom_module.providers.naming import CONVERTER_PACKAGE, CORE_PACKAGE


class EsmModuleProvider(BaseModuleProvider):
    def import_core_str(self, forward_mode_only: bool) -> str:
        import_lines = [
            f"import {{registerKernel}} from '{CORE_PACKAGE}/dist/base';",
            f"import '{CORE_PACKAGE}/dist/base_side_effects';",
            f"export * from '{CORE_PACKAGE}/dist/base';",
        ]
        if not forward_mode_only:
            import_lines.append(
                f"import {{registerGradient}} from '{CORE_PACKAGE}/dist/base';"
            )
        return "\n".join(import_lines)

    def import_converter_str(self) -> str:
        return f"export * from '{CONVERTER_PACKAGE}';"

    def import_backend_str(self, backend: str) -> str:
        return f"export * from '{self.backend_path(backend)}/dist/base';"

    def import_op_for_converter_str(self, op_name: str) -> str:
        return f"export {{{op_name}}} from '{self.op_path(op_name)}';"

    def render_named_import(self, symbol: str, alias: str, path: str) -> str:
        if symbol == alias:
            return f"import {{{symbol}}} from '{path}';"
        return f"import {{{symbol} as {alias}}} from '{path}';"

    def render_namespace_export(
        self, namespace: str, op_names: Sequence[str]
    ) -> str:
        members = [f"\t{op_name}: {op_name}_{namespace}," for op_name in op_names]
        return "\n".join([f"export const {namespace} = {{", *members, "};"])
