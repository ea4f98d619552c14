"""
Converter ops module generator.

Namespaced ops (``image.resizeBilinear``) are re-exported as members of one
namespace object, so all ops of a namespace are rendered in a single
statement. Flat ops are independent exports and are rendered one by one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from custom_module.core.errors import InvalidIdentifierError
from custom_module.core.interfaces import ImportProvider
from custom_module.core.lines import CONVERTER_OPS_BANNER, join_lines
from custom_module.custom_module import Config

SEPARATOR = "."


@dataclass
class SplitOps:
    """
    Ops partitioned into namespace groups and flat ops.

    ``namespaced`` keeps namespaces in first-seen order and op names in
    encounter order.
    """

    namespaced: Dict[str, List[str]] = field(default_factory=dict)
    flat: List[str] = field(default_factory=list)


def _split_identifier(op_symbol: str, policy: str) -> Tuple[str | None, str]:
    if not isinstance(op_symbol, str) or not op_symbol:
        raise InvalidIdentifierError(op_symbol, "op identifiers must be non-empty")
    if SEPARATOR not in op_symbol:
        return None, op_symbol
    namespace, _, op_name = op_symbol.partition(SEPARATOR)
    if SEPARATOR in op_name and policy == "reject":
        raise InvalidIdentifierError(
            op_symbol, "namespaced ops take exactly one separator"
        )
    if not namespace or not op_name:
        raise InvalidIdentifierError(op_symbol, "empty namespace or op name")
    return namespace, op_name


def split_converter_ops(ops: Iterable[str]) -> SplitOps:
    """
    Partition op identifiers in a single pass.

    Parameters
    ----------
    ops : Iterable[str]
        Flat (``"add"``) or namespaced (``"image.resize"``) identifiers.

    Returns
    -------
    SplitOps
        Grouped namespaced ops plus the flat ops in original order.

    Raises
    ------
    InvalidIdentifierError
        For empty identifiers, and for identifiers with more than one
        separator when ``Config().namespace_policy`` is ``"reject"``. Under
        ``"first_segment"`` everything after the first separator is the op
        name.
    """
    policy = Config().namespace_policy
    result = SplitOps()
    for op_symbol in ops:
        namespace, op_name = _split_identifier(op_symbol, policy)
        if namespace is None:
            result.flat.append(op_name)
        else:
            result.namespaced.setdefault(namespace, []).append(op_name)
    return result


def get_custom_converter_ops_module(
    ops: Iterable[str], module_provider: ImportProvider
) -> str:
    result: List[str] = [CONVERTER_OPS_BANNER]
    split = split_converter_ops(ops)

    for namespace, op_names in split.namespaced.items():
        result.append(
            module_provider.import_namespaced_ops_for_converter_str(
                namespace, op_names
            )
        )

    for op_symbol in split.flat:
        result.append(module_provider.import_op_for_converter_str(op_symbol))

    return join_lines(result)


group_converter_ops = get_custom_converter_ops_module
