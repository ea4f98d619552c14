"""
Bundle assembler.

Turns a `CapabilityConfig` into the text of a custom entry module plus a
core-only module. Every backend section lists only the kernels the provider
can import for that backend, so a bundler can drop everything else.
"""

from __future__ import annotations

import logging
from typing import List

from custom_module.core.interfaces import ImportProvider
from custom_module.core.lines import (
    GRADIENTS_SEPARATOR,
    add_line,
    backend_separator,
    get_preamble,
    join_lines,
    register_gradient_config_str,
    register_kernel_str,
)
from custom_module.core.types import CapabilityConfig, CustomModuleFiles

logger = logging.getLogger(__name__)


def get_custom_module_string(
    config: CapabilityConfig, module_provider: ImportProvider
) -> CustomModuleFiles:
    """
    Assemble the full and core-only bundle documents.

    Parameters
    ----------
    config : CapabilityConfig
        Kernels, backends, gradient mode and models to include.
    module_provider : ImportProvider
        Renders every import statement and config identifier.

    Returns
    -------
    CustomModuleFiles
        ``tfjs`` with the full registration program and ``core`` with the
        core import only.

    Notes
    -----
    A kernel the provider cannot import for a backend produces no output for
    that pair. Provider exceptions propagate unchanged.
    """
    preamble = get_preamble()
    tfjs: List[str] = [preamble]

    add_line(tfjs, module_provider.import_core_str(config.forward_mode_only))
    if len(config.models) > 0:
        add_line(tfjs, module_provider.import_converter_str())

    for backend in config.backends:
        add_line(tfjs, backend_separator(backend))
        add_line(tfjs, module_provider.import_backend_str(backend))
        for kernel_name in config.kernels:
            kernel_import = module_provider.import_kernel_str(kernel_name, backend)
            if kernel_import.import_statement:
                add_line(tfjs, kernel_import.import_statement)
                add_line(tfjs, register_kernel_str(kernel_import.kernel_config_id))
            else:
                logger.debug("Skipping kernel %s on backend %s", kernel_name, backend)

    if not config.forward_mode_only:
        add_line(tfjs, GRADIENTS_SEPARATOR)
        for kernel_name in config.kernels:
            grad_import = module_provider.import_gradient_config_str(kernel_name)
            if grad_import.import_statement:
                add_line(tfjs, grad_import.import_statement)
                add_line(
                    tfjs, register_gradient_config_str(grad_import.grad_config_id)
                )
            else:
                logger.debug("No gradient registered for kernel %s", kernel_name)

    # Core module for imports within dependent packages
    core: List[str] = [preamble]
    add_line(core, module_provider.import_core_str(config.forward_mode_only))

    logger.info(
        "Assembled bundle with %d kernels over %d backends",
        len(config.kernels),
        len(config.backends),
    )
    return CustomModuleFiles(tfjs=join_lines(tfjs), core=join_lines(core))


assemble_bundle = get_custom_module_string
