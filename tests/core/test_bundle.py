import logging

import pytest

from custom_module.core.bundle import assemble_bundle, get_custom_module_string
from custom_module.core.errors import KernelImportError
from custom_module.core.lines import GRADIENTS_SEPARATOR, get_preamble
from custom_module.core.types import (
    CapabilityConfig,
    GradientImportResult,
    KernelImportResult,
    ModelDescriptor,
)
from custom_module.custom_module import Session


class FakeProvider:
    """Provider with readable markers; `missing` lists unsupported pairs."""

    def __init__(self, missing=(), no_grad=()):
        self.missing = set(missing)
        self.no_grad = set(no_grad)
        self.kernel_calls = []

    def import_core_str(self, forward_mode_only):
        return f"CORE(forward_only={forward_mode_only})"

    def import_converter_str(self):
        return "CONVERTER"

    def import_backend_str(self, backend):
        return f"BACKEND({backend})"

    def import_kernel_str(self, kernel_name, backend):
        self.kernel_calls.append((kernel_name, backend))
        kid = f"{kernel_name}_{backend}"
        if (kernel_name, backend) in self.missing:
            return KernelImportResult(None, kid)
        return KernelImportResult(f"IMPORT_KERNEL({kid})", kid)

    def import_gradient_config_str(self, kernel_name):
        gid = f"{kernel_name}Grad"
        if kernel_name in self.no_grad:
            return GradientImportResult(None, gid)
        return GradientImportResult(f"IMPORT_GRAD({gid})", gid)

    def import_namespaced_ops_for_converter_str(self, namespace, op_names):
        return f"NS({namespace}:{','.join(op_names)})"

    def import_op_for_converter_str(self, op_name):
        return f"OP({op_name})"


def _lines(text):
    return text.split("\n")


def test_end_to_end_skips_missing_kernel_but_keeps_gradients():
    config = CapabilityConfig(
        kernels=("Add", "Sub"),
        backends=("cpu",),
        forward_mode_only=False,
        models=(),
    )
    provider = FakeProvider(missing={("Sub", "cpu")})
    files = get_custom_module_string(config, provider)

    lines = _lines(files.tfjs)
    assert lines.count("registerKernel(Add_cpu);") == 1
    assert not any("Sub_cpu" in line for line in lines)
    assert [line for line in lines if line.startswith("registerGradient(")] == [
        "registerGradient(AddGrad);",
        "registerGradient(SubGrad);",
    ]


def test_full_document_layout():
    config = CapabilityConfig(
        kernels=("Add",),
        backends=("cpu", "webgl"),
        forward_mode_only=False,
        models=(ModelDescriptor("model.json"),),
    )
    files = get_custom_module_string(config, FakeProvider())
    expected = "\n".join(
        [
            get_preamble(),
            "CORE(forward_only=False)",
            "CONVERTER",
            "\n//backend = cpu",
            "BACKEND(cpu)",
            "IMPORT_KERNEL(Add_cpu)",
            "registerKernel(Add_cpu);",
            "\n//backend = webgl",
            "BACKEND(webgl)",
            "IMPORT_KERNEL(Add_webgl)",
            "registerKernel(Add_webgl);",
            GRADIENTS_SEPARATOR,
            "IMPORT_GRAD(AddGrad)",
            "registerGradient(AddGrad);",
        ]
    )
    assert files.tfjs == expected
    assert files.core == "\n".join([get_preamble(), "CORE(forward_only=False)"])


def test_registration_immediately_follows_import():
    config = CapabilityConfig(
        kernels=("Add", "Mul", "Exp"),
        backends=("cpu", "wasm"),
        forward_mode_only=False,
    )
    provider = FakeProvider(missing={("Mul", "wasm")}, no_grad={"Exp"})
    lines = _lines(get_custom_module_string(config, provider).tfjs)
    for i, line in enumerate(lines):
        if line.startswith("registerKernel("):
            kid = line[len("registerKernel(") : -2]
            assert lines[i - 1] == f"IMPORT_KERNEL({kid})"
        if line.startswith("registerGradient("):
            gid = line[len("registerGradient(") : -2]
            assert lines[i - 1] == f"IMPORT_GRAD({gid})"


def test_each_pair_visited_once_in_declared_order():
    config = CapabilityConfig(kernels=("B", "A"), backends=("webgl", "cpu"))
    provider = FakeProvider()
    get_custom_module_string(config, provider)
    assert provider.kernel_calls == [
        ("B", "webgl"),
        ("A", "webgl"),
        ("B", "cpu"),
        ("A", "cpu"),
    ]


def test_deterministic_output():
    config = CapabilityConfig(
        kernels=("Add", "Sub", "Exp"),
        backends=("cpu", "webgl"),
        forward_mode_only=False,
        models=(ModelDescriptor("a.json"),),
    )
    provider = FakeProvider(missing={("Exp", "webgl")})
    first = get_custom_module_string(config, provider)
    second = get_custom_module_string(config, provider)
    assert first == second
    assert first.tfjs.encode() == second.tfjs.encode()


@pytest.mark.parametrize("forward_mode_only", [True, False])
def test_core_document_is_minimal(forward_mode_only):
    config = CapabilityConfig(
        kernels=("Add", "Sub"),
        backends=("cpu", "webgl"),
        forward_mode_only=forward_mode_only,
        models=(ModelDescriptor("m.json"),),
    )
    core = get_custom_module_string(config, FakeProvider()).core
    assert "//backend" not in core
    assert "registerKernel(" not in core
    assert "registerGradient(" not in core
    assert "CONVERTER" not in core
    assert _lines(core)[-1] == f"CORE(forward_only={forward_mode_only})"


def test_forward_mode_only_suppresses_gradients():
    config = CapabilityConfig(
        kernels=("Add", "Sub"), backends=("cpu",), forward_mode_only=True
    )
    tfjs = get_custom_module_string(config, FakeProvider()).tfjs
    assert "//Gradients" not in tfjs
    assert "registerGradient(" not in tfjs
    assert "IMPORT_GRAD" not in tfjs


def test_gradient_section_present_without_backends():
    config = CapabilityConfig(kernels=("Add",), forward_mode_only=False)
    tfjs = get_custom_module_string(config, FakeProvider()).tfjs
    assert "registerGradient(AddGrad);" in _lines(tfjs)
    assert "//backend" not in tfjs
    assert "registerKernel(" not in tfjs


@pytest.mark.parametrize(
    "models, expected",
    [
        ((), 0),
        ((ModelDescriptor("a.json"),), 1),
        ((ModelDescriptor("a.json"), ModelDescriptor("b.json")), 1),
    ],
)
def test_converter_import_triggered_by_models(models, expected):
    config = CapabilityConfig(kernels=("Add",), backends=("cpu",), models=models)
    lines = _lines(get_custom_module_string(config, FakeProvider()).tfjs)
    assert lines.count("CONVERTER") == expected


def test_provider_errors_propagate_unchanged():
    class FailingProvider(FakeProvider):
        def import_kernel_str(self, kernel_name, backend):
            raise KernelImportError("boom", kernel_name=kernel_name, backend=backend)

    config = CapabilityConfig(kernels=("Add",), backends=("cpu",))
    with pytest.raises(KernelImportError) as excinfo:
        get_custom_module_string(config, FailingProvider())
    assert excinfo.value.kernel_name == "Add"
    assert excinfo.value.backend == "cpu"


def test_license_header_prefixes_both_documents():
    config = CapabilityConfig(kernels=("Add",), backends=("cpu",))
    with Session(license_header="// Copyright Example"):
        files = assemble_bundle(config, FakeProvider())
    assert files.tfjs.startswith("// Copyright Example\n\n// This file is autogenerated.")
    assert files.core.startswith("// Copyright Example\n\n// This file is autogenerated.")


def test_skipped_pairs_are_logged(caplog):
    config = CapabilityConfig(kernels=("Sub",), backends=("cpu",))
    with caplog.at_level(logging.DEBUG, logger="custom_module.core.bundle"):
        get_custom_module_string(config, FakeProvider(missing={("Sub", "cpu")}))
    assert "Skipping kernel Sub on backend cpu" in caplog.text
