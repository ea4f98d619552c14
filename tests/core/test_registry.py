import json

import pytest

from custom_module.core.errors import ConfigFileError
from custom_module.core.registry import KernelRegistry


def test_registry_queries():
    registry = KernelRegistry.from_mapping(
        {"cpu": ["Add", "Sub"], "webgl": ["Add"]}, gradients=["Add"]
    )
    assert registry.has_kernel("Add", "webgl")
    assert not registry.has_kernel("Sub", "webgl")
    assert not registry.has_kernel("Add", "wasm")
    assert registry.has_gradient("Add")
    assert not registry.has_gradient("Sub")
    assert registry.backends == frozenset({"cpu", "webgl"})


def test_registry_from_json(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps({"kernels": {"cpu": ["Exp"]}, "gradients": ["Exp"]}))
    registry = KernelRegistry.from_json(path)
    assert registry.has_kernel("Exp", "cpu")
    assert registry.has_gradient("Exp")


@pytest.mark.parametrize("contents", ["not json", "[1, 2]", '{"kernels": []}'])
def test_registry_from_bad_json(tmp_path, contents):
    path = tmp_path / "registry.json"
    path.write_text(contents)
    with pytest.raises(ConfigFileError):
        KernelRegistry.from_json(path)


def test_registry_missing_file(tmp_path):
    with pytest.raises(ConfigFileError):
        KernelRegistry.from_json(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "data",
    [
        {"kernels": {"cpu": "Add"}, "gradients": ["Add"]},
        {"kernels": {"cpu": ["Add"]}, "gradients": "Add"},
        {"kernels": {"cpu": 5}},
        {"kernels": {"cpu": ["Add", 3]}},
    ],
)
def test_registry_rejects_non_string_list_entries(tmp_path, data):
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(data))
    with pytest.raises(ConfigFileError):
        KernelRegistry.from_json(path)
