"""
An example, generating an inference-only bundle for a model served on the
cpu and webgl backends, plus the matching converter ops module
"""

from custom_module import (
    CapabilityConfig,
    KernelRegistry,
    ModelDescriptor,
    get_custom_converter_ops_module,
    get_custom_module_string,
)
from custom_module.providers import EsmModuleProvider


def build_provider() -> EsmModuleProvider:
    # webgl has no Softmax kernel in this registry, so it is left out there
    registry = KernelRegistry.from_mapping(
        {
            "cpu": ["Conv2D", "Relu", "Softmax", "ResizeBilinear"],
            "webgl": ["Conv2D", "Relu", "ResizeBilinear"],
        },
        gradients=["Conv2D", "Relu"],
    )
    return EsmModuleProvider(registry=registry)


if __name__ == "__main__":
    provider = build_provider()
    config = CapabilityConfig(
        kernels=("Conv2D", "Relu", "Softmax", "ResizeBilinear"),
        backends=("cpu", "webgl"),
        forward_mode_only=True,
        models=(ModelDescriptor("mobilenet/model.json"),),
    )
    files = get_custom_module_string(config, provider)
    print(files.tfjs)
    print()
    print(files.core)
    print()
    print(
        get_custom_converter_ops_module(
            ["conv2d", "relu", "softmax", "image.resizeBilinear"], provider
        )
    )
