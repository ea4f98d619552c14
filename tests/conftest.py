import sys
from pathlib import Path

import pytest

# Ensure local package is imported before any installed version
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from custom_module.custom_module import Config  # noqa: E402


@pytest.fixture(autouse=True)
def restore_config():
    cfg = Config()
    prev = (cfg.namespace_policy, cfg.duplicate_policy, cfg.license_header)
    yield
    cfg.set_namespace_policy(prev[0])
    cfg.set_duplicate_policy(prev[1])
    cfg.set_license_header(prev[2])
