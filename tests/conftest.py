"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import os
import sys
from pathlib import Path

import pytest

_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

for module_name in list(sys.modules.keys()):
    if module_name.startswith("gocoveralls"):
        del sys.modules[module_name]

from gocoveralls.coveralls import ci as _ci  # noqa: E402

_CI_VARS = (
    *_ci._JOB_ID_VARS,
    *_ci._SERVICE_NUMBER_VARS,
    *_ci._PULL_REQUEST_VARS,
    *_ci._BRANCH_VARS,
    "GITHUB_REF",
    "GITHUB_EVENT_NAME",
    "CI_PULL_REQUEST",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host config and CI variables out of every test."""
    monkeypatch.setattr(
        "gocoveralls.config.loader.GLOBAL_CONFIG_PATH",
        tmp_path / "global-config" / "config.yaml",
    )
    for name in (*_CI_VARS, "COVERALLS_TOKEN", "GOPATH"):
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("GOCOVERALLS__"):
            monkeypatch.delenv(name, raising=False)
