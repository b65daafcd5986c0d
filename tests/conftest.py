from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parent.parent
BUILD_SCRIPT = ROOT / ".github" / "scripts" / "build.py"


@pytest.fixture(scope="session")
def build_script() -> ModuleType:
    """The site build script, loaded from its path (it lives outside any package)."""
    spec = importlib.util.spec_from_file_location("site_build", BUILD_SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def log_messages():
    """Capture loguru records emitted during the test."""
    messages: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
