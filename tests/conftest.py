# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

import pytest

from anyserde.config import ENV_VAR


@pytest.fixture(autouse=True)
def _all_formats_enabled(monkeypatch):
    """Start every test with the full set of installed formats."""
    monkeypatch.delenv(ENV_VAR, raising=False)


@pytest.fixture
def only_formats(monkeypatch):
    """Restrict the enabled formats for one test: ``only_formats("json", "yaml")``."""

    def restrict(*names: str) -> None:
        monkeypatch.setenv(ENV_VAR, ",".join(names))

    return restrict
