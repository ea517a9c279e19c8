"""Shared fixtures: isolated settings and silent logging per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings

from kleisli.config import clear_settings_cache
from kleisli.observability import configure_logging, reset_logging

# isolated_settings resets per test, not per hypothesis example.
settings.register_profile("kleisli", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("kleisli")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and any KLEISLI_* variables from the outer environment."""
    import os
    for key in [k for k in os.environ if k.startswith("KLEISLI_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging(format="none")
    yield
    reset_logging()
    clear_settings_cache()
