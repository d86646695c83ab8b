from __future__ import annotations

import pytest

from cronhint import logging_utils


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # Each CLI invocation swaps sys.stderr; force the sink to be re-added.
    monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CRONHINT_INTERPRETERS", "CRONHINT_EXCLUDED_DEVICES", "CRONHINT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
