"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


@pytest.fixture(autouse=True)
def default_policy(monkeypatch):
    """Run every test against the built-in policy, whatever the environment says."""
    import ssss.policy

    for name in ("SSSS_DIFFUSION", "SSSS_THRESHOLD_MODE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(ssss.policy, "policy", ssss.policy.SharingPolicy())
    yield ssss.policy.policy
