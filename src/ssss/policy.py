# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Runtime configuration for the sharing routines.

Values can be overridden by environment variables so that deployments can
change behaviour without code changes:

``SSSS_DIFFUSION``
    ``0``/``false``/``no``/``off`` disables the diffusion layer. Shares made
    without diffusion can only be combined with diffusion disabled.
``SSSS_THRESHOLD_MODE``
    ``reject`` (default) refuses a threshold larger than the number of shares
    requested; ``clamp`` lowers the threshold to that number instead.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

ThresholdMode = Literal["reject", "clamp"]

MAX_TOKEN_LEN = 128

_FALSY = {"0", "false", "no", "off"}
_TRUTHY = {"1", "true", "yes", "on"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _FALSY:
        return False
    if value in _TRUTHY:
        return True
    return default


def _load_mode(name: str, default: ThresholdMode) -> ThresholdMode:
    value = (os.environ.get(name) or "").strip().lower()
    if value == "reject":
        return "reject"
    if value == "clamp":
        return "clamp"
    return default


@dataclass(frozen=True)
class SharingPolicy:
    """Tunables shared by split, combine and the CLI."""

    diffusion: bool = True
    threshold_mode: ThresholdMode = "reject"
    max_token_len: int = MAX_TOKEN_LEN


def load_policy() -> SharingPolicy:
    """Load the policy considering environment overrides."""

    return SharingPolicy(
        diffusion=_load_bool("SSSS_DIFFUSION", True),
        threshold_mode=_load_mode("SSSS_THRESHOLD_MODE", "reject"),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "ThresholdMode", "MAX_TOKEN_LEN", "policy", "load_policy"]
