# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so the suite runs without an editable install
#   • hypothesis profile with a small example budget (field ops are slow)

from __future__ import annotations

import sys
from pathlib import Path

from hypothesis import HealthCheck, settings

# ───────────────────────────── 1. PYTHONPATH ─────────────────────────────────
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # so imports resolve against src/


# ───────────────────────────── 2. hypothesis ─────────────────────────────────
settings.register_profile(
    "ssss",
    max_examples=15,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("ssss")
