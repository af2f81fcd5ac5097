# -*- coding: utf-8 -*-
"""Pytest configuration for strategy wizard tests.

Puts `src/` on sys.path so the tests run against a plain checkout the same
way `main.py` does, without requiring an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class CallbackRecorder:
    """Collects wizard callback invocations."""

    def __init__(self):
        self.results = []
        self.cancels = 0

    def on_selected(self, result):
        self.results.append(result)

    def on_cancel(self):
        self.cancels += 1


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture
def wizard(recorder):
    from strategy_wizard.orchestrator import WizardOrchestrator

    return WizardOrchestrator(
        on_strategy_selected=recorder.on_selected,
        on_cancel=recorder.on_cancel,
    )


@pytest.fixture
def config_path(tmp_path, monkeypatch) -> Path:
    monkeypatch.delenv("STRATEGY_WIZARD_CONFIG", raising=False)
    monkeypatch.delenv("STRATEGY_WIZARD_LOG_LEVEL", raising=False)
    return tmp_path / "strategy_wizard.json"
