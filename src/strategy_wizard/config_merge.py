# -*- coding: utf-8 -*-
"""
config_merge.py - Merge a wizard result into a migration configuration

The configuration editor owns persistence; this module only produces the
updated dict. Pure: the input configuration is never mutated.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from .models import StrategySelectionResult

STRATEGY_FIELD = "dataStrategy"
SELECTION_FIELD = "strategySelection"


def apply_strategy_selection(configuration: Optional[Dict[str, Any]],
                             result: StrategySelectionResult) -> Dict[str, Any]:
    """Return a copy of `configuration` with the selected strategy applied.

    - `dataStrategy` is set to the chosen strategy
    - `strategySelection` keeps the reason/path trail for display
    - when intermediate storage is required, `transfer.intermediateStorage`
      is ensured to exist (left None for the operator to fill in)
    """

    merged: Dict[str, Any] = copy.deepcopy(configuration or {})

    merged[STRATEGY_FIELD] = result.strategy
    merged[SELECTION_FIELD] = {
        "reason": result.reason,
        "path": list(result.path),
        "intermediateStorage": result.intermediate_storage,
    }

    if result.intermediate_storage:
        transfer = merged.setdefault("transfer", {})
        if not isinstance(transfer, dict):
            raise ValueError("configuration 'transfer' must be an object")
        transfer.setdefault("intermediateStorage", None)

    return merged
