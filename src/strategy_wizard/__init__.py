# -*- coding: utf-8 -*-
"""HMS-Mirror strategy recommendation wizard.

Exposes the pieces a configuration editor needs: the orchestrator it
embeds, the pure decision engine, the strategy catalog and the helper that
merges a committed result into a migration configuration.
"""

from .catalog import STRATEGY_CATALOG, StrategyInfo, get_strategy_info, list_strategies  # noqa: F401
from .config_merge import apply_strategy_selection  # noqa: F401
from .decision_engine import evaluate  # noqa: F401
from .errors import (  # noqa: F401
    InvalidSelectionError,
    UnknownStrategyError,
    WizardClosedError,
    WizardError,
)
from .models import (  # noqa: F401
    ClusterAccess,
    Dimension,
    IcebergLocation,
    MigrationGoal,
    Selections,
    Strategy,
    StrategyRecommendation,
    StrategySelectionResult,
    TableCharacteristics,
)
from .navigation import WizardStep  # noqa: F401
from .orchestrator import BackNavigation, WizardOrchestrator  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "STRATEGY_CATALOG",
    "StrategyInfo",
    "get_strategy_info",
    "list_strategies",
    "apply_strategy_selection",
    "evaluate",
    "WizardError",
    "UnknownStrategyError",
    "InvalidSelectionError",
    "WizardClosedError",
    "ClusterAccess",
    "Dimension",
    "IcebergLocation",
    "MigrationGoal",
    "Selections",
    "Strategy",
    "StrategyRecommendation",
    "StrategySelectionResult",
    "TableCharacteristics",
    "WizardStep",
    "BackNavigation",
    "WizardOrchestrator",
]
