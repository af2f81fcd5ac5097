# -*- coding: utf-8 -*-
"""catalog.py - Registry of HMS-Mirror data strategies.

Pure data: one descriptive entry per `Strategy`, built once at import time
and exposed read-only so the confirmation view, the direct-selection grid
and the CLI all show the same text.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Union

from .errors import UnknownStrategyError
from .models import Strategy


@dataclass(frozen=True)
class StrategyInfo:
    """Display metadata for a single strategy."""

    name: str
    description: str
    features: Tuple[str, ...]
    requirements: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["features"] = list(self.features)
        data["requirements"] = list(self.requirements)
        return data


_CATALOG: Dict[Strategy, StrategyInfo] = {}


def _register(strategy: Strategy, info: StrategyInfo) -> None:
    if strategy in _CATALOG:
        raise ValueError(f"Strategy already registered: {strategy.value!r}")
    _CATALOG[strategy] = info


_register(
    Strategy.SQL,
    StrategyInfo(
        name="SQL",
        description="Uses SQL INSERT statements for data movement",
        features=(
            "Supports Iceberg conversion",
            "Better for large partitioned tables",
            "Uses SQL INSERT statements for data movement",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Sufficient processing capacity for SQL operations",
        ),
    ),
)

_register(
    Strategy.HYBRID,
    StrategyInfo(
        name="HYBRID",
        description="Mix of SQL and EXPORT_IMPORT strategies",
        features=(
            "Auto-selects method per table",
            "Good if you're unsure about partition sizes",
            "Supports Iceberg conversion",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Mixed workload processing capacity",
        ),
    ),
)

_register(
    Strategy.EXPORT_IMPORT,
    StrategyInfo(
        name="EXPORT_IMPORT",
        description="Hive Export/Import mechanism",
        features=(
            "Better for smaller partitioned tables",
            "More robust for complex table structures",
            "Supports Iceberg conversion",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Hive export/import functionality",
        ),
    ),
)

_register(
    Strategy.SCHEMA_ONLY,
    StrategyInfo(
        name="SCHEMA_ONLY",
        description="Metadata migration only",
        features=(
            "Generates distcp plans for separate data movement",
            "Fast metadata-only migration",
            "Manual data transfer control",
        ),
        requirements=(
            "Target cluster must be accessible",
            "Separate data movement solution",
        ),
    ),
)

_register(
    Strategy.STORAGE_MIGRATION,
    StrategyInfo(
        name="STORAGE_MIGRATION",
        description="In-cluster storage migration",
        features=(
            "Choose SQL or DISTCP for data movement",
            "HDFS→Ozone, HDFS→S3, etc.",
            "SQL option supports Iceberg conversion",
        ),
        requirements=(
            "Access to both storage systems",
            "Sufficient cluster resources",
        ),
    ),
)

_register(
    Strategy.LINKED,
    StrategyInfo(
        name="LINKED",
        description="Read-only testing access",
        features=(
            "FOR TESTING ONLY",
            "RIGHT points to LEFT data",
            "No data movement",
        ),
        requirements=(
            "Must use readOnly=true and noPurge=true",
            "Shared storage access",
        ),
    ),
)

_register(
    Strategy.COMMON,
    StrategyInfo(
        name="COMMON",
        description="Shared storage metadata migration",
        features=(
            "Only metadata moves",
            "No data movement needed",
            "Fast migration",
        ),
        requirements=(
            "Clusters must share physical storage",
            "Compatible metadata formats",
        ),
    ),
)

_register(
    Strategy.DUMP,
    StrategyInfo(
        name="DUMP",
        description="Schema extraction only",
        features=(
            "No target cluster required",
            "Generates SQL files for manual replay",
            "Offline migration preparation",
        ),
        requirements=("Access to source cluster only",),
    ),
)


STRATEGY_CATALOG: Mapping[Strategy, StrategyInfo] = MappingProxyType(_CATALOG)


def get_strategy_info(strategy: Union[Strategy, str]) -> StrategyInfo:
    """Return catalog metadata for a strategy.

    Args:
        strategy: `Strategy` member or its identifier, case-insensitive
            (e.g. "export_import").

    Raises:
        UnknownStrategyError: if the identifier is not registered.
    """

    try:
        key = strategy if isinstance(strategy, Strategy) else Strategy(str(strategy).strip().upper())
        return STRATEGY_CATALOG[key]
    except (KeyError, ValueError) as exc:
        raise UnknownStrategyError(strategy) from exc


def list_strategies() -> List[Strategy]:
    """Return all catalog strategies in declaration order."""

    return list(STRATEGY_CATALOG.keys())
