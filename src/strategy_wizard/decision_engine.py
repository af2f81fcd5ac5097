# -*- coding: utf-8 -*-
"""
decision_engine.py - Strategy recommendation rules

`evaluate(selections)` maps the answers collected so far to a
`StrategyRecommendation`, or `None` while the questionnaire is still
incomplete. Pure and deterministic: the orchestrator reruns it after every
answer, so a recommendation can exist before the confirmation step.

Rule precedence (first match wins):
1. Terminal goals map straight to a strategy.
2. Iceberg conversion: same cluster is in-place, different cluster falls
   through to the cross-cluster sub-tree.
3. Schemas + data: no storage access is the one infeasible case (fallback
   strategy plus `error`), otherwise the cross-cluster sub-tree.
4. Cross-cluster sub-tree keyed on access posture and partition profile.
5. Nothing matched yet: `None`.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .models import (
    ClusterAccess,
    IcebergLocation,
    MigrationGoal,
    Selections,
    Strategy,
    StrategyRecommendation,
    TableCharacteristics,
)

logger = logging.getLogger("DecisionEngine")


# goal -> (strategy, reason, path)
TERMINAL_GOALS: Dict[MigrationGoal, Tuple[Strategy, str, Tuple[str, ...]]] = {
    MigrationGoal.SCHEMAS_ONLY: (
        Strategy.SCHEMA_ONLY,
        "You want to move schemas only and handle data separately",
        ("Schemas only migration",),
    ),
    MigrationGoal.MOVE_WITHIN_CLUSTER: (
        Strategy.STORAGE_MIGRATION,
        "You want to move data within the same cluster to new storage",
        ("In-cluster storage migration",),
    ),
    MigrationGoal.TEST_READ_ONLY: (
        Strategy.LINKED,
        "You want read-only testing access to existing data",
        ("Read-only testing setup",),
    ),
    MigrationGoal.SHARED_STORAGE: (
        Strategy.COMMON,
        "Your clusters share the same physical storage",
        ("Shared storage metadata migration",),
    ),
    MigrationGoal.EXTRACT_SCHEMAS: (
        Strategy.DUMP,
        "You want to extract schemas without a target cluster",
        ("Schema extraction only",),
    ),
}

# partition profile -> (strategy, reason, path label) when clusters share storage
DIRECT_ACCESS_RULES: Dict[TableCharacteristics, Tuple[Strategy, str, str]] = {
    TableCharacteristics.MIXED_PARTITIONS: (
        Strategy.HYBRID,
        "You have mixed partition sizes and clusters can access each other's storage",
        "Mixed partition sizes",
    ),
    TableCharacteristics.SMALL_PARTITIONS: (
        Strategy.EXPORT_IMPORT,
        "You have mostly small partitioned tables and clusters can access each other's storage",
        "Small partitioned tables",
    ),
    TableCharacteristics.LARGE_PARTITIONS: (
        Strategy.SQL,
        "You have mostly large partitioned tables and clusters can access each other's storage",
        "Large partitioned tables",
    ),
}

ICEBERG_BASE_PATH = ("Iceberg conversion", "Different cluster", "Clusters can access storage")
DATA_MOVE_BASE_PATH = ("Move schemas + data", "Clusters can access storage")

NO_ACCESS_ERROR = "Direct data movement not possible without shared storage"
NO_ACCESS_SUGGESTION = (
    "Consider: Setting up intermediate storage, or using SCHEMA_ONLY + manual data transfer"
)


def evaluate(selections: Selections) -> Optional[StrategyRecommendation]:
    """Return the recommendation for the current answers, or None if pending."""

    goal = selections.migration_goal

    if goal in TERMINAL_GOALS:
        strategy, reason, path = TERMINAL_GOALS[goal]
        return StrategyRecommendation(strategy=strategy, reason=reason, path=list(path))

    if goal == MigrationGoal.CONVERT_ICEBERG:
        if selections.iceberg_location == IcebergLocation.SAME_CLUSTER:
            return StrategyRecommendation(
                strategy=Strategy.STORAGE_MIGRATION,
                reason="You want in-place Iceberg conversion on the same cluster",
                path=["Iceberg conversion", "Same cluster (in-place)"],
            )
        if selections.iceberg_location == IcebergLocation.DIFFERENT_CLUSTER:
            if selections.cluster_access and selections.table_characteristics:
                return evaluate_cross_cluster(
                    selections.cluster_access,
                    selections.table_characteristics,
                    is_iceberg=True,
                )
        return None

    if goal == MigrationGoal.MOVE_SCHEMAS_DATA:
        if selections.cluster_access == ClusterAccess.NO_ACCESS:
            return StrategyRecommendation(
                strategy=Strategy.SCHEMA_ONLY,
                reason="Fallback to schema-only migration due to storage constraints",
                path=["Move schemas + data", "No shared storage access"],
                error=NO_ACCESS_ERROR,
                suggestion=NO_ACCESS_SUGGESTION,
            )
        if selections.cluster_access and selections.table_characteristics:
            return evaluate_cross_cluster(
                selections.cluster_access,
                selections.table_characteristics,
                is_iceberg=False,
            )

    return None


def evaluate_cross_cluster(cluster_access: ClusterAccess,
                           table_characteristics: TableCharacteristics,
                           is_iceberg: bool) -> StrategyRecommendation:
    """Data-moving branch shared by schemas+data and cross-cluster Iceberg.

    `is_iceberg` only changes the justification path prefix.
    """

    base_path: List[str] = list(ICEBERG_BASE_PATH if is_iceberg else DATA_MOVE_BASE_PATH)

    if cluster_access == ClusterAccess.DIRECT_ACCESS and table_characteristics in DIRECT_ACCESS_RULES:
        strategy, reason, label = DIRECT_ACCESS_RULES[table_characteristics]
        return StrategyRecommendation(strategy=strategy, reason=reason, path=base_path + [label])

    if cluster_access == ClusterAccess.INTERMEDIATE_STORAGE:
        # partition profile does not matter once data transits intermediate storage
        return StrategyRecommendation(
            strategy=Strategy.SQL,
            reason="SQL with intermediate storage is recommended for your setup",
            path=base_path[:-1] + ["Intermediate storage available"],
            intermediate_storage=True,
        )

    logger.warning(
        f"⚠️ No cross-cluster rule for access={cluster_access.value} "
        f"tables={table_characteristics.value}; defaulting to SQL"
    )
    return StrategyRecommendation(
        strategy=Strategy.SQL,
        reason="Default SQL strategy for data migration",
        path=base_path,
    )
