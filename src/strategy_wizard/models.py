# -*- coding: utf-8 -*-
"""
models.py - Dimension enumerations and data model for the strategy wizard

Holds the closed value sets for every questionnaire dimension, the
`Selections` accumulator, the decision engine's `StrategyRecommendation`
and the `StrategySelectionResult` handed to the configuration editor.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# DIMENSION VALUE SETS
# ============================================================================


class MigrationGoal(str, Enum):
    """What the operator wants the migration to accomplish"""
    MOVE_SCHEMAS_DATA = "move_schemas_data"
    SCHEMAS_ONLY = "schemas_only"
    CONVERT_ICEBERG = "convert_iceberg"
    MOVE_WITHIN_CLUSTER = "move_within_cluster"
    TEST_READ_ONLY = "test_read_only"
    SHARED_STORAGE = "shared_storage"
    EXTRACT_SCHEMAS = "extract_schemas"


class ClusterAccess(str, Enum):
    """Cross-cluster storage reachability"""
    DIRECT_ACCESS = "direct_access"
    INTERMEDIATE_STORAGE = "intermediate_storage"
    NO_ACCESS = "no_access"


class TableCharacteristics(str, Enum):
    """Dominant partitioning profile of the tables to migrate"""
    MIXED_PARTITIONS = "mixed_partitions"
    SMALL_PARTITIONS = "small_partitions"
    LARGE_PARTITIONS = "large_partitions"


class IcebergLocation(str, Enum):
    """Where converted Iceberg tables should live"""
    SAME_CLUSTER = "same_cluster"
    DIFFERENT_CLUSTER = "different_cluster"


class Strategy(str, Enum):
    """HMS-Mirror data strategies the wizard can recommend"""
    SQL = "SQL"
    HYBRID = "HYBRID"
    EXPORT_IMPORT = "EXPORT_IMPORT"
    SCHEMA_ONLY = "SCHEMA_ONLY"
    STORAGE_MIGRATION = "STORAGE_MIGRATION"
    LINKED = "LINKED"
    COMMON = "COMMON"
    DUMP = "DUMP"


class Dimension(str, Enum):
    """Questionnaire axes; values match the `Selections` field names"""
    MIGRATION_GOAL = "migration_goal"
    CLUSTER_ACCESS = "cluster_access"
    TABLE_CHARACTERISTICS = "table_characteristics"
    ICEBERG_LOCATION = "iceberg_location"


DIMENSION_TYPES = {
    Dimension.MIGRATION_GOAL: MigrationGoal,
    Dimension.CLUSTER_ACCESS: ClusterAccess,
    Dimension.TABLE_CHARACTERISTICS: TableCharacteristics,
    Dimension.ICEBERG_LOCATION: IcebergLocation,
}


# ============================================================================
# SELECTIONS / RECOMMENDATION / RESULT
# ============================================================================


class Selections(BaseModel):
    """Answers collected so far, one optional field per dimension.

    Instances are frozen; revising an answer produces a new instance via
    `with_value`. Pydantic rejects values drawn from the wrong enumeration.
    """

    model_config = ConfigDict(frozen=True)

    migration_goal: Optional[MigrationGoal] = None
    cluster_access: Optional[ClusterAccess] = None
    table_characteristics: Optional[TableCharacteristics] = None
    iceberg_location: Optional[IcebergLocation] = None

    def with_value(self, dimension: Dimension, value: Any) -> "Selections":
        """Return a copy with one dimension set (validated)."""

        data = self.model_dump()
        data[Dimension(dimension).value] = value
        return Selections.model_validate(data)

    def get(self, dimension: Dimension) -> Optional[Enum]:
        return getattr(self, Dimension(dimension).value)


class StrategyRecommendation(BaseModel):
    """Decision engine output.

    `error` set means "no usable recommendation" even though `strategy`
    still carries a fallback value.
    """

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    reason: str
    path: List[str] = Field(default_factory=list)
    intermediate_storage: Optional[bool] = None
    error: Optional[str] = None
    suggestion: Optional[str] = None

    @property
    def is_usable(self) -> bool:
        return self.error is None


class StrategySelectionResult(BaseModel):
    """Value emitted to the wizard's caller on commit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strategy: str
    reason: str
    path: List[str] = Field(default_factory=list)
    intermediate_storage: bool = Field(False, alias="intermediateStorage")

    @classmethod
    def from_recommendation(cls, recommendation: StrategyRecommendation) -> "StrategySelectionResult":
        """Build a result, dropping error/suggestion."""

        return cls(
            strategy=recommendation.strategy.value,
            reason=recommendation.reason,
            path=list(recommendation.path),
            intermediate_storage=bool(recommendation.intermediate_storage),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase shape the configuration editor expects."""

        return self.model_dump(by_alias=True)
