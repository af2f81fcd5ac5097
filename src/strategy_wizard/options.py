# -*- coding: utf-8 -*-
"""
options.py - Hard-coded option sets for each questionnaire dimension

Each dimension selector shows one of these tuples. The text is UI copy
only; nothing here is read by the decision engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .models import (
    ClusterAccess,
    IcebergLocation,
    MigrationGoal,
    Strategy,
    TableCharacteristics,
)


@dataclass(frozen=True)
class DimensionOption:
    """One selectable answer.

    - value: enumeration member reported to the orchestrator
    - details / examples / warning: extra copy shown once highlighted
    - strategy_hint: strategy this answer usually leads to
    - is_common: marks the option most operators pick
    """

    value: Enum
    label: str
    icon: str
    description: str = ""
    details: str = ""
    examples: Tuple[str, ...] = field(default_factory=tuple)
    warning: Optional[str] = None
    strategy_hint: Optional[Strategy] = None
    is_common: bool = False


MIGRATION_GOAL_OPTIONS: Tuple[DimensionOption, ...] = (
    DimensionOption(
        value=MigrationGoal.MOVE_SCHEMAS_DATA,
        label="Move schemas + data between clusters",
        description="Migrate both metadata and data to a different cluster",
        icon="🔄",
        is_common=True,
    ),
    DimensionOption(
        value=MigrationGoal.SCHEMAS_ONLY,
        label="Move schemas only, handle data separately",
        description="Migrate metadata only, use distcp for data movement",
        icon="📋",
    ),
    DimensionOption(
        value=MigrationGoal.CONVERT_ICEBERG,
        label="Convert to Iceberg format",
        description="Convert existing tables to Iceberg table format",
        icon="🧊",
    ),
    DimensionOption(
        value=MigrationGoal.MOVE_WITHIN_CLUSTER,
        label="Move data within cluster to new storage",
        description="Change storage location within same cluster (HDFS→Ozone, HDFS→S3)",
        icon="📦",
    ),
    DimensionOption(
        value=MigrationGoal.TEST_READ_ONLY,
        label="Test new cluster with old data (read-only)",
        description="Create read-only access to existing data for testing",
        icon="🔗",
    ),
    DimensionOption(
        value=MigrationGoal.SHARED_STORAGE,
        label="Clusters share same physical storage",
        description="Only metadata needs to move, data is already accessible",
        icon="🤝",
    ),
    DimensionOption(
        value=MigrationGoal.EXTRACT_SCHEMAS,
        label="Extract schemas only (no target yet)",
        description="Generate SQL files for later manual execution",
        icon="💾",
    ),
)

CLUSTER_ACCESS_OPTIONS: Tuple[DimensionOption, ...] = (
    DimensionOption(
        value=ClusterAccess.DIRECT_ACCESS,
        label="Yes, clusters can access each other's storage",
        icon="✅",
        details="Both clusters can read and write to each other's storage locations",
        examples=(
            "Shared HDFS namespace",
            "Both clusters have access to same S3 buckets",
            "Cross-cluster storage permissions configured",
        ),
    ),
    DimensionOption(
        value=ClusterAccess.INTERMEDIATE_STORAGE,
        label="No, but we have intermediate storage both can access",
        icon="❌",
        details="A shared storage location that both clusters can access for data transit",
        examples=(
            "Shared S3 bucket for temporary data",
            "Common HDFS location accessible by both",
            "Cloud storage accessible from both environments",
        ),
    ),
    DimensionOption(
        value=ClusterAccess.NO_ACCESS,
        label="No shared storage access at all",
        icon="🚫",
        details="Clusters cannot access each other's storage directly",
        examples=(
            "Isolated networks",
            "Different cloud providers",
            "Security restrictions prevent cross-access",
        ),
        warning="This will limit migration options significantly",
    ),
)

TABLE_CHARACTERISTICS_OPTIONS: Tuple[DimensionOption, ...] = (
    DimensionOption(
        value=TableCharacteristics.MIXED_PARTITIONS,
        label="Mix of small and large partitioned tables",
        description="Auto-selects best method per table based on partition count",
        icon="🔀",
        strategy_hint=Strategy.HYBRID,
    ),
    DimensionOption(
        value=TableCharacteristics.SMALL_PARTITIONS,
        label="Mostly tables with < 100 partitions",
        description="Good for small partitioned tables",
        icon="📊",
        strategy_hint=Strategy.EXPORT_IMPORT,
    ),
    DimensionOption(
        value=TableCharacteristics.LARGE_PARTITIONS,
        label="Mostly tables with > 100 partitions",
        description="Better for large partitioned tables",
        icon="📈",
        strategy_hint=Strategy.SQL,
    ),
)

ICEBERG_LOCATION_OPTIONS: Tuple[DimensionOption, ...] = (
    DimensionOption(
        value=IcebergLocation.SAME_CLUSTER,
        label="Same cluster (in-place conversion)",
        icon="🎯",
        strategy_hint=Strategy.STORAGE_MIGRATION,
    ),
    DimensionOption(
        value=IcebergLocation.DIFFERENT_CLUSTER,
        label="Different cluster (conversion during migration)",
        icon="🔄",
        strategy_hint=Strategy.SQL,
    ),
)

GOAL_HELP_TEXT = (
    'Most users start with "Move schemas + data between clusters" - this '
    "covers the majority of migration scenarios.\n"
    "- Schemas + data: Full migration to a new cluster\n"
    "- Schemas only: When you want to handle data movement separately with distcp\n"
    "- Iceberg conversion: Modernizing table formats during migration\n"
    "- Within cluster: Moving to different storage (e.g., HDFS to S3)"
)
