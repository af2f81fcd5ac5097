# -*- coding: utf-8 -*-
"""
test_decision_engine.py - Tests for strategy recommendation rules
"""

import itertools
import logging

import pytest

from strategy_wizard.decision_engine import evaluate, evaluate_cross_cluster
from strategy_wizard.models import (
    ClusterAccess,
    IcebergLocation,
    MigrationGoal,
    Selections,
    Strategy,
    TableCharacteristics,
)

TERMINAL_CASES = [
    (MigrationGoal.SCHEMAS_ONLY, Strategy.SCHEMA_ONLY),
    (MigrationGoal.MOVE_WITHIN_CLUSTER, Strategy.STORAGE_MIGRATION),
    (MigrationGoal.TEST_READ_ONLY, Strategy.LINKED),
    (MigrationGoal.SHARED_STORAGE, Strategy.COMMON),
    (MigrationGoal.EXTRACT_SCHEMAS, Strategy.DUMP),
]


def _all_other_dimensions():
    """Every combination of the non-goal dimensions, unset included."""
    return itertools.product(
        [None, *ClusterAccess],
        [None, *TableCharacteristics],
        [None, *IcebergLocation],
    )


class TestTerminalGoals:
    """Single-question goals."""

    @pytest.mark.parametrize("goal,expected", TERMINAL_CASES)
    def test_goal_alone(self, goal, expected):
        rec = evaluate(Selections(migration_goal=goal))

        assert rec.strategy == expected
        assert len(rec.path) == 1
        assert rec.reason
        assert rec.error is None
        assert rec.is_usable

    @pytest.mark.parametrize("goal,expected", TERMINAL_CASES)
    def test_other_dimensions_ignored(self, goal, expected):
        baseline = evaluate(Selections(migration_goal=goal))

        for access, tables, iceberg in _all_other_dimensions():
            rec = evaluate(Selections(
                migration_goal=goal,
                cluster_access=access,
                table_characteristics=tables,
                iceberg_location=iceberg,
            ))
            assert rec == baseline


class TestMoveSchemasAndData:
    """Cross-cluster schemas + data branch."""

    def test_no_access_is_infeasible(self):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA,
            cluster_access=ClusterAccess.NO_ACCESS,
        ))

        assert rec.strategy == Strategy.SCHEMA_ONLY
        assert rec.error == "Direct data movement not possible without shared storage"
        assert "intermediate storage" in rec.suggestion
        assert rec.path == ["Move schemas + data", "No shared storage access"]
        assert not rec.is_usable

    @pytest.mark.parametrize("tables", [None, *TableCharacteristics])
    def test_no_access_ignores_tables(self, tables):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA,
            cluster_access=ClusterAccess.NO_ACCESS,
            table_characteristics=tables,
        ))

        assert rec.error is not None
        assert rec.strategy == Strategy.SCHEMA_ONLY

    @pytest.mark.parametrize("tables,expected", [
        (TableCharacteristics.LARGE_PARTITIONS, Strategy.SQL),
        (TableCharacteristics.SMALL_PARTITIONS, Strategy.EXPORT_IMPORT),
        (TableCharacteristics.MIXED_PARTITIONS, Strategy.HYBRID),
    ])
    def test_direct_access_by_partition_profile(self, tables, expected):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA,
            cluster_access=ClusterAccess.DIRECT_ACCESS,
            table_characteristics=tables,
        ))

        assert rec.strategy == expected
        assert rec.path[:2] == ["Move schemas + data", "Clusters can access storage"]
        assert len(rec.path) == 3
        assert not rec.intermediate_storage

    @pytest.mark.parametrize("tables", list(TableCharacteristics))
    def test_intermediate_storage_always_sql(self, tables):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA,
            cluster_access=ClusterAccess.INTERMEDIATE_STORAGE,
            table_characteristics=tables,
        ))

        assert rec.strategy == Strategy.SQL
        assert rec.intermediate_storage is True
        assert rec.path == ["Move schemas + data", "Intermediate storage available"]

    @pytest.mark.parametrize("access", [ClusterAccess.DIRECT_ACCESS, ClusterAccess.INTERMEDIATE_STORAGE])
    def test_pending_until_tables_answered(self, access):
        assert evaluate(Selections(
            migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA,
            cluster_access=access,
        )) is None

    def test_pending_with_goal_only(self):
        assert evaluate(Selections(migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA)) is None


class TestIcebergConversion:
    """Iceberg conversion branch."""

    def test_same_cluster_in_place(self):
        for access, tables, _ in _all_other_dimensions():
            rec = evaluate(Selections(
                migration_goal=MigrationGoal.CONVERT_ICEBERG,
                iceberg_location=IcebergLocation.SAME_CLUSTER,
                cluster_access=access,
                table_characteristics=tables,
            ))
            assert rec.strategy == Strategy.STORAGE_MIGRATION
            assert rec.path == ["Iceberg conversion", "Same cluster (in-place)"]

    def test_different_cluster_small_partitions(self):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.CONVERT_ICEBERG,
            iceberg_location=IcebergLocation.DIFFERENT_CLUSTER,
            cluster_access=ClusterAccess.DIRECT_ACCESS,
            table_characteristics=TableCharacteristics.SMALL_PARTITIONS,
        ))

        assert rec.strategy == Strategy.EXPORT_IMPORT
        assert rec.path[:2] == ["Iceberg conversion", "Different cluster"]
        assert rec.path[-1] == "Small partitioned tables"

    def test_different_cluster_intermediate_storage(self):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.CONVERT_ICEBERG,
            iceberg_location=IcebergLocation.DIFFERENT_CLUSTER,
            cluster_access=ClusterAccess.INTERMEDIATE_STORAGE,
            table_characteristics=TableCharacteristics.LARGE_PARTITIONS,
        ))

        assert rec.strategy == Strategy.SQL
        assert rec.intermediate_storage is True
        assert rec.path == ["Iceberg conversion", "Different cluster", "Intermediate storage available"]

    def test_different_cluster_pending(self):
        assert evaluate(Selections(
            migration_goal=MigrationGoal.CONVERT_ICEBERG,
            iceberg_location=IcebergLocation.DIFFERENT_CLUSTER,
            cluster_access=ClusterAccess.DIRECT_ACCESS,
        )) is None

    def test_location_unanswered(self):
        assert evaluate(Selections(migration_goal=MigrationGoal.CONVERT_ICEBERG)) is None


class TestCrossClusterFallback:
    """Explicit default arm of the cross-cluster sub-tree."""

    def test_unmatched_combination_defaults_to_sql(self, caplog):
        with caplog.at_level(logging.WARNING, logger="DecisionEngine"):
            rec = evaluate_cross_cluster(
                ClusterAccess.NO_ACCESS,
                TableCharacteristics.MIXED_PARTITIONS,
                is_iceberg=True,
            )

        assert rec.strategy == Strategy.SQL
        assert rec.reason == "Default SQL strategy for data migration"
        assert rec.path == ["Iceberg conversion", "Different cluster", "Clusters can access storage"]
        assert "defaulting to SQL" in caplog.text

    def test_iceberg_no_access_reaches_fallback(self):
        rec = evaluate(Selections(
            migration_goal=MigrationGoal.CONVERT_ICEBERG,
            iceberg_location=IcebergLocation.DIFFERENT_CLUSTER,
            cluster_access=ClusterAccess.NO_ACCESS,
            table_characteristics=TableCharacteristics.SMALL_PARTITIONS,
        ))

        assert rec.strategy == Strategy.SQL
        assert rec.error is None


class TestPurity:

    def test_empty_selections(self):
        assert evaluate(Selections()) is None

    def test_idempotent(self):
        selections = Selections(
            migration_goal=MigrationGoal.MOVE_SCHEMAS_DATA,
            cluster_access=ClusterAccess.DIRECT_ACCESS,
            table_characteristics=TableCharacteristics.MIXED_PARTITIONS,
        )

        first = evaluate(selections)
        second = evaluate(selections)

        assert first == second
        assert first is not second

    def test_result_path_not_shared(self):
        selections = Selections(migration_goal=MigrationGoal.SCHEMAS_ONLY)
        evaluate(selections).path.append("mutated")

        assert evaluate(selections).path == ["Schemas only migration"]
