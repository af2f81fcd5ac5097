# -*- coding: utf-8 -*-
"""
navigation.py - Wizard step state machine

Forward transitions depend on the answer just given. Backward transitions
are recomputed from (current step, selections) instead of being replayed
from a stack; `NavigationHistory` records the steps actually visited so
callers can compare the two or navigate by history instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from .models import (
    ClusterAccess,
    Dimension,
    IcebergLocation,
    MigrationGoal,
    Selections,
)


class WizardStep(str, Enum):
    GOAL = "goal"
    CLUSTER_ACCESS = "clusterAccess"
    TABLE_CHARACTERISTICS = "tableCharacteristics"
    ICEBERG_LOCATION = "icebergLocation"
    CONFIRMATION = "confirmation"


# Which dimension each question step collects
STEP_DIMENSIONS: Dict[WizardStep, Dimension] = {
    WizardStep.GOAL: Dimension.MIGRATION_GOAL,
    WizardStep.CLUSTER_ACCESS: Dimension.CLUSTER_ACCESS,
    WizardStep.TABLE_CHARACTERISTICS: Dimension.TABLE_CHARACTERISTICS,
    WizardStep.ICEBERG_LOCATION: Dimension.ICEBERG_LOCATION,
}

STEP_LABELS: Dict[WizardStep, str] = {
    WizardStep.GOAL: "Migration Goal",
    WizardStep.CLUSTER_ACCESS: "Cluster Access",
    WizardStep.TABLE_CHARACTERISTICS: "Table Characteristics",
    WizardStep.ICEBERG_LOCATION: "Iceberg Location",
    WizardStep.CONFIRMATION: "Strategy Selected",
}


def next_step(step: WizardStep, value: Enum) -> WizardStep:
    """Step to show after `value` was committed on `step`.

    Raises:
        ValueError: when called on CONFIRMATION, which has no forward move.
    """

    if step == WizardStep.GOAL:
        if value == MigrationGoal.MOVE_SCHEMAS_DATA:
            return WizardStep.CLUSTER_ACCESS
        if value == MigrationGoal.CONVERT_ICEBERG:
            return WizardStep.ICEBERG_LOCATION
        return WizardStep.CONFIRMATION

    if step == WizardStep.CLUSTER_ACCESS:
        if value == ClusterAccess.NO_ACCESS:
            return WizardStep.CONFIRMATION
        return WizardStep.TABLE_CHARACTERISTICS

    if step == WizardStep.TABLE_CHARACTERISTICS:
        return WizardStep.CONFIRMATION

    if step == WizardStep.ICEBERG_LOCATION:
        if value == IcebergLocation.SAME_CLUSTER:
            return WizardStep.CONFIRMATION
        return WizardStep.CLUSTER_ACCESS

    raise ValueError(f"Cannot transition forward from {WizardStep(step).value}")


def previous_step(step: WizardStep, selections: Selections) -> WizardStep:
    """Step the Back button returns to, derived from current answers only."""

    goal = selections.migration_goal

    if step == WizardStep.CONFIRMATION:
        if goal == MigrationGoal.CONVERT_ICEBERG:
            return WizardStep.ICEBERG_LOCATION
        if goal == MigrationGoal.MOVE_SCHEMAS_DATA:
            return WizardStep.TABLE_CHARACTERISTICS
        return WizardStep.GOAL

    if step == WizardStep.TABLE_CHARACTERISTICS:
        return WizardStep.CLUSTER_ACCESS

    if step == WizardStep.CLUSTER_ACCESS:
        if (goal == MigrationGoal.CONVERT_ICEBERG
                and selections.iceberg_location == IcebergLocation.DIFFERENT_CLUSTER):
            return WizardStep.ICEBERG_LOCATION
        return WizardStep.GOAL

    return WizardStep.GOAL


class Breadcrumb:
    """Display-only trail of step labels shown above the wizard."""

    def __init__(self, root_label: str = STEP_LABELS[WizardStep.GOAL]):
        self._root_label = root_label
        self._labels: List[str] = [root_label]

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def push(self, label: str) -> None:
        if not self._labels or self._labels[-1] != label:
            self._labels.append(label)

    def pop(self) -> Optional[str]:
        # root label always stays
        if len(self._labels) < 2:
            return None
        return self._labels.pop()

    def reset(self) -> None:
        self._labels = [self._root_label]

    def render(self, separator: str = " > ") -> str:
        return separator.join(self._labels)

    def __len__(self) -> int:
        return len(self._labels)


class NavigationHistory:
    """Stack of steps actually visited, popped on Back."""

    def __init__(self, start: WizardStep = WizardStep.GOAL):
        self._start = start
        self._stack: List[WizardStep] = [start]

    @property
    def steps(self) -> List[WizardStep]:
        return list(self._stack)

    @property
    def current(self) -> WizardStep:
        return self._stack[-1]

    def push(self, step: WizardStep) -> None:
        self._stack.append(step)

    def peek_previous(self) -> Optional[WizardStep]:
        if len(self._stack) < 2:
            return None
        return self._stack[-2]

    def pop(self) -> Optional[WizardStep]:
        """Drop the current step and return the one before it."""
        if len(self._stack) < 2:
            return None
        self._stack.pop()
        return self._stack[-1]

    def reset(self) -> None:
        self._stack = [self._start]
