# -*- coding: utf-8 -*-
"""
selectors.py - Dimension selectors (Goal, ClusterAccess, TableCharacteristics,
IcebergLocation)

A selector owns the "highlighted but not yet committed" choice for one
dimension. Only `commit()` (the Continue button) reports a value upward.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Tuple

from .errors import InvalidSelectionError
from .models import Dimension
from .options import (
    CLUSTER_ACCESS_OPTIONS,
    GOAL_HELP_TEXT,
    ICEBERG_LOCATION_OPTIONS,
    MIGRATION_GOAL_OPTIONS,
    TABLE_CHARACTERISTICS_OPTIONS,
    DimensionOption,
)

logger = logging.getLogger("Selectors")


class DimensionSelector:
    """Generic selector over a fixed option tuple."""

    dimension: Dimension
    options: Tuple[DimensionOption, ...] = ()
    question: str = ""
    subtitle: str = ""
    help_text: Optional[str] = None
    has_back: bool = True

    def __init__(self, selection: Optional[Enum] = None,
                 on_selection: Optional[Callable[[Enum], None]] = None):
        """
        Args:
            selection: Value already stored for this dimension, if any
            on_selection: Callback(value) invoked by commit()
        """
        self.on_selection = on_selection
        self.highlighted: Optional[Enum] = None
        if selection is not None:
            self.highlight(selection)

    @property
    def values(self) -> Tuple[Enum, ...]:
        return tuple(option.value for option in self.options)

    @property
    def can_continue(self) -> bool:
        return self.highlighted is not None

    def option_for(self, value: Enum) -> DimensionOption:
        for option in self.options:
            if option.value == value:
                return option
        raise InvalidSelectionError(
            f"{value!r} is not a valid {self.dimension.value} option"
        )

    def highlight(self, value: Enum) -> DimensionOption:
        """Mark an option as chosen without reporting it."""
        option = self.option_for(value)
        self.highlighted = option.value
        return option

    def commit(self) -> Optional[Enum]:
        """Report the highlighted value; no-op while nothing is highlighted."""
        if self.highlighted is None:
            return None
        logger.debug(f"{self.dimension.value} committed: {self.highlighted.value}")
        if self.on_selection:
            self.on_selection(self.highlighted)
        return self.highlighted


class MigrationGoalSelector(DimensionSelector):
    dimension = Dimension.MIGRATION_GOAL
    options = MIGRATION_GOAL_OPTIONS
    question = "What is your primary migration goal?"
    subtitle = "Choose the option that best describes what you want to accomplish with HMS-Mirror."
    help_text = GOAL_HELP_TEXT
    has_back = False


class ClusterAccessSelector(DimensionSelector):
    dimension = Dimension.CLUSTER_ACCESS
    options = CLUSTER_ACCESS_OPTIONS
    question = "Can your clusters access each other's storage?"
    subtitle = "This determines which data movement strategies are available for your migration."


class TableCharacteristicsSelector(DimensionSelector):
    dimension = Dimension.TABLE_CHARACTERISTICS
    options = TABLE_CHARACTERISTICS_OPTIONS
    question = "What describes your table characteristics?"
    subtitle = "Partition counts decide which data movement method performs best."


class IcebergLocationSelector(DimensionSelector):
    dimension = Dimension.ICEBERG_LOCATION
    options = ICEBERG_LOCATION_OPTIONS
    question = "Where do you want the Iceberg tables?"
    subtitle = "In-place conversion keeps tables on the current cluster."


SELECTOR_TYPES = {
    Dimension.MIGRATION_GOAL: MigrationGoalSelector,
    Dimension.CLUSTER_ACCESS: ClusterAccessSelector,
    Dimension.TABLE_CHARACTERISTICS: TableCharacteristicsSelector,
    Dimension.ICEBERG_LOCATION: IcebergLocationSelector,
}
