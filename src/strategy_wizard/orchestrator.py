# -*- coding: utf-8 -*-
"""
orchestrator.py - Strategy wizard orchestrator

Owns the wizard state (selections, current step, breadcrumb, latest
recommendation) and wires the pieces together:

    selector.commit() -> select() -> decision_engine.evaluate() -> next_step()
    confirmation_view().confirm() -> on_strategy_selected(result)

The caller only supplies two callbacks. Exactly one of them fires per
wizard instance; after that the wizard is closed and further actions raise
`WizardClosedError`.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional, Union

from .catalog import get_strategy_info
from .confirmation import ConfirmationView
from .decision_engine import evaluate
from .errors import InvalidSelectionError, WizardClosedError
from .models import (
    Dimension,
    Selections,
    Strategy,
    StrategyRecommendation,
    StrategySelectionResult,
)
from .navigation import (
    STEP_DIMENSIONS,
    STEP_LABELS,
    Breadcrumb,
    NavigationHistory,
    WizardStep,
    next_step,
    previous_step,
)
from .selectors import SELECTOR_TYPES, DimensionSelector

logger = logging.getLogger("WizardOrchestrator")


class BackNavigation(str, Enum):
    """How the Back button picks its target"""
    RECOMPUTE = "recompute"  # derived from (step, selections)
    HISTORY = "history"      # last visited step


class WizardOrchestrator:
    """Drives a single strategy wizard traversal."""

    def __init__(self,
                 on_strategy_selected: Callable[[StrategySelectionResult], None],
                 on_cancel: Optional[Callable[[], None]] = None,
                 back_navigation: Union[BackNavigation, str] = BackNavigation.RECOMPUTE,
                 show_alternatives: bool = True):
        """
        Args:
            on_strategy_selected: Called once with the committed result
            on_cancel: Called once if the operator abandons the wizard
            back_navigation: "recompute" (default) or "history"
            show_alternatives: Offer compatible alternatives on confirmation
        """
        self.on_strategy_selected = on_strategy_selected
        self.on_cancel = on_cancel
        self.back_navigation = BackNavigation(back_navigation)
        self.show_alternatives = show_alternatives
        self.closed = False
        self._reset_state()

        logger.info(f"🧭 Strategy wizard started (back navigation: {self.back_navigation.value})")

    @classmethod
    def from_config(cls, config_manager: Any,
                    on_strategy_selected: Callable[[StrategySelectionResult], None],
                    on_cancel: Optional[Callable[[], None]] = None) -> "WizardOrchestrator":
        """Build an orchestrator using the `wizard.*` preferences."""

        return cls(
            on_strategy_selected=on_strategy_selected,
            on_cancel=on_cancel,
            back_navigation=config_manager.back_navigation(),
            show_alternatives=bool(config_manager.get('wizard.show_alternatives', True)),
        )

    def _reset_state(self):
        self.selections = Selections()
        self.step = WizardStep.GOAL
        self.breadcrumb = Breadcrumb()
        self.history = NavigationHistory()
        self.recommendation: Optional[StrategyRecommendation] = None

    def _ensure_open(self):
        if self.closed:
            raise WizardClosedError("Strategy wizard already finished")

    # ---------------- forward ----------------

    def select(self, dimension: Dimension, value: Any) -> WizardStep:
        """Record an answer for the current step and advance.

        Raises:
            InvalidSelectionError: if `dimension` is not asked on this step
                or `value` is outside the dimension's enumeration.
        """
        self._ensure_open()

        try:
            dimension = Dimension(dimension)
        except ValueError as exc:
            raise InvalidSelectionError(f"Unknown dimension: {dimension!r}") from exc

        expected = STEP_DIMENSIONS.get(self.step)
        if dimension != expected:
            raise InvalidSelectionError(
                f"Step {self.step.value} does not collect {dimension.value}"
            )

        try:
            self.selections = self.selections.with_value(dimension, value)
        except ValueError as exc:
            raise InvalidSelectionError(f"Invalid {dimension.value}: {value!r}") from exc

        self.recommendation = evaluate(self.selections)
        if self.recommendation is not None:
            logger.debug(f"Recommendation now {self.recommendation.strategy.value}")

        target = next_step(self.step, self.selections.get(dimension))
        logger.info(f"➡️ {self.step.value} -> {target.value} ({dimension.value}={self.selections.get(dimension).value})")

        self.step = target
        self.history.push(target)
        self.breadcrumb.push(STEP_LABELS[target])
        return target

    def answer(self, value: Any) -> WizardStep:
        """Shortcut for `select` on whatever the current step asks."""
        if self.step not in STEP_DIMENSIONS:
            raise InvalidSelectionError(f"Step {self.step.value} takes no answer")
        return self.select(STEP_DIMENSIONS[self.step], value)

    # ---------------- backward ----------------

    def back(self) -> WizardStep:
        """Return to the previous step; no-op on the goal step."""
        self._ensure_open()

        if self.step == WizardStep.GOAL:
            return self.step

        recomputed = previous_step(self.step, self.selections)
        visited = self.history.peek_previous()

        if visited is not None and visited != recomputed:
            logger.warning(
                f"⚠️ Back from {self.step.value}: recomputed {recomputed.value} "
                f"but last visited {visited.value}"
            )

        if self.back_navigation == BackNavigation.HISTORY and visited is not None:
            target = visited
        else:
            target = recomputed

        self.history.pop()
        if self.history.current != target:
            self.history.push(target)
        self.breadcrumb.pop()

        logger.info(f"⬅️ {self.step.value} -> {target.value}")
        self.step = target
        return target

    # ---------------- views ----------------

    def current_selector(self) -> Optional[DimensionSelector]:
        """Selector for the current question step, seeded with the stored answer."""
        dimension = STEP_DIMENSIONS.get(self.step)
        if dimension is None:
            return None
        selector_cls = SELECTOR_TYPES[dimension]
        return selector_cls(
            selection=self.selections.get(dimension),
            on_selection=lambda value: self.select(dimension, value),
        )

    def confirmation_view(self) -> ConfirmationView:
        return ConfirmationView(
            recommendation=self.recommendation,
            on_confirm=self._emit,
            on_back=self.back,
            on_cancel=self.cancel,
            show_alternatives=self.show_alternatives,
        )

    # ---------------- exits ----------------

    def confirm(self) -> Optional[StrategySelectionResult]:
        """Commit the recommendation shown on the confirmation step."""
        self._ensure_open()
        if self.step != WizardStep.CONFIRMATION:
            logger.debug(f"Confirm ignored on step {self.step.value}")
            return None
        return self.confirmation_view().confirm()

    def select_directly(self, strategy: Union[Strategy, str]) -> StrategySelectionResult:
        """Skip the questionnaire and commit a catalog strategy."""
        self._ensure_open()
        info = get_strategy_info(strategy)
        result = StrategySelectionResult(
            strategy=info.name,
            reason=f"Directly selected {info.name} strategy",
            path=["Direct Selection"],
            intermediate_storage=False,
        )
        self._emit(result)
        return result

    def cancel(self) -> None:
        """Abandon the wizard; nothing is emitted to the strategy callback."""
        self._ensure_open()
        self.closed = True
        self._reset_state()
        logger.info("🛑 Strategy wizard cancelled")
        if self.on_cancel:
            self.on_cancel()

    def restart(self) -> None:
        """Start over from the goal question."""
        self._ensure_open()
        self._reset_state()
        logger.info("🔁 Strategy wizard restarted")

    def _emit(self, result: StrategySelectionResult) -> None:
        self._ensure_open()
        self.closed = True
        logger.info(f"✅ Strategy selected: {result.strategy} ({' → '.join(result.path)})")
        self.on_strategy_selected(result)
