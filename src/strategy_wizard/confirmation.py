# -*- coding: utf-8 -*-
"""
confirmation.py - Confirmation view model

Turns the current recommendation into what the final wizard screen shows:
either the "No Strategy Available" state (missing recommendation or one
carrying an `error`) or the recommended strategy with catalog details,
justification and compatible alternatives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from .catalog import StrategyInfo, get_strategy_info
from .models import Strategy, StrategyRecommendation, StrategySelectionResult

logger = logging.getLogger("Confirmation")

GENERIC_NO_STRATEGY = "Unable to determine a suitable strategy based on your selections."
INTERMEDIATE_STORAGE_NOTE = "This strategy will use intermediate storage for data transit."
PATH_SEPARATOR = " → "

NEXT_STEPS: Tuple[str, ...] = (
    "Source and target cluster connections",
    "Database and table selections",
    "Strategy-specific settings",
    "Migration execution options",
)

# Only the data-moving triangle has interchangeable strategies.
ALTERNATIVE_STRATEGIES: Dict[Strategy, Tuple[Tuple[Strategy, str], ...]] = {
    Strategy.SQL: (
        (Strategy.HYBRID, "Auto-selects method per table - good if you're unsure about partition sizes"),
        (Strategy.EXPORT_IMPORT, "Better for smaller partitioned tables with complex structures"),
    ),
    Strategy.HYBRID: (
        (Strategy.SQL, "If you know most tables have large partition counts"),
        (Strategy.EXPORT_IMPORT, "If you know most tables have small partition counts"),
    ),
    Strategy.EXPORT_IMPORT: (
        (Strategy.HYBRID, "Mix of SQL and EXPORT_IMPORT based on table characteristics"),
        (Strategy.SQL, "If you have many large partitioned tables"),
    ),
}


@dataclass(frozen=True)
class AlternativeStrategy:
    strategy: Strategy
    description: str
    reason: str


def get_alternative_strategies(strategy: Strategy) -> List[AlternativeStrategy]:
    """Compatible alternatives for a recommended strategy (at most two)."""

    return [
        AlternativeStrategy(alt, get_strategy_info(alt).description, reason)
        for alt, reason in ALTERNATIVE_STRATEGIES.get(strategy, ())
    ][:2]


@dataclass
class ConfirmationView:
    """Final wizard screen.

    Actions are wired by the orchestrator: `on_confirm(result)`, `on_back()`
    and `on_cancel()`.
    """

    recommendation: Optional[StrategyRecommendation]
    on_confirm: Optional[Callable[[StrategySelectionResult], None]] = None
    on_back: Optional[Callable[[], None]] = None
    on_cancel: Optional[Callable[[], None]] = None
    show_alternatives: bool = True
    alternatives: List[AlternativeStrategy] = field(init=False, default_factory=list)

    def __post_init__(self):
        if self.is_available and self.show_alternatives:
            self.alternatives = get_alternative_strategies(self.recommendation.strategy)

    # ---------------- state ----------------

    @property
    def is_available(self) -> bool:
        return self.recommendation is not None and self.recommendation.is_usable

    @property
    def title(self) -> str:
        if not self.is_available:
            return "No Strategy Available"
        return f"🎯 Recommended Strategy: {self.info.name}"

    @property
    def error_message(self) -> Optional[str]:
        if self.is_available:
            return None
        if self.recommendation is not None and self.recommendation.error:
            return self.recommendation.error
        return GENERIC_NO_STRATEGY

    @property
    def suggestion(self) -> Optional[str]:
        if self.recommendation is None or self.is_available:
            return None
        return self.recommendation.suggestion

    @property
    def info(self) -> Optional[StrategyInfo]:
        if not self.is_available:
            return None
        return get_strategy_info(self.recommendation.strategy)

    @property
    def path_text(self) -> str:
        if not self.is_available:
            return ""
        return PATH_SEPARATOR.join(self.recommendation.path)

    @property
    def intermediate_storage_note(self) -> Optional[str]:
        if self.is_available and self.recommendation.intermediate_storage:
            return INTERMEDIATE_STORAGE_NOTE
        return None

    @property
    def back_label(self) -> str:
        return "← Change Strategy" if self.is_available else "← Back to Revise"

    @property
    def confirm_label(self) -> Optional[str]:
        if not self.is_available:
            return None
        return f"Continue with {self.info.name} Strategy →"

    # ---------------- actions ----------------

    def confirm(self) -> Optional[StrategySelectionResult]:
        """Commit the recommendation; returns None when nothing is usable."""
        if not self.is_available:
            logger.debug("Confirm ignored: no usable recommendation")
            return None
        result = StrategySelectionResult.from_recommendation(self.recommendation)
        if self.on_confirm:
            self.on_confirm(result)
        return result

    def back(self) -> None:
        if self.on_back:
            self.on_back()

    def cancel(self) -> None:
        if self.on_cancel:
            self.on_cancel()

    # ---------------- rendering ----------------

    def render_text(self) -> str:
        """Plain-text rendering used by the terminal front end."""

        lines: List[str] = [self.title, ""]

        if not self.is_available:
            lines.append(f"❌ {self.error_message}")
            if self.suggestion:
                lines.append(f"Suggestion: {self.suggestion}")
            return "\n".join(lines)

        info = self.info
        lines.append(f"{info.name} Strategy - {info.description}")
        lines.append("")
        lines.append("Why this strategy?")
        lines.append(f"  {self.recommendation.reason}")
        if self.path_text:
            lines.append(f"  Your selections: {self.path_text}")
        lines.append("")
        lines.append("Key Features:")
        lines.extend(f"  ✓ {feature}" for feature in info.features)
        lines.append("Requirements:")
        lines.extend(f"  • {requirement}" for requirement in info.requirements)

        if self.intermediate_storage_note:
            lines.append("")
            lines.append(f"📦 Special Configuration: {self.intermediate_storage_note}")

        if self.alternatives:
            lines.append("")
            lines.append("Other Compatible Strategies:")
            for alt in self.alternatives:
                lines.append(f"  {alt.strategy.value}: {alt.description}")
                lines.append(f"    • {alt.reason}")

        lines.append("")
        lines.append("📋 Next Steps - after confirming you'll configure:")
        lines.extend(f"  - {step}" for step in NEXT_STEPS)
        return "\n".join(lines)
