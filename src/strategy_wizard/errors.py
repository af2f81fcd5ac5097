# -*- coding: utf-8 -*-
"""errors.py - Exception hierarchy for the strategy wizard.

The decision engine never raises: the one infeasible-migration case is
carried as data on the recommendation. These exceptions only flag
programming errors at the wizard's seams.
"""


class WizardError(Exception):
    """Base class for strategy wizard errors."""


class UnknownStrategyError(WizardError, KeyError):
    """Raised when a strategy identifier is not in the catalog."""


class InvalidSelectionError(WizardError, ValueError):
    """Raised when a selector is given a value outside its option set."""


class WizardClosedError(WizardError, RuntimeError):
    """Raised when a wizard is driven after it already committed or cancelled."""
