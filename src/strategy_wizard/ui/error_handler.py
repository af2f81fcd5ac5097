# -*- coding: utf-8 -*-
"""
error_handler.py - User-facing error reporting for the wizard front ends

Provides:
- A catalog of friendly titles, messages and recovery suggestions keyed by
  exception class name
- `handle_ui_error` decorator for front-end actions
- Pluggable reporter so the Tk dialog and the terminal show errors their
  own way

Usage:
    from strategy_wizard.ui.error_handler import handle_ui_error

    @handle_ui_error("Failed to apply strategy")
    def on_continue(self):
        ...
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger("ErrorHandler")

# reporter(title, message) -> None
Reporter = Callable[[str, str], None]


ERROR_MESSAGES: Dict[str, Dict[str, Any]] = {
    'UnknownStrategyError': {
        'title': 'Unknown Strategy',
        'message': 'The requested migration strategy is not in the catalog.',
        'suggestions': [
            'Pick one of: SQL, HYBRID, EXPORT_IMPORT, SCHEMA_ONLY, STORAGE_MIGRATION, LINKED, COMMON, DUMP',
            'Run "strategy-wizard strategies" to list them',
        ]
    },
    'InvalidSelectionError': {
        'title': 'Invalid Answer',
        'message': 'That answer does not belong to the current question.',
        'suggestions': [
            'Choose one of the listed options',
            'Go back and revise an earlier answer',
        ]
    },
    'WizardClosedError': {
        'title': 'Wizard Finished',
        'message': 'This strategy wizard has already completed or was cancelled.',
        'suggestions': [
            'Open a new strategy wizard to choose again',
        ]
    },
    'FileNotFoundError': {
        'title': 'File Not Found',
        'message': 'The requested file could not be found.',
        'suggestions': [
            'Check if the file path is correct',
            'Ensure the file hasn\'t been moved or deleted',
        ]
    },
    'JSONDecodeError': {
        'title': 'Configuration Error',
        'message': 'Failed to parse configuration file.',
        'suggestions': [
            'Check JSON syntax in the configuration file',
            'Delete the preferences file to regenerate defaults',
        ]
    },
    'ValueError': {
        'title': 'Invalid Configuration',
        'message': 'The migration configuration could not be updated.',
        'suggestions': [
            'Make sure the file holds a single JSON object',
            'Check that "transfer" is an object if present',
        ]
    },
    'PermissionError': {
        'title': 'Permission Denied',
        'message': 'The file could not be read or written.',
        'suggestions': [
            'Check file permissions',
            'Choose a different output location',
        ]
    },
    'default': {
        'title': 'Unexpected Error',
        'message': 'An unexpected error occurred.',
        'suggestions': [
            'Try the operation again',
            'Check logs for details',
        ]
    }
}


def log_reporter(title: str, message: str) -> None:
    logger.error(f"{title}: {message}")


class ErrorHandler:
    """Maps exceptions to friendly messages and sends them to a reporter"""

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter or log_reporter
        self.error_messages = ERROR_MESSAGES

    def describe(self, exception: BaseException) -> Dict[str, Any]:
        """Return title/message/suggestions for an exception"""
        info = self.error_messages.get(type(exception).__name__, self.error_messages['default'])
        return {
            'title': info['title'],
            'message': info['message'],
            'details': str(exception),
            'suggestions': list(info['suggestions']),
        }

    def format(self, exception: BaseException) -> str:
        info = self.describe(exception)
        lines: List[str] = [info['message']]
        if info['details']:
            lines.append(f"Details: {info['details']}")
        lines.append("")
        lines.append("💡 Suggested Actions")
        lines.extend(f"{i}. {s}" for i, s in enumerate(info['suggestions'], 1))
        return "\n".join(lines)

    def report(self, exception: BaseException) -> None:
        info = self.describe(exception)
        self.reporter(info['title'], self.format(exception))


def handle_ui_error(message: str = None, silent: bool = False,
                    reporter: Optional[Reporter] = None):
    """Decorator for handling errors in front-end actions

    Args:
        message: Custom error message prefix
        silent: If True, log but don't report
        reporter: Overrides the handler's reporter; when the wrapped
            method's instance has an `error_handler` attribute that one is used

    The wrapped call returns None when an error was handled.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                error_msg = f"{message}: {e}" if message else str(e)
                logger.error(f"Error in {func.__name__}: {error_msg}", exc_info=True)

                if not silent:
                    handler = getattr(args[0], 'error_handler', None) if args else None
                    if not isinstance(handler, ErrorHandler):
                        handler = ErrorHandler(reporter)
                    elif reporter is not None:
                        handler = ErrorHandler(reporter)
                    handler.report(e)

                return None

        return wrapper
    return decorator
