# -*- coding: utf-8 -*-
"""
config_manager.py - Strategy wizard preferences

Features:
- JSON preferences file (default ~/.hms_mirror/strategy_wizard.json,
  overridable with STRATEGY_WIZARD_CONFIG)
- Defaults merged recursively with whatever is on disk
- Dot-path get/set
- Config versioning
- Import/export/reset
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .orchestrator import BackNavigation

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STRATEGY_WIZARD_CONFIG"
LOG_LEVEL_ENV_VAR = "STRATEGY_WIZARD_LOG_LEVEL"


class ConfigManager:
    """
    Manage wizard preferences

    Sections:
    - wizard: back navigation mode, alternatives, last committed strategy
    - advanced: log level
    """

    CONFIG_VERSION = "1.0"

    DEFAULT_CONFIG = {
        'version': CONFIG_VERSION,
        'wizard': {
            'back_navigation': BackNavigation.RECOMPUTE.value,
            'show_alternatives': True,
            'remember_last_strategy': True,
            'last_strategy': None,
        },
        'advanced': {
            'log_level': 'INFO',
        }
    }

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            env_path = os.getenv(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else Path.home() / '.hms_mirror' / 'strategy_wizard.json'

        self.config_path = Path(config_path)
        self.config: Dict = copy.deepcopy(self.DEFAULT_CONFIG)
        self.load()

    def load(self):
        """Load configuration from disk"""
        if not self.config_path.exists():
            logger.info("No config file found, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)

            if not isinstance(loaded, dict):
                raise ValueError("Invalid config format")

            self.config = self._merge_configs(self.DEFAULT_CONFIG, loaded)

            if self.config.get('version') != self.CONFIG_VERSION:
                logger.info(f"Config version mismatch, migrating from {self.config.get('version')} to {self.CONFIG_VERSION}")
                self._migrate_config()

            logger.info(f"Config loaded from {self.config_path}")

        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config: {e}")
            logger.info("Using default configuration")
            self.config = copy.deepcopy(self.DEFAULT_CONFIG)

    def save(self):
        """Save configuration to disk"""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2)

            logger.debug(f"Config saved to {self.config_path}")

        except OSError as e:
            logger.error(f"Failed to save config: {e}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get config value using dot notation

        Example:
            config.get('wizard.back_navigation')  -> 'recompute'
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any, save_now: bool = True):
        """
        Set config value using dot notation

        Example:
            config.set('wizard.show_alternatives', False)
        """
        keys = key_path.split('.')
        target = self.config

        for key in keys[:-1]:
            if key not in target:
                target[key] = {}
            target = target[key]

        target[keys[-1]] = value

        if save_now:
            self.save()

    def back_navigation(self) -> BackNavigation:
        """Configured Back-button mode, falling back to recompute."""
        raw = self.get('wizard.back_navigation', BackNavigation.RECOMPUTE.value)
        try:
            return BackNavigation(raw)
        except ValueError:
            logger.warning(f"Unknown wizard.back_navigation {raw!r}, using 'recompute'")
            return BackNavigation.RECOMPUTE

    def log_level(self) -> str:
        """Log level from the environment, else from the config file."""
        return (os.getenv(LOG_LEVEL_ENV_VAR) or self.get('advanced.log_level', 'INFO')).upper()

    def remember_strategy(self, strategy: str):
        """Record the last committed strategy if enabled"""
        if self.get('wizard.remember_last_strategy', True):
            self.set('wizard.last_strategy', strategy)

    def export_config(self, export_path: Path) -> bool:
        """Export configuration to file"""
        try:
            with open(export_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2)
            logger.info(f"Config exported to {export_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to export config: {e}")
            return False

    def import_config(self, import_path: Path) -> bool:
        """Import configuration from file"""
        try:
            with open(import_path, 'r', encoding='utf-8') as f:
                imported = json.load(f)

            if not isinstance(imported, dict):
                raise ValueError("Invalid config format")

            self.config = self._merge_configs(self.DEFAULT_CONFIG, imported)
            self.save()

            logger.info(f"Config imported from {import_path}")
            return True

        except (OSError, ValueError) as e:
            logger.error(f"Failed to import config: {e}")
            return False

    def reset_to_defaults(self):
        """Reset configuration to defaults"""
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.save()
        logger.info("Config reset to defaults")

    def _merge_configs(self, default: Dict, loaded: Dict) -> Dict:
        """Recursively merge loaded config with defaults"""
        result = copy.deepcopy(default)

        for key, value in loaded.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _migrate_config(self):
        """Migrate config from old version to current"""
        # Only one version exists so far
        self.config['version'] = self.CONFIG_VERSION
        self.save()
