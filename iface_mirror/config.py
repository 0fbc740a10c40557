"""
Configuration management for iface-mirror.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Any
from dataclasses import dataclass
from enum import Enum

from .codegen.cloning import DEFAULT_OVERRIDE_BODY
from .model.symbols import NATIVE_LINKAGE

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Log levels supported by the generator."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


LOG_LEVEL_MAP = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: logging.DEBUG  # Python doesn't have TRACE, use DEBUG
}


@dataclass
class GeneratorOptions:
    """Options controlling declaration generation."""
    native_linkage: str = NATIVE_LINKAGE
    override_body: str = DEFAULT_OVERRIDE_BODY
    log_level: LogLevel = LogLevel.INFO

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratorOptions':
        """Create GeneratorOptions from dictionary."""
        log_level = LogLevel.INFO
        if 'log_level' in data:
            try:
                log_level = LogLevel(data['log_level'])
            except ValueError:
                logger.warning(f"Invalid log level: {data['log_level']}")

        return cls(
            native_linkage=data.get('native_linkage', NATIVE_LINKAGE),
            override_body=data.get('override_body', DEFAULT_OVERRIDE_BODY),
            log_level=log_level
        )


class Config:
    """Main configuration class for iface-mirror."""

    def __init__(self):
        self._options = GeneratorOptions()
        self._options_file: Optional[Path] = None

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    @property
    def native_linkage(self) -> str:
        """Linkage that cloned declarations do not spell out."""
        return self._options.native_linkage

    @property
    def override_body(self) -> str:
        """Body appended to each declaration when cloning a whole interface."""
        return self._options.override_body

    def set_options(self, options: Dict[str, Any]) -> None:
        """Set options from a dictionary; the log level is applied only when given."""
        self._options = GeneratorOptions.from_dict(options)
        logger.info(f"Generator options set: {self._options}")
        if 'log_level' in options:
            logging.getLogger().setLevel(LOG_LEVEL_MAP[self._options.log_level])

    def load_options(self, path: Path) -> None:
        """
        Load generator options from a JSON file.

        The format is:
        {
          "native_linkage": "D",
          "override_body": "{ assert(false); }",
          "log_level": "info"
        }

        Args:
            path: Path to the options JSON file
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except Exception as e:
            logger.error(f"Failed to load options from {path}: {e}")
            raise

        self.set_options(data)
        self._options_file = path
        logger.info(f"Loaded options from {path}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            'options_file': str(self._options_file) if self._options_file else None,
            'native_linkage': self._options.native_linkage,
            'override_body': self._options.override_body,
            'log_level': self._options.log_level.value,
        }
