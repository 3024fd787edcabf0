"""
Configuration management for the diff highlighter.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, List

import yaml

from diffhighlight.highlight_exceptions import HighlightConfigError
from diffhighlight.highlight_style import HighlightStyle, REVERSE_VIDEO_STYLE
from diffhighlight.segment_oracle import ORACLES, SegmentOracle


DEFAULT_MIN_BUFFER_SIZE = 512
DEFAULT_ORACLE = 'diff-match-patch'

_STYLE_KEYS = ('insert_begin', 'insert_end', 'delete_begin', 'delete_end')


@dataclass
class HighlightConfig:
    """Settings for a highlighting stream."""

    style: HighlightStyle = REVERSE_VIDEO_STYLE
    min_buffer_size: int = DEFAULT_MIN_BUFFER_SIZE
    oracle: str = DEFAULT_ORACLE
    encoding: str = 'utf-8'

    @classmethod
    def load_from_file(cls, config_path: str) -> 'HighlightConfig':
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the configuration file

        Returns:
            The loaded configuration

        Raises:
            HighlightConfigError: If the file is missing, unreadable or invalid
        """
        if not os.path.exists(config_path):
            raise HighlightConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

        except (OSError, yaml.YAMLError) as e:
            raise HighlightConfigError(
                f"Failed to read configuration file: {config_path}",
                {'path': config_path, 'reason': str(e)}
            ) from e

        return cls.from_dict(data or {}, source=config_path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = '<dict>') -> 'HighlightConfig':
        """
        Build a configuration from plain data, applying defaults for missing keys.

        Raises:
            HighlightConfigError: If the data is not a mapping or fails validation
        """
        if not isinstance(data, dict):
            raise HighlightConfigError(
                f"Configuration must be a mapping: {source}",
                {'path': source, 'reason': f"got {type(data).__name__}"}
            )

        style_data = data.get('style') or {}
        if not isinstance(style_data, dict):
            raise HighlightConfigError(
                f"Configuration 'style' must be a mapping: {source}",
                {'path': source, 'reason': f"got {type(style_data).__name__}"}
            )

        unknown = sorted(set(style_data) - set(_STYLE_KEYS))
        if unknown:
            raise HighlightConfigError(
                f"Unknown style keys in {source}: {', '.join(unknown)}",
                {'path': source, 'unknown_keys': unknown}
            )

        config = cls(
            style=replace(REVERSE_VIDEO_STYLE, **style_data),
            min_buffer_size=data.get('min_buffer_size', DEFAULT_MIN_BUFFER_SIZE),
            oracle=data.get('oracle', DEFAULT_ORACLE),
            encoding=data.get('encoding', 'utf-8'),
        )

        errors = config.validate()
        if errors:
            raise HighlightConfigError(
                f"Invalid configuration in {source}",
                {'path': source, 'errors': errors}
            )

        return config

    def validate(self) -> List[str]:
        """
        Check the configuration for problems.

        Returns:
            Human-readable problems; empty if the configuration is valid
        """
        errors = []

        if isinstance(self.min_buffer_size, bool) or not isinstance(self.min_buffer_size, int):
            errors.append(f"min_buffer_size must be an integer, got {self.min_buffer_size!r}")

        elif self.min_buffer_size < 1:
            errors.append(f"min_buffer_size must be positive, got {self.min_buffer_size}")

        if self.oracle not in ORACLES:
            errors.append(f"Unknown oracle '{self.oracle}' (expected one of: {', '.join(sorted(ORACLES))})")

        for key in _STYLE_KEYS:
            if not isinstance(getattr(self.style, key), str):
                errors.append(f"style.{key} must be a string")

        try:
            ''.encode(self.encoding)

        except (LookupError, TypeError):
            errors.append(f"Unknown encoding '{self.encoding}'")

        return errors

    def get_oracle(self) -> SegmentOracle:
        """Get the diff function named by this configuration."""
        try:
            return ORACLES[self.oracle]

        except KeyError as e:
            raise HighlightConfigError(
                f"Unknown oracle '{self.oracle}'",
                {'oracle': self.oracle, 'available': sorted(ORACLES)}
            ) from e
