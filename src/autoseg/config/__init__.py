"""Segmenter configuration: pydantic schema and YAML loading."""

from .schema import SegmenterConfig, ListMarkerSettings, AbbreviationSettings
from .loader import load_config, load_config_from_string, ConfigLoadError

__all__ = [
    'SegmenterConfig', 'ListMarkerSettings', 'AbbreviationSettings',
    'load_config', 'load_config_from_string', 'ConfigLoadError',
]
