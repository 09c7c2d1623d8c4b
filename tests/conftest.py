"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from autoseg.config.loader import load_config_from_string
from autoseg.examples.utils import SAMPLE_PALI, SAMPLE_MYANMAR, SAMPLE_THAI
from autoseg.runtime.engine import Segmenter


class ScriptedBoundaries:
    """Boundary oracle that replays a fixed list of span texts."""
    
    def __init__(self, parts):
        self.parts = list(parts)
    
    def spans(self, text):
        offset = 0
        for part in self.parts:
            yield offset, part
            offset += len(part)


class GappyBoundaries:
    """Boundary oracle that drops the first character of every span after the first."""
    
    def spans(self, text):
        yield 0, text[:3]
        yield 4, text[4:]


@pytest.fixture
def scripted():
    """Factory for scripted boundary oracles."""
    return ScriptedBoundaries


@pytest.fixture
def gappy_oracle():
    """Sentence oracle whose spans leave a gap."""
    return GappyBoundaries()


@pytest.fixture
def segmenter():
    """Default engine (UAX #29 boundaries)."""
    return Segmenter()


@pytest.fixture
def rules_segmenter():
    """Engine on the rule-based boundary backend."""
    return load_segmenter_with_backend("rules")


def load_segmenter_with_backend(backend):
    config = load_config_from_string(f"backend: {backend}\n")
    return Segmenter(config=config)


@pytest.fixture
def sample_pali():
    return SAMPLE_PALI


@pytest.fixture
def sample_myanmar():
    return SAMPLE_MYANMAR


@pytest.fixture
def sample_thai():
    return SAMPLE_THAI


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
version: 1
backend: rules
list_markers:
  max_length: 8
  openers: "(["
  terminators: ".)။"
abbreviations:
  max_length: 3
  terminator: "."
validate_boundaries: true
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False,
                                     encoding='utf-8') as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def names(self, level=None):
        return [m for lvl, m, _ in self.messages if level is None or lvl == level]
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter that accumulates counters and observations in memory."""
    
    def __init__(self):
        self.counters = {}
        self.observations = {}
    
    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations.setdefault(name, []).append(value)


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
