"""
Shared pytest fixtures for valuegraph tests.

Fixtures are organized by scope:
- function: Fresh state for each test (default)
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_values():
    """Mapping with one containment, one unrelated value."""
    return {"a": "hello", "b": "hello world", "c": "bye"}


@pytest.fixture
def sample_yaml():
    """YAML document for sample_values in a non-sorted key order."""
    return "c: bye\nb: hello world\na: hello\n"


@pytest.fixture
def values_file(tmp_path, sample_yaml):
    """Sample YAML document written to disk."""
    path = tmp_path / "values.yaml"
    path.write_text(sample_yaml, encoding="utf-8")
    return path


@pytest.fixture
def template_file(tmp_path):
    """Minimal template with a single placeholder."""
    path = tmp_path / "template.html"
    path.write_text("<script>const graph = REPLACE_ME;</script>", encoding="utf-8")
    return path


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Keep VALUEGRAPH_* variables and .env files from leaking into tests."""
    for name in list(os.environ):
        if name.startswith("VALUEGRAPH_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
