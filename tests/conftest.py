"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add package path to sys.path
packages_dir = Path(__file__).parent.parent / "packages"
sys.path.insert(0, str(packages_dir / "qchart"))

from qchart.core.config_loader import ENV_VAR, reset_system_config_cache  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config out of tests and start each test uncached."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv(ENV_VAR, raising=False)
    reset_system_config_cache()
    yield home
    reset_system_config_cache()


@pytest.fixture
def write_yaml(tmp_path):
    """Return a helper that dumps a mapping to a YAML file under tmp_path."""
    import yaml

    def _write(name, data):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _write


@pytest.fixture
def sales_layout():
    """A valid rectangular layout with one bar chart and a mark area."""
    return {
        "coordinate": "rectangular",
        "position": {"left": 40, "top": "10%"},
        "axes": [
            {"id": "month", "type": "x", "data_type": "category", "name": "Month"},
            {"id": "sales", "type": "y", "name": "Sales", "min": 0},
        ],
        "charts": [
            {
                "type": "bar",
                "name": "Sales",
                "axes": ["month", "sales"],
                "data": [
                    {"values": ["Jan", "Feb", "Mar"], "category": True},
                    {"values": [120, 200, 150]},
                ],
                "mark_area": {"name": "Promotion", "regions": [["Feb", "Mar"]]},
            }
        ],
    }
