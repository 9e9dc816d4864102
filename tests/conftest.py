"""
Pytest configuration and shared fixtures.
"""

import json
from unittest.mock import patch

import pytest


@pytest.fixture
def config_path(tmp_path):
    """Path to a config.json that does not exist yet."""
    return str(tmp_path / "config.json")


@pytest.fixture
def write_config(config_path):
    """Write raw text or a JSON-serialisable object to config.json."""
    def _write(content):
        with open(config_path, "w") as f:
            if isinstance(content, str):
                f.write(content)
            else:
                json.dump(content, f)
        return config_path
    return _write


@pytest.fixture
def three_entries():
    return {
        "vpn_files": [
            {"name": "Office", "path": "/etc/openvpn/office.ovpn"},
            {"name": "Home", "path": "/etc/openvpn/home.ovpn"},
            {"name": "Office", "path": "/srv/vpn/office (backup).ovpn"},
        ]
    }


@pytest.fixture
def as_root():
    with patch("vpn_launcher.app.is_running_as_root", return_value=True) as mock_check:
        yield mock_check


@pytest.fixture
def as_user():
    with patch("vpn_launcher.app.is_running_as_root", return_value=False) as mock_check:
        yield mock_check
