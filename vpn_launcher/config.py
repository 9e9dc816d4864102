"""Configuration management for VPN Launcher."""

import json
import os
import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Dict, Any

from vpn_launcher.exceptions import ConfigurationError
from vpn_launcher.utils import print_info, print_success

CONFIG_FILE_NAME = "config.json"


@dataclass
class VPNEntry:
    """A named VPN definition file offered in the menu."""
    name: str
    path: str


@dataclass
class LauncherConfig:
    """Application configuration loaded from config.json."""
    vpn_files: List[VPNEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, config_dict: Any) -> "LauncherConfig":
        """Build a LauncherConfig from parsed JSON, rejecting anything malformed."""
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Top level of the config file must be a JSON object.")
        if "vpn_files" not in config_dict:
            raise ConfigurationError("Missing required field 'vpn_files'.")

        raw_entries = config_dict["vpn_files"]
        if not isinstance(raw_entries, list):
            raise ConfigurationError("Field 'vpn_files' must be a list.")

        entries = []
        for index, raw_entry in enumerate(raw_entries):
            if not isinstance(raw_entry, dict):
                raise ConfigurationError(f"vpn_files[{index}] must be an object.")
            for key in ("name", "path"):
                if not isinstance(raw_entry.get(key), str):
                    raise ConfigurationError(f"vpn_files[{index}] needs a string '{key}'.")
            entries.append(VPNEntry(name=raw_entry["name"], path=raw_entry["path"]))
        return cls(vpn_files=entries)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_app_dir() -> Path:
    """Directory of the running program, where config.json lives."""
    if getattr(sys, "frozen", False):
        # Bundled into a single executable
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent.parent


class ConfigManager:
    """Creates and loads the launcher configuration file."""

    DEFAULT_CONFIG = {
        "vpn_files": [
            {"name": "Example VPN 1", "path": "/path/to/example_vpn1.ovpn"},
            {"name": "Example VPN 2", "path": "/path/to/example_vpn2.ovpn"},
        ]
    }

    def __init__(self, config_path: str):
        """Initialize the configuration manager."""
        self.config_path = config_path

    def config_exists(self) -> bool:
        return os.path.exists(self.config_path)

    def create_default_config(self) -> None:
        """Write the default configuration with placeholder entries."""
        default_config = LauncherConfig.from_dict(self.DEFAULT_CONFIG)
        try:
            with open(self.config_path, 'w') as file:
                json.dump(default_config.to_dict(), file, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Could not write config file {self.config_path}: {e}") from e

    def ensure_config(self) -> bool:
        """
        Create the default config file if it is missing.

        Returns:
            bool: True if a new file was written.
        """
        if self.config_exists():
            return False

        print_info("Configuration file not found. Creating a default config file...")
        self.create_default_config()
        print_success(
            f"Default configuration file created at '{self.config_path}'. Please update it as needed."
        )
        return True

    def load_config(self) -> LauncherConfig:
        """Load the configuration from disk. Any failure is fatal."""
        try:
            with open(self.config_path, 'r') as file:
                config_dict = json.load(file)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {self.config_path} is not valid JSON: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Could not read config file {self.config_path}: {e}") from e

        try:
            return LauncherConfig.from_dict(config_dict)
        except ConfigurationError as e:
            raise ConfigurationError(f"Config file {self.config_path} is invalid: {e}") from e
