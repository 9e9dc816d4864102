#!/usr/bin/env python3
"""VPNLauncher Application Class - privilege gate, config load, menu and launch."""

from vpn_launcher.config import ConfigManager, LauncherConfig
from vpn_launcher.openvpn import OpenVPNService
from vpn_launcher.privileges import is_running_as_root
from vpn_launcher.ui import UIManager
from vpn_launcher.utils import print_info, print_warning, with_spinner


class VPNLauncher:
    """
    VPNLauncher runs one pass of the launcher: it checks privileges, loads
    config.json, asks the user to pick a VPN file and hands it to OpenVPN.
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        ui_manager: UIManager,
        openvpn_service: OpenVPNService,
        verbose: bool = False
    ):
        """Initialize the VPNLauncher with all needed services."""
        self.config_manager = config_manager
        self.ui_manager = ui_manager
        self.openvpn_service = openvpn_service
        self.verbose = verbose

    def run(self) -> int:
        """
        Run the launcher once.

        Returns:
            int: Exit code. Configuration and launch failures are raised as
            LauncherError for the caller to report.
        """
        if not is_running_as_root(verbose=self.verbose):
            print_warning("This program requires sudo privileges. Please run it with 'sudo'.")
            return 0

        try:
            config = self._load_config()

            entry = self.ui_manager.select_entry(config)
            if entry is None:
                return 0

            # A failing client is reported by the service but does not fail the launcher
            self.openvpn_service.connect(entry.path)
            return 0
        except KeyboardInterrupt:
            print_info("\nReceived Ctrl+C. Exiting...")
            return 1

    def _load_config(self) -> LauncherConfig:
        """Create config.json if needed, then load it."""
        self.config_manager.ensure_config()
        with with_spinner("Loading configuration...", fail_message="Could not load configuration."):
            return self.config_manager.load_config()
