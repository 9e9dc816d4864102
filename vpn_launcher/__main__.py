#!/usr/bin/env python3
"""
Entry point for the VPN Launcher application.

This module provides the CLI entry point for the VPN Launcher when
run as a Python package (`python -m vpn_launcher`).
"""

import argparse
import os
import sys
import traceback

from vpn_launcher.app import VPNLauncher
from vpn_launcher.config import CONFIG_FILE_NAME, ConfigManager, get_app_dir
from vpn_launcher.exceptions import LauncherError
from vpn_launcher.openvpn import OpenVPNService
from vpn_launcher.ui import UIManager
from vpn_launcher.utils import print_error


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Pick a configured OpenVPN file and run openvpn against it (requires sudo)."
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show the commands being run and full tracebacks on errors.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the VPN Launcher application."""
    args = parse_arguments(argv)

    # config.json lives next to the program, not in the working directory
    config_path = os.path.join(get_app_dir(), CONFIG_FILE_NAME)

    launcher = VPNLauncher(
        config_manager=ConfigManager(config_path),
        ui_manager=UIManager(),
        openvpn_service=OpenVPNService(verbose=args.verbose),
        verbose=args.verbose
    )
    try:
        return launcher.run()
    except LauncherError as e:
        print_error(f"Error: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
