"""
OpenVPN service for VPN Launcher.
Runs the local OpenVPN client in the foreground against a chosen definition file.
"""

import subprocess

from vpn_launcher.exceptions import LaunchError
from vpn_launcher.utils import format_command, print_error, print_info

OPENVPN_BINARY = "openvpn"


def describe_exit_status(returncode: int) -> str:
    """Describe a process exit status, e.g. 'exit status: 1' or 'signal: 15'."""
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status: {returncode}"


class OpenVPNService:
    """Handles launching the OpenVPN client."""

    def __init__(self, binary: str = OPENVPN_BINARY, verbose: bool = False):
        """Initialize the OpenVPN service. The binary is looked up on PATH."""
        self.binary = binary
        self.verbose = verbose

    def launch(self, config_file: str) -> int:
        """
        Run the client attached to the terminal and wait for it to exit.

        Returns:
            int: The client's return code (negative if killed by a signal).

        Raises:
            LaunchError: If the client could not be started at all.
        """
        command = [self.binary, config_file]
        if self.verbose:
            print_info(f"Running command: {format_command(command)}")

        try:
            process = subprocess.Popen(command)
        except OSError as e:
            raise LaunchError(f"failed to execute {self.binary}: {e}") from e

        # Ctrl+C also reaches the client, so keep waiting while it shuts down
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                print_info(f"\nInterrupt received. Waiting for {self.binary} to exit...")

    def connect(self, config_file: str) -> bool:
        """Run the client and report a non-zero exit. Returns True on a clean exit."""
        returncode = self.launch(config_file)
        if returncode != 0:
            print_error(f"{self.binary} command exited with status: {describe_exit_status(returncode)}")
            return False
        return True
