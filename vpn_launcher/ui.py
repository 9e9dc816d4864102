"""User interface for VPN Launcher."""

import re
import sys
from typing import Optional

from InquirerPy import inquirer

from vpn_launcher.config import LauncherConfig, VPNEntry
from vpn_launcher.utils import print_info, print_success, print_warning

CHOICE_PROMPT = "Enter your choice (number):"

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def parse_choice(raw: str) -> int:
    """Parse a menu choice as an unsigned integer, returning 0 for anything unparsable."""
    text = raw.strip()
    if not _UNSIGNED_INT.fullmatch(text):
        return 0
    return int(text)


class UIManager:
    """Renders the VPN menu and reads the user's single choice."""

    def display_entries(self, config: LauncherConfig) -> None:
        """Print the numbered list of configured VPN files in file order."""
        print_info("Select a VPN file to run:")
        for i, entry in enumerate(config.vpn_files, start=1):
            print(f"{i}: {entry.name} ({entry.path})")

    def prompt_choice(self) -> str:
        """Read one line of input. End of input counts as an empty answer."""
        if sys.stdin.isatty():
            return inquirer.text(message=CHOICE_PROMPT).execute() or ""
        try:
            return input(f"{CHOICE_PROMPT} ")
        except EOFError:
            return ""

    def select_entry(self, config: LauncherConfig) -> Optional[VPNEntry]:
        """
        Show the menu and prompt once for a selection.

        Returns:
            The chosen entry, or None if the choice was invalid.
        """
        self.display_entries(config)
        choice = parse_choice(self.prompt_choice())

        if choice == 0 or choice > len(config.vpn_files):
            print_warning("Invalid choice.")
            return None

        selected = config.vpn_files[choice - 1]
        print_success(f"You selected: {selected.name} ({selected.path})")
        return selected
