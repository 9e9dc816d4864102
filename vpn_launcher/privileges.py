"""Privilege check for VPN Launcher."""

from vpn_launcher.utils import run_command

ROOT_UID = "0"


def is_running_as_root(verbose: bool = False) -> bool:
    """Check whether the effective user id is root. Any failure counts as unprivileged."""
    try:
        success, result = run_command(["id", "-u"], check=False, capture_output=True,
                                      silent=not verbose, verbose=verbose)
        if success and result.returncode == 0 and result.stdout:
            return result.stdout.strip() == ROOT_UID
        return False
    except Exception:
        return False
