"""Exceptions for VPN Launcher."""


class LauncherError(Exception):
    """Base exception for errors that abort the launcher."""
    pass


class ConfigurationError(LauncherError):
    """Raised when config.json cannot be written, read or parsed."""
    pass


class LaunchError(LauncherError):
    """Raised when the VPN client process cannot be started."""
    pass
