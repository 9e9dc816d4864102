"""VPN Launcher - pick a configured OpenVPN file and run openvpn against it."""

__version__ = "0.1.0"
