"""Tests for launching the OpenVPN client."""

import sys
from unittest.mock import Mock, patch

import pytest

from vpn_launcher.exceptions import LaunchError
from vpn_launcher.openvpn import OpenVPNService, describe_exit_status


@pytest.mark.parametrize("returncode, expected", [
    (0, "exit status: 0"),
    (1, "exit status: 1"),
    (-15, "signal: 15"),
])
def test_describe_exit_status(returncode, expected):
    assert describe_exit_status(returncode) == expected


def test_launch_passes_config_file_as_only_argument():
    process = Mock()
    process.wait.return_value = 0
    with patch("vpn_launcher.openvpn.subprocess.Popen", return_value=process) as mock_popen:
        assert OpenVPNService().launch("/etc/openvpn/office.ovpn") == 0

    mock_popen.assert_called_once_with(["openvpn", "/etc/openvpn/office.ovpn"])


def test_launch_missing_binary_raises():
    service = OpenVPNService(binary="vpn-launcher-no-such-binary")
    with pytest.raises(LaunchError, match="failed to execute vpn-launcher-no-such-binary"):
        service.launch("/etc/openvpn/office.ovpn")


def test_launch_permission_denied_raises():
    with patch("vpn_launcher.openvpn.subprocess.Popen", side_effect=PermissionError("denied")):
        with pytest.raises(LaunchError):
            OpenVPNService().launch("/etc/openvpn/office.ovpn")


def test_launch_returns_real_exit_code(tmp_path):
    script = tmp_path / "client.py"
    script.write_text("import sys\nsys.exit(3)\n")

    assert OpenVPNService(binary=sys.executable).launch(str(script)) == 3


def test_launch_waits_for_client_after_interrupt(capsys):
    process = Mock()
    process.wait.side_effect = [KeyboardInterrupt, 0]
    with patch("vpn_launcher.openvpn.subprocess.Popen", return_value=process):
        assert OpenVPNService().launch("/etc/openvpn/office.ovpn") == 0

    assert process.wait.call_count == 2
    assert "Waiting for openvpn to exit" in capsys.readouterr().out


def test_connect_reports_clean_exit(capsys):
    service = OpenVPNService()
    with patch.object(service, "launch", return_value=0):
        assert service.connect("/etc/openvpn/office.ovpn") is True
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize("returncode, status", [(1, "exit status: 1"), (-2, "signal: 2")])
def test_connect_reports_failed_exit_on_stderr(capsys, returncode, status):
    service = OpenVPNService()
    with patch.object(service, "launch", return_value=returncode):
        assert service.connect("/etc/openvpn/office.ovpn") is False
    assert f"openvpn command exited with status: {status}" in capsys.readouterr().err


def test_verbose_launch_echoes_command(capsys):
    process = Mock()
    process.wait.return_value = 0
    with patch("vpn_launcher.openvpn.subprocess.Popen", return_value=process):
        OpenVPNService(verbose=True).launch("/etc/openvpn/office.ovpn")
    assert "Running command: openvpn /etc/openvpn/office.ovpn" in capsys.readouterr().out
