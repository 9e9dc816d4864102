"""Utility functions for VPN Launcher."""

import subprocess
import sys
from typing import Any, List, Tuple, Union
from yaspin import yaspin
from yaspin.spinners import Spinners


class Colors:
    """ANSI color codes for colored terminal output."""
    BLUE = "\033[94m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_color(message: str, color: str, end: str = "\n", file=None) -> None:
    """Print a message in color to the terminal."""
    print(f"{color}{message}{Colors.ENDC}", end=end, file=file)


def print_info(message: str) -> None:
    """Print an informational message in blue."""
    print_color(message, Colors.BLUE)


def print_success(message: str) -> None:
    """Print a success message in green."""
    print_color(message, Colors.GREEN)


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    print_color(message, Colors.YELLOW)


def print_error(message: str) -> None:
    """Print an error message in red on stderr."""
    print_color(message, Colors.RED, file=sys.stderr)


def format_command(command: Union[str, List[str]]) -> str:
    """Render a command for display."""
    if isinstance(command, str):
        return command
    return " ".join(command)


def run_command(command: Union[str, List[str]], check: bool = True, capture_output: bool = True,
                silent: bool = False, verbose: bool = False) -> Tuple[bool, Any]:
    """
    Wrapper for subprocess.run with error handling.

    Args:
        command: The command to run, either a shell string or an argument list
        check: Whether to check the return code
        capture_output: Whether to capture stdout/stderr
        silent: Whether to suppress command output and error messages to console
        verbose: Whether to print the command being run and successful output
    """
    try:
        if verbose and not silent:
            print_info(f"Running command: {format_command(command)}")

        result = subprocess.run(
            command,
            shell=isinstance(command, str),
            text=True,
            capture_output=capture_output,
            check=check
        )
        if verbose and not silent and result.stdout:
            print_success(f"Command output:\n{result.stdout}")
        return True, result
    except subprocess.CalledProcessError as e:
        if not silent:
            print_error(f"Command failed: {e}")
            if e.stderr:
                print_error(f"Error output: {e.stderr}")
        return False, e
    except Exception as e:
        if not silent:
            print_error(f"Error executing command: {str(e)}")
        return False, e


def with_spinner(text: str, success_message: str = None, fail_message: str = None):
    """
    Context manager to run a block with a spinner.

    Usage:
        with with_spinner("Loading configuration...", fail_message="Could not load configuration."):
            config = manager.load_config()
    """
    class SpinnerWrapper:
        def __enter__(self):
            self.spinner = yaspin(Spinners.dots, text=text)
            if sys.stdout.isatty():
                self.spinner.start()
            else:
                print_info(text)
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if sys.stdout.isatty():
                if exc_type is None:
                    self.spinner.ok("✓")
                else:
                    self.spinner.fail("✗")
            if exc_type is None:
                if success_message:
                    print_success(success_message)
            elif fail_message:
                print_error(fail_message)
            return False  # Don't suppress exceptions

    return SpinnerWrapper()
