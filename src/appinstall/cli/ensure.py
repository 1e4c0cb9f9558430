"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix and exit with code 1.
"""

from pathlib import Path

import click

from appinstall.cli.output import user_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def valid_app_name(name: str) -> str:
        """Ensure the package name is a single, plain folder name.

        Raises:
            SystemExit: If name is empty, a path, or a relative component
        """
        Ensure.invariant(bool(name.strip()), "App folder name must not be empty")
        Ensure.invariant(
            name not in (".", "..") and Path(name).name == name and "\\" not in name,
            f"App folder name must be a folder name, not a path: {name}",
        )
        return name
