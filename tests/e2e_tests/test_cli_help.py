"""End-to-end smoke tests for the installed CLI entrypoint."""

from __future__ import annotations

import json
import subprocess

import bytes_converter


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert bytes_converter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["convert-bytes", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Convert between text, URI, hex and Base64" in result.stdout


def test_cli_convert_json_smoke() -> None:
    """Convert stdin input through the installed entrypoint."""
    result = subprocess.run(
        ["convert-bytes", "convert", "hex", "--json"],
        input="F0 9F 98 80\n",
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
    )

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["code_points"] == [0x1F600]
    assert payload["unicode"] == "U+01f600"


def test_cli_invalid_input_fails_cleanly() -> None:
    """Ensure invalid input yields a user-facing error and non-zero exit."""
    result = subprocess.run(
        ["convert-bytes", "convert", "hex", "ZZ"],
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
    )

    assert result.returncode == 1
    assert "Hex string can only contain 0-9 A-F" in result.stderr
