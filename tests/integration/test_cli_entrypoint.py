"""
Integration Tests for the owo entry point.

Runs `python -m owo` in a subprocess with real configuration loading.
No request ever reaches the network: every case fails or exits before one.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration

PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_owo(*args: str, input: bytes | None = None) -> subprocess.CompletedProcess:
    env = {k: v for k, v in os.environ.items() if not k.startswith("OWO_")}
    return subprocess.run(
        [sys.executable, "-m", "owo", *args],
        input=input,
        cwd=PROJECT_ROOT,
        capture_output=True,
        env=env,
        timeout=60,
    )


class TestEntryPoint:
    """Integration tests for the command-line interface."""

    def test_help_returns_zero_exit_code(self):
        result = run_owo("--help")

        assert result.returncode == 0
        assert b"Usage:" in result.stdout
        assert b"list-files" in result.stdout

    def test_version(self):
        result = run_owo("--version")

        assert result.returncode == 0
        assert result.stdout.decode().strip() == "owo-cli 0.4.0"

    def test_upload_without_token_fails_cleanly(self):
        result = run_owo("upload", input=b"data")

        assert result.returncode == 1
        assert result.stdout == b""
        assert b"OWO_KEY" in result.stderr

    def test_invalid_config_dir_reports_error(self, tmp_path):
        (tmp_path / "settings").mkdir()
        env_result = subprocess.run(
            [sys.executable, "-m", "owo", "--key", "T", "shorten", "https://example.com"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            env={**os.environ, "OWO_CONFIG_DIR": str(tmp_path)},
            timeout=60,
        )

        assert env_result.returncode == 1
        assert b"Invalid configuration" in env_result.stderr
