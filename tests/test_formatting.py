"""Unit tests for ruff linting"""

# Standard libraries
import re
import shutil
import subprocess

# Third-party libraries
import pytest


@pytest.mark.skipif(shutil.which("ruff") is None, reason="ruff is not installed")
def test_ruff_check():
    result = subprocess.run("ruff check . --show-fixes", shell=True, capture_output=True, check=False)
    assert re.search(r"\d+ fixable with the", str(result.stdout)) is None
