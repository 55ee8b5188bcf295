# topmark:header:start
#
#   project      : ToggleComment
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli
from togglecomment.constants import TOGGLECOMMENT_VERSION

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == TOGGLECOMMENT_VERSION


def test_verbose_version_is_labelled() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == f"ToggleComment version {TOGGLECOMMENT_VERSION}"
