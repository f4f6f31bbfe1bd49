"""Smoke test — verifies the package is importable."""

from __future__ import annotations

import reviewengine


def test_package_importable() -> None:
    """The reviewengine package must be importable with a version string."""
    assert reviewengine.__version__ == "0.1.0"
