"""Shared fixtures for the hrm-access test-suite."""

from __future__ import annotations

import pytest

from hrm_access.kernel.security import SecurityContext


@pytest.fixture(autouse=True)
def _empty_security_context():
    """Every test starts and ends without a current principal."""
    SecurityContext.clear()
    yield
    SecurityContext.clear()
