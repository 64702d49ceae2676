"""Shared pytest configuration for the fmtengine tests.

Hypothesis profiles (selected once, at import):

    dev      500 examples, default for local runs
    ci       50 examples, derandomized; picked when CI=true
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked ``fuzz`` only run when requested: ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_configure(config: pytest.Config) -> None:
    """Declare the fuzz marker."""
    config.addinivalue_line("markers", "fuzz: long-running property tests, opt-in via -m fuzz")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)
