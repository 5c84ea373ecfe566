"""Shared pytest setup for the bytecomb tests.

Hypothesis settings live here and nowhere else; test modules never pass
max_examples themselves. Three profiles are registered:

    dev      500 examples, random seeds (default)
    ci       50 examples, derandomized, failure blobs printed
    verbose  100 examples, each generated case printed

The profile is taken from HYPOTHESIS_PROFILE when it names one of the
above, else "ci" when CI=true, else "dev":

    HYPOTHESIS_PROFILE=verbose pytest tests/test_parser_laws_property.py
"""

import os

from hypothesis import Phase, Verbosity, settings

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile("dev", max_examples=500, phases=_ALL_PHASES)

# Parser trees are cheap to build; 50 cases keep CI fast and reproducible.
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_ALL_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_ALL_PHASES,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_select_profile())
