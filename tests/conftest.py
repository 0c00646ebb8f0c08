"""Pytest configuration for the descentpy test suite.

Hypothesis profiles:
- dev: local development, 300 examples
- ci: 50 derandomized examples for fast feedback

Override with HYPOTHESIS_PROFILE=dev|ci; CI=true selects "ci".
"""

import os

from hypothesis import Phase, settings

settings.register_profile(
    "dev",
    max_examples=300,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())
