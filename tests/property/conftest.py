"""Hypothesis profiles for the property-based tests.

Select one with HYPOTHESIS_PROFILE=ci|quick|thorough.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

settings.register_profile("ci", max_examples=200, deadline=None, verbosity=Verbosity.normal)
settings.register_profile("quick", max_examples=10, deadline=None, phases=[Phase.generate])
settings.register_profile("thorough", max_examples=1000, deadline=None)

_profile = os.environ.get("HYPOTHESIS_PROFILE")
if _profile in ("ci", "quick", "thorough"):
    settings.load_profile(_profile)


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/property with the 'property' marker."""
    for item in items:
        if "property" in str(item.path):
            item.add_marker(pytest.mark.property)
