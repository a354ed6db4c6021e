"""
Pytest fixtures shared by the unit and API tests.
"""

import os

# settings are read at import time; keep the simulated delay out of the test run
os.environ["PROCESSING_DELAY_S"] = "0"

import pytest

from domain.models import FormFields


@pytest.fixture
def complete_fields():
    """A fully filled-in form for either variant."""
    return FormFields(name="Ada", age="30", income="150000", mortgage="250000")
