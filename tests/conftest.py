# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and requests for all tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from meeting_finder.models import Event, MeetingRequest, TimeRange
from meeting_finder.core.availability_finder import AvailabilityFinder


# ==================== Attendee Fixtures ====================

PERSON_A = "Person A"
PERSON_B = "Person B"
PERSON_C = "Person C"


@pytest.fixture
def person_a():
    return PERSON_A


@pytest.fixture
def person_b():
    return PERSON_B


@pytest.fixture
def person_c():
    return PERSON_C


# ==================== Event Fixtures ====================

@pytest.fixture
def morning_standup():
    """Person A is busy 08:00-08:30."""
    return Event("Standup", TimeRange(480, 510), {PERSON_A})


@pytest.fixture
def design_review():
    """Person B is busy 09:00-09:30."""
    return Event("Design Review", TimeRange(540, 570), {PERSON_B})


@pytest.fixture
def all_day_offsite():
    """Person C is away the whole day."""
    return Event("Offsite", TimeRange(0, 1440), {PERSON_C})


@pytest.fixture
def sample_events(morning_standup, design_review):
    """Events for A and B that leave three gaps in the day."""
    return [morning_standup, design_review]


# ==================== Request Fixtures ====================

@pytest.fixture
def half_hour_request():
    """A and B required, 30 minutes."""
    return MeetingRequest(attendees=(PERSON_A, PERSON_B), duration=30)


# ==================== Finder Fixtures ====================

@pytest.fixture
def finder():
    return AvailabilityFinder()
