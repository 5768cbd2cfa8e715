"""
Shared test fixtures and configuration for pytest
"""
import os
import tempfile

# Keep logs and config out of the real home directory.
os.environ.setdefault("MAILFORM_HOME", tempfile.mkdtemp(prefix="mailform-tests-"))

import pytest

from mailform.core import events
from mailform.core.controller import FormController

from .helpers import RecordingSender, type_text


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def controller(sender):
    return FormController(sender)


@pytest.fixture
def filled_controller(controller):
    """Controller with valid To and From, focus back on To."""
    type_text(controller, "a@b.com")
    controller.handle(events.Advance())
    type_text(controller, "c@d.com")
    controller.handle(events.Retreat())
    return controller
