"""Shared fixtures for core unit tests"""

import pytest


OLD_TEXT = """
line1
line2
line3
line4



line5
line6
line7
line8
"""

NEW_TEXT = """
line1
line2
line3
line4.1
line5
line6.1
line7
line8.1
"""


@pytest.fixture(name="old_text")
def old_text_fixture():
    return OLD_TEXT


@pytest.fixture(name="new_text")
def new_text_fixture():
    return NEW_TEXT
