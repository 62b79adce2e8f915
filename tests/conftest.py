"""
Pytest configuration and fixtures for NFT Collection Wizard tests.
"""

from typing import Any, List, Sequence

import pytest

from nft.builder import SchemaBuilder
from nft.exceptions import InputFormatError
from nft.validators import validate_text
from nft.wizard import PromptDriver

ADMIN_ADDRESS = "0x" + "a" * 18
RECEIVER_ADDRESS = "0x" + "b" * 18


class ScriptedPromptDriver(PromptDriver):
    """
    Prompt driver that replays canned answers in order.

    Text answers rejected by the validator are recorded and the next answer
    is used, the way a terminal driver would re-prompt.
    """

    def __init__(self, answers: Sequence[Any]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.rejections: List[str] = []
        self.errors: List[str] = []

    def _next(self, prompt: str, expected_type):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt: {prompt}")
        answer = self.answers.pop(0)
        assert isinstance(answer, expected_type), (
            f"Scripted answer {answer!r} does not fit prompt {prompt!r}"
        )
        return answer

    def text(self, prompt, validator=validate_text):
        while True:
            answer = self._next(prompt, str)
            try:
                return validator(answer)
            except InputFormatError as e:
                self.rejections.append(str(e))

    def confirm(self, prompt):
        return self._next(prompt, bool)

    def select(self, prompt, options):
        return self._next(prompt, int)

    def multi_select(self, prompt, options):
        return self._next(prompt, list)

    def notify_error(self, message):
        self.errors.append(message)


@pytest.fixture
def make_driver():
    """Factory for scripted prompt drivers."""
    return ScriptedPromptDriver


@pytest.fixture
def addresses():
    """A valid administrator/receiver address pair."""
    return ADMIN_ADDRESS, RECEIVER_ADDRESS


@pytest.fixture
def builder():
    """Create an empty schema builder."""
    return SchemaBuilder()


@pytest.fixture
def apes_answers():
    """Answers for the "Apes" collection, in wizard order."""
    return [
        "Apes",                 # name
        "",                     # description
        "APE",                  # symbol
        True,                   # add tags?
        [0, 2],                 # Art, Collectible
        False,                  # add URL?
        [0],                    # display
        [0],                    # composable
        1,                      # Limited
        "100",                  # supply limit
        [1],                    # Direct
        1,                      # Constant
        "250",                  # royalty fee
        "1",                    # listing count
        ADMIN_ADDRESS,
        RECEIVER_ADDRESS,
        0,                      # FixedPrice
    ]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file paths."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
