"""
Unit tests for the click prompt driver helpers.
"""

import click
import pytest

from cli.prompts import _validated, parse_index_list
from nft.validators import validate_address, validate_number


class TestParseIndexList:
    """Test multi-selection answer parsing."""

    def test_comma_separated(self):
        assert parse_index_list("1,3", 11) == [0, 2]

    def test_spaces_and_duplicates(self):
        assert parse_index_list(" 2 1, 2 ", 3) == [1, 0]

    def test_empty_selection(self):
        assert parse_index_list("", 3) == []

    @pytest.mark.parametrize("text", ["0", "4", "x", "1,-2", "\u00b2", "\u0663"])
    def test_invalid_entries(self, text):
        with pytest.raises(click.BadParameter, match="not an option number between 1 and 3"):
            parse_index_list(text, 3)


class TestValidatedValueProc:
    """Validator failures become click re-prompts."""

    def test_passes_valid_text(self):
        assert _validated(validate_number)("12") == "12"

    def test_number_failure(self):
        with pytest.raises(click.BadParameter, match="to a number"):
            _validated(validate_number)("twelve")

    def test_address_failure(self):
        with pytest.raises(click.BadParameter, match="to an address"):
            _validated(validate_address)("0x1")
