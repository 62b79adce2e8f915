"""
Unit tests for wizard catalogs and index selection.
"""

import pytest

from nft.catalogs import (
    BEHAVIOUR_OPTIONS, FIELD_OPTIONS, MARKET_OPTIONS, MINTING_OPTIONS,
    ROYALTY_OPTIONS, SUPPLY_OPTIONS, TAG_OPTIONS, NftField, Tag,
    catalog_order, select_option, select_options,
)
from nft.exceptions import InternalInconsistencyError


class TestCatalogOrder:
    """Catalog ordering is part of the prompt contract."""

    def test_tag_catalog(self):
        assert TAG_OPTIONS == (
            "Art", "ProfilePicture", "Collectible", "GameAsset", "TokenisedAsset",
            "Ticker", "DomainName", "Music", "Video", "Ticket", "License",
        )

    def test_small_catalogs(self):
        assert FIELD_OPTIONS == ("display", "url", "attributes")
        assert BEHAVIOUR_OPTIONS == ("composable", "loose")
        assert SUPPLY_OPTIONS == ("Unlimited", "Limited")
        assert MINTING_OPTIONS == ("Launchpad", "Direct", "Airdrop")
        assert ROYALTY_OPTIONS == ("Proportional", "Constant", "None")
        assert MARKET_OPTIONS == ("FixedPrice", "DutchAuction")

    def test_tags_field_is_not_offered(self):
        """The tags field is derived, never selected directly."""
        assert NftField.TAGS.value not in FIELD_OPTIONS


class TestSelection:
    """Test index to catalog value mapping."""

    def test_select_option(self):
        assert select_option(1, SUPPLY_OPTIONS) == "Limited"

    def test_select_options_preserves_order(self):
        assert select_options([2, 0], TAG_OPTIONS) == ["Collectible", "Art"]

    def test_select_options_empty(self):
        assert select_options([], MINTING_OPTIONS) == []

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_bounds_index(self, index):
        with pytest.raises(InternalInconsistencyError, match="outside catalog bounds"):
            select_option(index, FIELD_OPTIONS)

    def test_out_of_bounds_in_multi_selection(self):
        with pytest.raises(InternalInconsistencyError):
            select_options([0, 11], TAG_OPTIONS)

    def test_non_integer_index(self):
        with pytest.raises(InternalInconsistencyError):
            select_option("1", SUPPLY_OPTIONS)

    def test_catalog_order(self):
        assert catalog_order({Tag.LICENSE, Tag.ART, Tag.MUSIC}, Tag) == ["Art", "Music", "License"]
