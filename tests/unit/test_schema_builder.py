"""
Unit tests for the schema builder aggregate.
"""

import pytest

from nft.catalogs import MarketKind, NftField, SupplyKind
from nft.exceptions import ConstraintViolation
from nft.models import Schema


def populate(builder, addresses):
    """Fill every required section with minimal valid values."""
    builder.set_name("Apes")
    builder.set_symbol("APE")
    builder.set_fields(["display"])
    builder.set_behaviours([])
    builder.set_supply_policy("Unlimited")
    builder.set_mint_strategy(["Direct"])
    builder.set_royalties("None")
    builder.set_listing_parties(*addresses)


class TestCollectionSetters:
    """Test collection metadata setters."""

    def test_set_name_overwrites(self, builder):
        builder.set_name("Foo")
        builder.set_name("Bar")

        assert builder.name == "Bar"

    def test_empty_name_rejected(self, builder):
        builder.set_name("Foo")
        with pytest.raises(ConstraintViolation) as exc_info:
            builder.set_name("")

        assert exc_info.value.field == "name"
        assert builder.name == "Foo"

    def test_empty_symbol_rejected(self, builder):
        with pytest.raises(ConstraintViolation, match="symbol"):
            builder.set_symbol("")

    def test_description_may_be_empty(self, builder):
        builder.set_description("")
        assert builder.description == ""

    def test_set_tags_replaces_whole_set(self, builder):
        builder.set_tags(["Art", "Music"])
        builder.set_tags(["Video"])

        assert builder.tags.to_list() == ["Video"]

    def test_failed_set_tags_keeps_previous(self, builder):
        builder.set_tags(["Art"])
        with pytest.raises(ConstraintViolation):
            builder.set_tags(["Art", "Unknown"])

        assert builder.tags.to_list() == ["Art"]

    def test_set_url_overwrites(self, builder):
        builder.set_url("https://one.example")
        builder.set_url("https://two.example")

        assert builder.url == "https://two.example"


class TestNftSetters:
    """Test NFT configuration setters."""

    def test_tags_field_added_when_collection_has_tags(self, builder):
        builder.set_tags(["Art"])
        builder.set_fields(["display"])

        assert builder.fields.to_list() == ["display", "tags"]

    def test_tags_field_added_without_other_fields(self, builder):
        builder.set_tags(["Art"])
        builder.set_fields([])

        assert builder.fields.to_list() == ["tags"]

    def test_tags_field_added_for_empty_tag_selection(self, builder):
        builder.set_tags([])
        builder.set_fields(["url"])

        assert NftField.TAGS in builder.fields

    def test_no_tags_field_without_tags(self, builder):
        builder.set_fields(["display", "attributes"])

        assert NftField.TAGS not in builder.fields

    def test_empty_fields_without_tags_rejected(self, builder):
        with pytest.raises(ConstraintViolation) as exc_info:
            builder.set_fields([])
        assert exc_info.value.field == "fields"

    def test_supply_policy(self, builder):
        builder.set_supply_policy("Limited", 100)

        assert builder.supply_policy.kind == SupplyKind.LIMITED
        assert builder.supply_policy.limit == 100

    def test_supply_policy_mismatch(self, builder):
        with pytest.raises(ConstraintViolation):
            builder.set_supply_policy("Limited")
        assert builder.supply_policy is None

    def test_royalties_mismatch(self, builder):
        with pytest.raises(ConstraintViolation):
            builder.set_royalties("None", 100)
        assert builder.royalties is None


class TestListings:
    """Test listing accumulation."""

    def test_listings_share_parties(self, builder, addresses):
        builder.set_listing_parties(*addresses)
        builder.add_listing("FixedPrice")
        builder.add_listing("DutchAuction")
        builder.add_listing("FixedPrice")

        assert len(builder.listings) == 3
        assert all((listing.administrator, listing.receiver) == addresses for listing in builder.listings)
        assert [listing.market for listing in builder.listings] == [
            MarketKind.FIXED_PRICE, MarketKind.DUTCH_AUCTION, MarketKind.FIXED_PRICE
        ]

    def test_listing_requires_parties(self, builder):
        with pytest.raises(ConstraintViolation, match="administrator and receiver"):
            builder.add_listing("FixedPrice")

    def test_unknown_market_not_appended(self, builder, addresses):
        builder.set_listing_parties(*addresses)
        with pytest.raises(ConstraintViolation):
            builder.add_listing("Raffle")

        assert builder.listings == []


class TestBuild:
    """Test schema hand-off."""

    def test_build(self, builder, addresses):
        populate(builder, addresses)
        builder.add_listing("FixedPrice")

        schema = builder.build()

        assert isinstance(schema, Schema)
        assert schema.collection.name == "Apes"
        assert schema.collection.tags is None
        assert len(schema.listings) == 1

    def test_build_without_listings(self, builder, addresses):
        populate(builder, addresses)
        assert builder.build().listings == ()

    def test_build_reports_missing_section(self, builder):
        builder.set_name("Apes")
        builder.set_symbol("APE")

        with pytest.raises(ConstraintViolation) as exc_info:
            builder.build()
        assert exc_info.value.field == "fields"

    def test_tags_after_fields_is_rejected(self, builder, addresses):
        """Setting tags after fields leaves the tags field missing."""
        populate(builder, addresses)
        builder.set_tags(["Art"])

        with pytest.raises(ConstraintViolation, match="tags"):
            builder.build()

    def test_built_schema_is_detached(self, builder, addresses):
        populate(builder, addresses)
        schema = builder.build()

        builder.add_listing("FixedPrice")
        builder.set_name("Other")

        assert schema.listings == ()
        assert schema.collection.name == "Apes"
