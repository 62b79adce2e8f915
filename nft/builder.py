"""
NFT Collection Wizard - Schema Builder

The mutable aggregate that accumulates validated answers and produces the
immutable Schema once every section has been populated.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from .catalogs import NftField
from .exceptions import ConstraintViolation
from .models import (
    Behaviours, Collection, Fields, Listing, MintStrategy, NftConfig,
    Royalties, Schema, SupplyPolicy, Tags,
)


class SchemaBuilder:
    """
    Accumulates wizard answers for a single collection configuration.

    Setters overwrite previous values. Enum-valued sections go through the
    matching model's ``new_from`` constructor, so a failing setter leaves the
    previously committed value untouched.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        self.name: Optional[str] = None
        self.description: str = ""
        self.symbol: Optional[str] = None
        self.tags: Optional[Tags] = None
        self.url: Optional[str] = None

        self.fields: Optional[Fields] = None
        self.behaviours: Optional[Behaviours] = None
        self.supply_policy: Optional[SupplyPolicy] = None
        self.mint_strategy: Optional[MintStrategy] = None

        self.royalties: Optional[Royalties] = None

        self.administrator: Optional[str] = None
        self.receiver: Optional[str] = None
        self.listings: List[Listing] = []

    # Collection metadata

    def set_name(self, name: str) -> None:
        if not name:
            raise ConstraintViolation('name', 'collection name cannot be empty')
        self.name = name
        self.logger.debug(f"Collection name set to {name!r}")

    def set_description(self, description: str) -> None:
        self.description = description
        self.logger.debug("Collection description set")

    def set_symbol(self, symbol: str) -> None:
        if not symbol:
            raise ConstraintViolation('symbol', 'collection symbol cannot be empty')
        self.symbol = symbol
        self.logger.debug(f"Collection symbol set to {symbol!r}")

    def set_tags(self, tags: Iterable[str]) -> None:
        """Replace the whole tag set."""
        self.tags = Tags.new_from(tags)
        self.logger.debug(f"Collection tags set to {self.tags.to_list()}")

    def set_url(self, url: str) -> None:
        self.url = url
        self.logger.debug(f"Collection URL set to {url!r}")

    @property
    def has_tags(self) -> bool:
        return self.tags is not None

    # NFT configuration

    def set_fields(self, selected: Iterable[str]) -> None:
        """Set the NFT fields, adding "tags" when the collection has tags."""
        fields = list(selected)
        if self.has_tags:
            fields.append(NftField.TAGS.value)

        self.fields = Fields.new_from(fields)
        self.logger.debug(f"NFT fields set to {self.fields.to_list()}")

    def set_behaviours(self, selected: Iterable[str]) -> None:
        self.behaviours = Behaviours.new_from(selected)
        self.logger.debug(f"NFT behaviours set to {self.behaviours.to_list()}")

    def set_supply_policy(self, kind: str, limit: Optional[int] = None) -> None:
        self.supply_policy = SupplyPolicy.new_from(kind, limit)
        self.logger.debug(f"Supply policy set to {self.supply_policy.to_dict()}")

    def set_mint_strategy(self, selected: Iterable[str]) -> None:
        self.mint_strategy = MintStrategy.new_from(selected)
        self.logger.debug(f"Mint strategy set to {self.mint_strategy.to_list()}")

    # Royalties

    def set_royalties(self, kind: str, fee: Optional[int] = None) -> None:
        self.royalties = Royalties.new_from(kind, fee)
        self.logger.debug(f"Royalties set to {self.royalties.to_dict()}")

    # Listings

    def set_listing_parties(self, administrator: str, receiver: str) -> None:
        """Set the administrator/receiver pair shared by every listing."""
        self.administrator = administrator
        self.receiver = receiver
        self.logger.debug("Listing administrator and receiver set")

    def add_listing(self, market: str) -> Listing:
        """Append a listing for the given market primitive using the shared pair."""
        if self.administrator is None or self.receiver is None:
            raise ConstraintViolation('listing', 'administrator and receiver must be set before adding listings')

        listing = Listing.new_from(self.administrator, self.receiver, market)
        self.listings.append(listing)
        self.logger.debug(f"Listing #{len(self.listings)} added with market {listing.market.value}")
        return listing

    def build(self) -> Schema:
        """
        Produce the immutable Schema.

        Raises:
            ConstraintViolation: If a required section has not been set
        """
        required = [
            ('name', self.name),
            ('symbol', self.symbol),
            ('fields', self.fields),
            ('behaviours', self.behaviours),
            ('supply_policy', self.supply_policy),
            ('mint_strategy', self.mint_strategy),
            ('royalties', self.royalties),
        ]
        for field, value in required:
            if value is None:
                raise ConstraintViolation(field, 'value has not been set')

        collection = Collection(
            name=self.name,
            description=self.description,
            symbol=self.symbol,
            tags=self.tags,
            url=self.url,
        )
        nft = NftConfig(
            fields=self.fields,
            behaviours=self.behaviours,
            supply_policy=self.supply_policy,
            mint_strategy=self.mint_strategy,
        )

        try:
            schema = Schema(
                collection=collection,
                nft=nft,
                royalties=self.royalties,
                listings=tuple(self.listings),
            )
        except ValidationError as e:
            reasons = "; ".join(error['msg'] for error in e.errors())
            raise ConstraintViolation('schema', reasons) from e

        self.logger.info(f"Schema built for collection {self.name!r} with {len(self.listings)} listing(s)")
        return schema
