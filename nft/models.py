"""
NFT Collection Wizard - Schema Models

This module defines the Pydantic models for collection metadata, NFT-level
configuration, royalties and primary market listings. Every enum-valued model
exposes a ``new_from`` constructor that accepts raw catalog strings and raises
ConstraintViolation when the combination breaks a business rule.
"""

from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .catalogs import (
    Behaviour, MarketKind, MintKind, NftField, RoyaltyKind, SupplyKind, Tag,
    catalog_order,
)
from .exceptions import ConstraintViolation
from .validators import is_valid_address

M = TypeVar('M', bound=BaseModel)
E = TypeVar('E')


def _to_member(value: str, enum_cls: Type[E], field: str) -> E:
    """Resolve a raw catalog string to its enum member."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConstraintViolation(field, f"'{value}' is not one of: {allowed}") from None


def _to_members(values: Iterable[str], enum_cls: Type[E], field: str) -> FrozenSet[E]:
    return frozenset(_to_member(value, enum_cls, field) for value in values)


def _contains(selected: FrozenSet[E], item: Any, enum_cls: Type[E]) -> bool:
    """Membership test accepting either enum members or raw catalog strings."""
    try:
        return enum_cls(item) in selected
    except ValueError:
        return False


def _construct(model_cls: Type[M], field: str, **data: Any) -> M:
    """Build a model, reporting validation failures as a ConstraintViolation."""
    try:
        return model_cls(**data)
    except ValidationError as e:
        reasons = "; ".join(error['msg'] for error in e.errors())
        raise ConstraintViolation(field, reasons) from e


class Tags(BaseModel):
    """Duplicate-free set of collection tags."""

    model_config = ConfigDict(frozen=True)

    selected: FrozenSet[Tag] = Field(default_factory=frozenset)

    @classmethod
    def new_from(cls, selected: Iterable[str]) -> 'Tags':
        return _construct(cls, 'tags', selected=_to_members(selected, Tag, 'tags'))

    def __contains__(self, item) -> bool:
        return _contains(self.selected, item, Tag)

    def __len__(self) -> int:
        return len(self.selected)

    def to_list(self) -> List[str]:
        return catalog_order(self.selected, Tag)


class Fields(BaseModel):
    """Set of fields every NFT in the collection carries."""

    model_config = ConfigDict(frozen=True)

    selected: FrozenSet[NftField] = Field(..., min_length=1)

    @classmethod
    def new_from(cls, selected: Iterable[str]) -> 'Fields':
        """
        Build the field set from catalog strings.

        The "tags" field is accepted here but never added; deriving it from
        the collection tags is the builder's job.
        """
        members = _to_members(selected, NftField, 'fields')
        if not members:
            raise ConstraintViolation('fields', 'at least one NFT field must be selected')
        return _construct(cls, 'fields', selected=members)

    def __contains__(self, item) -> bool:
        return _contains(self.selected, item, NftField)

    def to_list(self) -> List[str]:
        return catalog_order(self.selected, NftField)


class Behaviours(BaseModel):
    """Set of NFT behaviours. May be empty; composable and loose may coexist."""

    model_config = ConfigDict(frozen=True)

    selected: FrozenSet[Behaviour] = Field(default_factory=frozenset)

    @classmethod
    def new_from(cls, selected: Iterable[str]) -> 'Behaviours':
        return _construct(cls, 'behaviours', selected=_to_members(selected, Behaviour, 'behaviours'))

    def __contains__(self, item) -> bool:
        return _contains(self.selected, item, Behaviour)

    def to_list(self) -> List[str]:
        return catalog_order(self.selected, Behaviour)


class SupplyPolicy(BaseModel):
    """Collection supply policy: Unlimited, or Limited with a positive limit."""

    model_config = ConfigDict(frozen=True)

    kind: SupplyKind
    limit: Optional[int] = Field(None, gt=0, description="Maximum number of NFTs for a Limited supply")

    @model_validator(mode='after')
    def validate_limit_presence(self):
        """A limit is required for Limited supply and forbidden for Unlimited."""
        if self.kind == SupplyKind.LIMITED and self.limit is None:
            raise ValueError('Limited supply policy requires a limit')
        if self.kind == SupplyKind.UNLIMITED and self.limit is not None:
            raise ValueError('Unlimited supply policy cannot carry a limit')
        return self

    @classmethod
    def new_from(cls, kind: str, limit: Optional[int] = None) -> 'SupplyPolicy':
        supply_kind = _to_member(kind, SupplyKind, 'supply_policy')
        return _construct(cls, 'supply_policy', kind=supply_kind, limit=limit)

    @property
    def is_limited(self) -> bool:
        return self.kind == SupplyKind.LIMITED

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'kind': self.kind.value}
        if self.limit is not None:
            data['limit'] = self.limit
        return data


class MintStrategy(BaseModel):
    """Non-empty set of minting strategies."""

    model_config = ConfigDict(frozen=True)

    selected: FrozenSet[MintKind] = Field(..., min_length=1)

    @classmethod
    def new_from(cls, selected: Iterable[str]) -> 'MintStrategy':
        members = _to_members(selected, MintKind, 'mint_strategy')
        if not members:
            raise ConstraintViolation('mint_strategy', 'at least one minting strategy must be selected')
        return _construct(cls, 'mint_strategy', selected=members)

    def __contains__(self, item) -> bool:
        return _contains(self.selected, item, MintKind)

    def to_list(self) -> List[str]:
        return catalog_order(self.selected, MintKind)


class Royalties(BaseModel):
    """
    Royalty policy.

    Proportional fees are expressed in basis points and Constant fees as an
    absolute amount; either way the raw integer is stored as given.
    """

    model_config = ConfigDict(frozen=True)

    kind: RoyaltyKind
    fee: Optional[int] = Field(None, ge=0, description="Basis points (Proportional) or absolute fee (Constant)")

    @model_validator(mode='after')
    def validate_fee_presence(self):
        """A fee is required for Proportional/Constant and forbidden for None."""
        if self.kind == RoyaltyKind.NONE:
            if self.fee is not None:
                raise ValueError('royalty policy None cannot carry a fee')
        elif self.fee is None:
            raise ValueError(f'royalty policy {self.kind.value} requires a fee')
        return self

    @classmethod
    def new_from(cls, kind: str, fee: Optional[int] = None) -> 'Royalties':
        royalty_kind = _to_member(kind, RoyaltyKind, 'royalties')
        return _construct(cls, 'royalties', kind=royalty_kind, fee=fee)

    @property
    def fee_basis_points(self) -> Optional[int]:
        return self.fee if self.kind == RoyaltyKind.PROPORTIONAL else None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'kind': self.kind.value}
        if self.kind == RoyaltyKind.PROPORTIONAL:
            data['fee_basis_points'] = self.fee
        elif self.kind == RoyaltyKind.CONSTANT:
            data['fee'] = self.fee
        return data


class Listing(BaseModel):
    """One primary market sale configuration."""

    model_config = ConfigDict(frozen=True)

    administrator: str = Field(..., description="Address administering the listing")
    receiver: str = Field(..., description="Address receiving the sale proceeds")
    market: MarketKind

    @field_validator('administrator', 'receiver')
    @classmethod
    def validate_address(cls, v):
        """Addresses must encode to exactly 20 bytes."""
        if not is_valid_address(v):
            raise ValueError(f"'{v}' is not a 20-byte address")
        return v

    @classmethod
    def new_from(cls, administrator: str, receiver: str, market: str) -> 'Listing':
        market_kind = _to_member(market, MarketKind, 'market')
        return _construct(cls, 'listing', administrator=administrator,
                          receiver=receiver, market=market_kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'administrator': self.administrator,
            'receiver': self.receiver,
            'market': self.market.value,
        }


class Collection(BaseModel):
    """Collection-level metadata."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Collection name")
    description: str = Field(default="", description="Collection description")
    symbol: str = Field(..., min_length=1, description="Collection symbol")
    tags: Optional[Tags] = Field(None, description="Collection tags")
    url: Optional[str] = Field(None, description="Collection website URL")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'name': self.name,
            'description': self.description,
            'symbol': self.symbol,
        }
        if self.tags is not None:
            data['tags'] = self.tags.to_list()
        if self.url is not None:
            data['url'] = self.url
        return data


class NftConfig(BaseModel):
    """NFT-level configuration shared by every token of the collection."""

    model_config = ConfigDict(frozen=True)

    fields: Fields
    behaviours: Behaviours
    supply_policy: SupplyPolicy
    mint_strategy: MintStrategy

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fields': self.fields.to_list(),
            'behaviours': self.behaviours.to_list(),
            'supply_policy': self.supply_policy.to_dict(),
            'mint_strategy': self.mint_strategy.to_list(),
        }


class Schema(BaseModel):
    """Complete collection configuration produced by the wizard."""

    model_config = ConfigDict(frozen=True)

    collection: Collection
    nft: NftConfig
    royalties: Royalties
    listings: Tuple[Listing, ...] = Field(default_factory=tuple)

    @model_validator(mode='after')
    def validate_tags_field(self):
        """Collections with tags must expose the tags field on their NFTs."""
        if self.collection.tags is not None and NftField.TAGS not in self.nft.fields:
            raise ValueError('NFT fields must include "tags" when the collection has tags')
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible dictionary in catalog order."""
        return {
            'collection': self.collection.to_dict(),
            'nft': self.nft.to_dict(),
            'royalties': self.royalties.to_dict(),
            'listings': [listing.to_dict() for listing in self.listings],
        }
