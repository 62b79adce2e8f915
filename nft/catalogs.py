"""
NFT Collection Wizard - Catalogs

Fixed, ordered enumerations of the legal values for every choice the wizard
offers. The ordering of each catalog is part of the prompt contract: drivers
return indices into these tuples.
"""

from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from .exceptions import InternalInconsistencyError


class Tag(str, Enum):
    """Collection tag enumeration."""
    ART = "Art"
    PROFILE_PICTURE = "ProfilePicture"
    COLLECTIBLE = "Collectible"
    GAME_ASSET = "GameAsset"
    TOKENISED_ASSET = "TokenisedAsset"
    TICKER = "Ticker"
    DOMAIN_NAME = "DomainName"
    MUSIC = "Music"
    VIDEO = "Video"
    TICKET = "Ticket"
    LICENSE = "License"


class NftField(str, Enum):
    """NFT field enumeration."""
    DISPLAY = "display"
    URL = "url"
    ATTRIBUTES = "attributes"
    TAGS = "tags"  # Derived from collection tags, never offered directly


class Behaviour(str, Enum):
    """NFT behaviour enumeration."""
    COMPOSABLE = "composable"
    LOOSE = "loose"


class SupplyKind(str, Enum):
    """Supply policy enumeration."""
    UNLIMITED = "Unlimited"
    LIMITED = "Limited"


class MintKind(str, Enum):
    """Minting strategy enumeration."""
    LAUNCHPAD = "Launchpad"
    DIRECT = "Direct"
    AIRDROP = "Airdrop"


class RoyaltyKind(str, Enum):
    """Royalty policy enumeration."""
    PROPORTIONAL = "Proportional"
    CONSTANT = "Constant"
    NONE = "None"


class MarketKind(str, Enum):
    """Primary market primitive enumeration."""
    FIXED_PRICE = "FixedPrice"
    DUTCH_AUCTION = "DutchAuction"


TAG_OPTIONS: Tuple[str, ...] = tuple(tag.value for tag in Tag)
FIELD_OPTIONS: Tuple[str, ...] = (
    NftField.DISPLAY.value,
    NftField.URL.value,
    NftField.ATTRIBUTES.value,
)
BEHAVIOUR_OPTIONS: Tuple[str, ...] = tuple(b.value for b in Behaviour)
SUPPLY_OPTIONS: Tuple[str, ...] = tuple(s.value for s in SupplyKind)
MINTING_OPTIONS: Tuple[str, ...] = tuple(m.value for m in MintKind)
ROYALTY_OPTIONS: Tuple[str, ...] = tuple(r.value for r in RoyaltyKind)
MARKET_OPTIONS: Tuple[str, ...] = tuple(m.value for m in MarketKind)


def select_option(index: int, catalog: Sequence[str]) -> str:
    """Map a single driver index onto its catalog value."""
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(catalog):
        raise InternalInconsistencyError(
            f"Selection index {index!r} is outside catalog bounds (0..{len(catalog) - 1})"
        )
    return catalog[index]


def select_options(indices: Iterable[int], catalog: Sequence[str]) -> List[str]:
    """
    Map driver indices onto catalog values, preserving selection order.

    Drivers only ever offer catalog entries, so an out-of-range index means
    the driver and the catalog disagree.

    Raises:
        InternalInconsistencyError: If any index is outside the catalog
    """
    return [select_option(index, catalog) for index in indices]


def catalog_order(values: Iterable[Enum], enum_cls) -> List[str]:
    """Return enum values as strings sorted by their catalog position."""
    position = {member: i for i, member in enumerate(enum_cls)}
    return [v.value for v in sorted(values, key=lambda v: position[v])]
