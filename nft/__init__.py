"""
NFT Collection Wizard - Configuration Schema Builder

This package provides the catalogs, input validators, typed constructors and
schema builder behind the interactive NFT collection configuration wizard.
"""

from .catalogs import (
    Tag,
    NftField,
    Behaviour,
    SupplyKind,
    MintKind,
    RoyaltyKind,
    MarketKind,
    TAG_OPTIONS,
    FIELD_OPTIONS,
    BEHAVIOUR_OPTIONS,
    SUPPLY_OPTIONS,
    MINTING_OPTIONS,
    ROYALTY_OPTIONS,
    MARKET_OPTIONS,
    select_option,
    select_options,
)

from .exceptions import (
    WizardError,
    InputFormatError,
    ConstraintViolation,
    InternalInconsistencyError,
)

from .validators import (
    validate_text,
    validate_number,
    validate_address,
    parse_unsigned,
)

from .models import (
    Tags,
    Fields,
    Behaviours,
    SupplyPolicy,
    MintStrategy,
    Royalties,
    Listing,
    Collection,
    NftConfig,
    Schema,
)

from .builder import SchemaBuilder
from .wizard import PromptDriver, CollectionWizard

__version__ = "0.1.0"

__all__ = [
    # Catalogs
    'Tag', 'NftField', 'Behaviour', 'SupplyKind', 'MintKind', 'RoyaltyKind', 'MarketKind',
    'TAG_OPTIONS', 'FIELD_OPTIONS', 'BEHAVIOUR_OPTIONS', 'SUPPLY_OPTIONS',
    'MINTING_OPTIONS', 'ROYALTY_OPTIONS', 'MARKET_OPTIONS',
    'select_option', 'select_options',

    # Errors
    'WizardError', 'InputFormatError', 'ConstraintViolation', 'InternalInconsistencyError',

    # Validators
    'validate_text', 'validate_number', 'validate_address', 'parse_unsigned',

    # Models
    'Tags', 'Fields', 'Behaviours', 'SupplyPolicy', 'MintStrategy', 'Royalties',
    'Listing', 'Collection', 'NftConfig', 'Schema',

    # Builder and wizard
    'SchemaBuilder', 'PromptDriver', 'CollectionWizard',
]
