"""
NFT Collection Wizard - Interactive Flow

Drives the fixed, forward-only sequence of questions that populates a
SchemaBuilder. All operator interaction goes through a PromptDriver so the
flow can run against a terminal or against canned answers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from .builder import SchemaBuilder
from .catalogs import (
    BEHAVIOUR_OPTIONS, FIELD_OPTIONS, MARKET_OPTIONS, MINTING_OPTIONS,
    ROYALTY_OPTIONS, SUPPLY_OPTIONS, TAG_OPTIONS, RoyaltyKind, SupplyKind,
    select_option, select_options,
)
from .exceptions import ConstraintViolation
from .models import Schema
from .validators import Validator, parse_unsigned, validate_address, validate_number, validate_text

DEFAULT_MAX_FIELD_ATTEMPTS = 3


class PromptDriver(ABC):
    """Capability through which the wizard obtains operator answers."""

    @abstractmethod
    def text(self, prompt: str, validator: Validator = validate_text) -> str:
        """Ask for free text; return only text the validator accepted."""
        pass

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question."""
        pass

    @abstractmethod
    def select(self, prompt: str, options: Sequence[str]) -> int:
        """Ask for exactly one option; return its index."""
        pass

    @abstractmethod
    def multi_select(self, prompt: str, options: Sequence[str]) -> List[int]:
        """Ask for any number of options; return their indices."""
        pass

    def notify_error(self, message: str) -> None:
        """Tell the operator an answer was rejected and will be asked again."""
        pass


class CollectionWizard:
    """
    Runs the collection configuration questionnaire.

    Each field is asked once and committed to the builder. When a commit
    raises ConstraintViolation the questions of that field alone are asked
    again, up to ``max_field_attempts`` times; earlier fields are never
    revisited.
    """

    def __init__(self, driver: PromptDriver, builder: Optional[SchemaBuilder] = None,
                 max_field_attempts: int = DEFAULT_MAX_FIELD_ATTEMPTS):
        if max_field_attempts < 1:
            raise ValueError("max_field_attempts must be at least 1")

        self.logger = logging.getLogger(__name__)
        self.driver = driver
        self.builder = builder if builder is not None else SchemaBuilder()
        self.max_field_attempts = max_field_attempts

    def run(self) -> Schema:
        """Ask every question in order and return the finished schema."""
        self.logger.info("Starting collection configuration wizard")

        self.collect_collection()
        self.collect_nft()
        self.collect_royalties()
        self.collect_listings()

        return self.builder.build()

    def _attempt(self, field: str, step: Callable[[], None]) -> None:
        for attempt in range(1, self.max_field_attempts + 1):
            try:
                step()
                return
            except ConstraintViolation as e:
                self.logger.warning(
                    f"Rejected {field} (attempt {attempt}/{self.max_field_attempts}): {e.reason}"
                )
                if attempt >= self.max_field_attempts:
                    raise
                self.driver.notify_error(f"{e}. Please try again.")

    def _ask_number(self, prompt: str) -> int:
        return parse_unsigned(self.driver.text(prompt, validate_number))

    def collect_collection(self) -> None:
        """Collection name, description, symbol, tags and URL."""
        driver, builder = self.driver, self.builder

        self._attempt('name', lambda: builder.set_name(
            driver.text("What is the name of the Collection?", validate_text)))

        self._attempt('description', lambda: builder.set_description(
            driver.text("What is the description of the Collection?", validate_text)))

        self._attempt('symbol', lambda: builder.set_symbol(
            driver.text("What is the symbol of the Collection?", validate_text)))

        if driver.confirm("Do you want to add Tags to your Collection?"):
            def tags_step():
                indices = driver.multi_select(
                    "Which tags do you want to add?", TAG_OPTIONS)
                builder.set_tags(select_options(indices, TAG_OPTIONS))

            self._attempt('tags', tags_step)

        if driver.confirm("Do you want to add a URL to your Collection Website?"):
            self._attempt('url', lambda: builder.set_url(
                driver.text("What is the URL of the Collection Website?", validate_text)))

    def collect_nft(self) -> None:
        """NFT fields, behaviours, supply policy and minting strategies."""
        driver, builder = self.driver, self.builder

        def fields_step():
            indices = driver.multi_select(
                "Which NFT fields do you want the NFTs to have?", FIELD_OPTIONS)
            builder.set_fields(select_options(indices, FIELD_OPTIONS))

        def behaviours_step():
            indices = driver.multi_select(
                "Which NFT behaviours do you want the NFTs to have?", BEHAVIOUR_OPTIONS)
            builder.set_behaviours(select_options(indices, BEHAVIOUR_OPTIONS))

        def supply_step():
            index = driver.select("Which Supply Policy do you want your Collection to have?", SUPPLY_OPTIONS)
            kind = select_option(index, SUPPLY_OPTIONS)

            limit = None
            if kind == SupplyKind.LIMITED.value:
                limit = self._ask_number("What is the supply limit of the Collection?")

            builder.set_supply_policy(kind, limit)

        def mint_step():
            indices = driver.multi_select(
                "Which minting strategies do you plan using?", MINTING_OPTIONS)
            builder.set_mint_strategy(select_options(indices, MINTING_OPTIONS))

        self._attempt('fields', fields_step)
        self._attempt('behaviours', behaviours_step)
        self._attempt('supply_policy', supply_step)
        self._attempt('mint_strategy', mint_step)

    def collect_royalties(self) -> None:
        """Royalty policy and, unless the policy is None, its fee."""
        driver, builder = self.driver, self.builder

        fee_prompts = {
            RoyaltyKind.PROPORTIONAL.value: "What is the royalty fee in Basis Points?",
            RoyaltyKind.CONSTANT.value: "What is the constant royalty commission?",
        }

        def royalties_step():
            index = driver.select("Which Royalty Policy do you want your Collection to have?", ROYALTY_OPTIONS)
            kind = select_option(index, ROYALTY_OPTIONS)

            fee = None
            if kind in fee_prompts:
                fee = self._ask_number(fee_prompts[kind])

            builder.set_royalties(kind, fee)

        self._attempt('royalties', royalties_step)

    def collect_listings(self) -> None:
        """
        Primary market listings.

        The listing count, administrator and receiver are asked once; then one
        market primitive is asked per listing and every listing shares the
        same administrator/receiver pair.
        """
        driver, builder = self.driver, self.builder

        count = self._ask_number("How many Primary Market Listings do you plan on having?")
        administrator = driver.text("What is the address of the Listing administrator?", validate_address)
        receiver = driver.text("What is the address that receives the sale proceeds?", validate_address)
        builder.set_listing_parties(administrator, receiver)

        self.logger.info(f"Collecting {count} primary market listing(s)")

        for number in range(1, count + 1):
            def listing_step():
                index = driver.select(
                    f"What is the market primitive to use for the sale nº {number}", MARKET_OPTIONS)
                builder.add_listing(select_option(index, MARKET_OPTIONS))

            self._attempt('listing', listing_step)
