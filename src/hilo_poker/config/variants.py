"""Configuration loader for hi-lo game variants."""

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema

from hilo_poker.core.card import Card
from hilo_poker.evaluation.showdown import ShowdownResult, evaluate_showdown
from hilo_poker.evaluation.types import CardCountRule

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parents[1] / "data"
SCHEMA_PATH = DATA_DIR / "schemas" / "variant.json"


def load_schema() -> dict[str, Any]:
    """Load the JSON schema for variant files."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


@dataclass
class Street:
    """A community card reveal step (flop, turn, river)."""

    name: str
    cards: int


@dataclass
class GameVariant:
    """Configuration for a community-card hi-lo variant."""

    id: str
    name: str
    hole_cards: int
    community_cards: int
    card_count_rule: CardCountRule
    hi_lo: bool = True
    streets: list[Street] = field(default_factory=list)

    @classmethod
    def from_file(cls, filepath: Path) -> "GameVariant":
        """
        Load a GameVariant from a JSON file.

        Args:
            filepath: Path to JSON configuration file

        Returns:
            GameVariant instance
        """
        with open(filepath) as f:
            return cls.from_json(f.read())

    @classmethod
    def from_json(cls, json_str: str) -> "GameVariant":
        """
        Create a GameVariant from a JSON string.

        Raises:
            ValueError: If JSON is invalid or does not describe a valid variant
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameVariant":
        """
        Create a GameVariant from parsed JSON data.

        Raises:
            ValueError: If the data fails schema validation or is inconsistent
        """
        try:
            jsonschema.validate(instance=data, schema=load_schema())
        except jsonschema.ValidationError as e:
            raise ValueError(f"Invalid variant configuration: {e.message}")

        variant = cls(
            id=data["id"],
            name=data["name"],
            hole_cards=data["holeCards"],
            community_cards=data["communityCards"],
            card_count_rule=CardCountRule(data["cardCountRule"]),
            hi_lo=data.get("hiLo", True),
            streets=[Street(name=s["name"], cards=s["cards"]) for s in data.get("streets", [])],
        )
        variant.validate()
        return variant

    def validate(self) -> None:
        """
        Validate the variant is consistent.

        Raises:
            ValueError: If the variant is invalid
        """
        if self.card_count_rule == CardCountRule.FIXED_TWO_PLUS_THREE and self.hole_cards < 2:
            raise ValueError(f"{self.name}: two-plus-three games need at least 2 hole cards")
        if self.community_cards < 3:
            raise ValueError(f"{self.name}: at least 3 community cards are required")
        if self.streets:
            dealt = sum(street.cards for street in self.streets)
            if dealt != self.community_cards:
                raise ValueError(
                    f"{self.name}: streets deal {dealt} cards but the board has {self.community_cards}"
                )
            names = [street.name for street in self.streets]
            if len(set(names)) != len(names):
                raise ValueError(f"{self.name}: duplicate street names {names}")

    def board_after(self, street_name: str, community_cards: list[Card]) -> list[Card]:
        """
        Community cards visible once `street_name` has been revealed.

        Args:
            street_name: Street name, e.g. 'flop'
            community_cards: The full board in deal order

        Raises:
            ValueError: If the street is unknown
        """
        visible = 0
        for street in self.streets:
            visible += street.cards
            if street.name == street_name:
                return list(community_cards[:visible])
        raise ValueError(f"Unknown street '{street_name}' for {self.name}")

    def showdown(
        self,
        hands: Mapping[str, Sequence[Card]],
        community_cards: Sequence[Card]
    ) -> ShowdownResult:
        """
        Evaluate a showdown under this variant's card count rule and hi-lo setting.

        Args:
            hands: Private cards per player id, in seat order
            community_cards: Board cards dealt so far

        Raises:
            ValueError: If a player holds the wrong number of hole cards or
                        the board holds more cards than the variant deals
        """
        for player_id, hole_cards in hands.items():
            if len(hole_cards) != self.hole_cards:
                raise ValueError(
                    f"{self.name}: player {player_id} holds {len(hole_cards)} cards, "
                    f"expected {self.hole_cards}"
                )
        if len(community_cards) > self.community_cards:
            raise ValueError(
                f"{self.name}: board holds {len(community_cards)} cards, "
                f"at most {self.community_cards} are dealt"
            )
        return evaluate_showdown(hands, community_cards, self.card_count_rule, hi_lo=self.hi_lo)


class VariantLoader:
    """Loads and manages game variant configurations."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing variant JSON files.
                       Defaults to the package's data/variants directory.
        """
        if config_dir is None:
            config_dir = DATA_DIR / "variants"

        self.config_dir = config_dir
        self._variants: dict[str, GameVariant] = {}
        self._loaded = False

    def load_all_variants(self) -> None:
        """Load all variant files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading game variants from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Variant directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Variant directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))
        if not json_files:
            logger.warning(f"No JSON variant files found in {self.config_dir}")

        for json_file in json_files:
            try:
                variant = GameVariant.from_file(json_file)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load variant from {json_file}: {e}")
                continue
            if variant.id != json_file.stem:
                logger.warning(f"Variant id '{variant.id}' does not match file name {json_file.name}")
            self._variants[variant.id] = variant
            logger.debug(f"Loaded variant {variant.id}")

        logger.info(f"Loaded {len(self._variants)} game variants")
        self._loaded = True

    def get_variant(self, variant_id: str) -> GameVariant | None:
        """
        Get configuration for a specific variant.

        Args:
            variant_id: The variant id (e.g., 'omaha_hilo')

        Returns:
            GameVariant if found, None otherwise
        """
        if not self._loaded:
            self.load_all_variants()

        return self._variants.get(variant_id)

    def get_all_variants(self) -> dict[str, GameVariant]:
        """Get all loaded variants."""
        if not self._loaded:
            self.load_all_variants()

        return self._variants.copy()


# Global instance
variant_loader = VariantLoader()


def load_variant(variant_id: str) -> GameVariant:
    """
    Convenience function to get a variant by id.

    Raises:
        ValueError: If no such variant is configured
    """
    variant = variant_loader.get_variant(variant_id)
    if variant is None:
        raise ValueError(f"Unknown game variant: {variant_id}")
    return variant
