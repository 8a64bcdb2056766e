"""ABOUTME: Typed filter categories and the parsed query they make up.
ABOUTME: One frozen dataclass per category; values are added by returning new instances."""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, ClassVar, Self

from dexsearch.search.errors import CategoryCapExceededError

TIERS: frozenset[str] = frozenset({"uber", "ou", "uu", "ru", "nu", "lc", "cap", "bl", "bl2", "nfe", "limbo"})
COLORS: frozenset[str] = frozenset(
    {"green", "red", "blue", "white", "brown", "yellow", "purple", "pink", "gray", "black"}
)
MIN_GEN = 1
MAX_GEN = 5
CAP_TIER = "cap"


class CategoryKind(StrEnum):
    """The independent dimensions a query can filter on."""

    MOVE = "move"
    ABILITY = "ability"
    TIER = "tier"
    COLOR = "color"
    GENERATION = "generation"
    TYPE = "type"


@dataclass(frozen=True)
class _CategoryFilter:
    """Shared behavior of the category variants."""

    kind: ClassVar[CategoryKind]
    cap: ClassVar[int | None] = None

    values: tuple[Any, ...] = ()

    @property
    def count(self) -> int:
        """Number of distinct values given for this category."""
        return len(self.values)

    def with_value(self, value: Any) -> Self:
        """Return a copy with `value` added.

        Repeating a value already present is a no-op.

        Raises:
            CategoryCapExceededError: If the category is already at its cap.
        """
        if value in self.values:
            return self
        if self.cap is not None and self.count >= self.cap:
            raise CategoryCapExceededError(self.kind.value, self.cap)
        return replace(self, values=(*self.values, value))


@dataclass(frozen=True)
class MoveFilter(_CategoryFilter):
    """Move ids a species must be able to learn, all of them."""

    kind: ClassVar[CategoryKind] = CategoryKind.MOVE
    cap: ClassVar[int | None] = 4

    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class AbilityFilter(_CategoryFilter):
    """Ability ids, one of which a species must have."""

    kind: ClassVar[CategoryKind] = CategoryKind.ABILITY
    cap: ClassVar[int | None] = 1

    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class TierFilter(_CategoryFilter):
    """Lowercase tier labels."""

    kind: ClassVar[CategoryKind] = CategoryKind.TIER

    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class ColorFilter(_CategoryFilter):
    """Lowercase color labels."""

    kind: ClassVar[CategoryKind] = CategoryKind.COLOR

    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationFilter(_CategoryFilter):
    """Generation numbers."""

    kind: ClassVar[CategoryKind] = CategoryKind.GENERATION

    values: tuple[int, ...] = ()


@dataclass(frozen=True)
class TypeFilter(_CategoryFilter):
    """Capitalized type labels. One type matches either slot, two must cover both."""

    kind: ClassVar[CategoryKind] = CategoryKind.TYPE
    cap: ClassVar[int | None] = 2

    values: tuple[str, ...] = ()


FilterCategory = MoveFilter | AbilityFilter | TierFilter | ColorFilter | GenerationFilter | TypeFilter

FILTER_CLASSES: dict[CategoryKind, type[FilterCategory]] = {
    CategoryKind.MOVE: MoveFilter,
    CategoryKind.ABILITY: AbilityFilter,
    CategoryKind.TIER: TierFilter,
    CategoryKind.COLOR: ColorFilter,
    CategoryKind.GENERATION: GenerationFilter,
    CategoryKind.TYPE: TypeFilter,
}


@dataclass(frozen=True)
class ParsedQuery:
    """Filter categories in the order they first appeared in the input.

    Attributes:
        categories: Non-empty filters; categories the query never mentioned are absent.
        show_all: Report every match instead of a sample.
    """

    categories: tuple[FilterCategory, ...] = ()
    show_all: bool = False

    def get(self, kind: CategoryKind) -> FilterCategory | None:
        """Return the filter of the given kind, if the query has one."""
        return next((category for category in self.categories if category.kind is kind), None)

    @property
    def includes_cap_tier(self) -> bool:
        """True if the query explicitly asks for the CAP tier."""
        tiers = self.get(CategoryKind.TIER)
        return tiers is not None and CAP_TIER in tiers.values
