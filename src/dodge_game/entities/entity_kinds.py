"""
entity_kinds.py
---------------
Static definitions of every falling entity variant.

Each EntityKind member carries its category, per-tick descent speed, visual
scale and the keys used to find its sound and image in the AssetRegistry.
The enum is closed: there is no placeholder member, and "nothing spawned"
is expressed as None by callers. Passing anything that is not an EntityKind
to the lookup helpers is a programming error and raises ValueError.
"""

import random
from dataclasses import dataclass
from enum import Enum


class EntityCategory(str, Enum):
    """What a falling entity does on contact with the player."""
    ATTACK = "attack"
    ITEM = "item"


@dataclass(frozen=True)
class KindSpec:
    category: EntityCategory
    speed: float
    scale: tuple
    sound_key: str
    image_key: str


class EntityKind(Enum):
    """All spawnable variants. Values are their immutable KindSpec."""

    # --- Attacks ---
    ATTACK_NORMAL = KindSpec(EntityCategory.ATTACK, 7.0, (25.0, 25.0), "normal", "normal")
    ATTACK_FIRST = KindSpec(EntityCategory.ATTACK, 10.0, (30.0, 30.0), "first", "first")

    # --- Items ---
    ITEM_PORTION = KindSpec(EntityCategory.ITEM, 7.0, (25.0, 25.0), "recovery", "portion")
    ITEM_SPEED_UP = KindSpec(EntityCategory.ITEM, 10.0, (30.0, 30.0), "powerup", "powerup")
    ITEM_BIG = KindSpec(EntityCategory.ITEM, 5.0, (45.0, 45.0), "big", "big")

    @property
    def category(self) -> EntityCategory:
        return self.value.category

    @property
    def speed(self) -> float:
        return self.value.speed

    @property
    def scale(self) -> tuple:
        return self.value.scale

    @property
    def sound_key(self) -> str:
        return self.value.sound_key

    @property
    def image_key(self) -> str:
        return self.value.image_key


# ===========================================================
# Lookups
# ===========================================================

def _require_kind(kind) -> EntityKind:
    if not isinstance(kind, EntityKind):
        raise ValueError(f"Not an EntityKind: {kind!r}")
    return kind


def category(kind) -> EntityCategory:
    return _require_kind(kind).category


def speed(kind) -> float:
    """Descent in pixels per tick."""
    return _require_kind(kind).speed


def scale(kind) -> tuple:
    return _require_kind(kind).scale


def sound_key(kind) -> str:
    return _require_kind(kind).sound_key


def image_key(kind) -> str:
    return _require_kind(kind).image_key


def kinds_of(entity_category: EntityCategory) -> list:
    """Variants of one category, in declaration order."""
    return [kind for kind in EntityKind if kind.category is entity_category]


# ===========================================================
# Random Selection
# ===========================================================

_ATTACK_KINDS = kinds_of(EntityCategory.ATTACK)
_ITEM_KINDS = kinds_of(EntityCategory.ITEM)


def random_attack_kind() -> EntityKind:
    return random.choice(_ATTACK_KINDS)


def random_item_kind() -> EntityKind:
    return random.choice(_ITEM_KINDS)
