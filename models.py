"""
Data models for the Job Taxonomy

Defines the core data structures for stats, armor capability, job families,
jobs and gear slots.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, FrozenSet, Optional, Tuple


class Stat(Enum):
    """Stat identifiers printed on gear."""
    # Primary attributes
    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    VITALITY = "Vitality"
    INTELLIGENCE = "Intelligence"
    MIND = "Mind"

    # Combat secondaries
    CRITICAL_HIT = "Critical Hit"
    DETERMINATION = "Determination"
    DIRECT_HIT = "Direct Hit"
    SKILL_SPEED = "Skill Speed"
    SPELL_SPEED = "Spell Speed"
    PIETY = "Piety"
    TENACITY = "Tenacity"
    DEFENSE = "Defense"
    MAGIC_DEFENSE = "Magic Defense"

    # Crafting
    CRAFTSMANSHIP = "Craftsmanship"
    CONTROL = "Control"
    CP = "CP"

    # Gathering
    GATHERING = "Gathering"
    PERCEPTION = "Perception"
    GP = "GP"


class ArmorCapability(IntEnum):
    """
    Heaviest armor weight a job may equip.

    Ordered: a job that can wear plate can also wear mail and leather.
    """
    NONE = 0
    LEATHER = 1
    MAIL = 2
    PLATE = 3


class JobCategory(Enum):
    """Production axis of the taxonomy."""
    ADVENTURING = "Adventuring"
    CRAFTING = "Crafting"
    GATHERING = "Gathering"


class StatAffinity(Enum):
    """Primary attribute of a combat job."""
    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    INTELLIGENCE = "Intelligence"
    MIND = "Mind"


class JobFamily(Enum):
    """Role family - fixes category, affinity, stats and default armor."""
    TANKING = "Tanking"
    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    HEALING = "Healing"
    CASTING = "Casting"
    CRAFTING = "Crafting"
    GATHERING = "Gathering"


@dataclass(frozen=True)
class FamilyProfile:
    """Stat and armor classification shared by every job in a family."""
    category: JobCategory
    affinity: Optional[StatAffinity]
    main_stats: FrozenSet[Stat]
    supporting_stats: FrozenSet[Stat]
    armor: ArmorCapability


# Vitality is a main stat for every combat job
_COMBAT_MAIN_STAT = Stat.VITALITY

CRAFTING_STATS = frozenset({Stat.CONTROL, Stat.CP, Stat.CRAFTSMANSHIP})
GATHERING_STATS = frozenset({Stat.GATHERING, Stat.GP, Stat.PERCEPTION})


FAMILY_PROFILES: Dict[JobFamily, FamilyProfile] = {
    JobFamily.TANKING: FamilyProfile(
        category=JobCategory.ADVENTURING,
        affinity=StatAffinity.STRENGTH,
        main_stats=frozenset({Stat.STRENGTH, _COMBAT_MAIN_STAT}),
        supporting_stats=frozenset({Stat.TENACITY, Stat.DEFENSE}),
        armor=ArmorCapability.PLATE,
    ),
    JobFamily.STRENGTH: FamilyProfile(
        category=JobCategory.ADVENTURING,
        affinity=StatAffinity.STRENGTH,
        main_stats=frozenset({Stat.STRENGTH, _COMBAT_MAIN_STAT}),
        supporting_stats=frozenset(),
        armor=ArmorCapability.LEATHER,
    ),
    JobFamily.DEXTERITY: FamilyProfile(
        category=JobCategory.ADVENTURING,
        affinity=StatAffinity.DEXTERITY,
        main_stats=frozenset({Stat.DEXTERITY, _COMBAT_MAIN_STAT}),
        supporting_stats=frozenset(),
        armor=ArmorCapability.LEATHER,
    ),
    JobFamily.HEALING: FamilyProfile(
        category=JobCategory.ADVENTURING,
        affinity=StatAffinity.MIND,
        main_stats=frozenset({Stat.MIND, _COMBAT_MAIN_STAT}),
        supporting_stats=frozenset({Stat.PIETY}),
        armor=ArmorCapability.NONE,
    ),
    JobFamily.CASTING: FamilyProfile(
        category=JobCategory.ADVENTURING,
        affinity=StatAffinity.INTELLIGENCE,
        main_stats=frozenset({Stat.INTELLIGENCE, _COMBAT_MAIN_STAT}),
        supporting_stats=frozenset(),
        armor=ArmorCapability.NONE,
    ),
    JobFamily.CRAFTING: FamilyProfile(
        category=JobCategory.CRAFTING,
        affinity=None,
        main_stats=frozenset(),
        supporting_stats=CRAFTING_STATS,
        armor=ArmorCapability.NONE,
    ),
    JobFamily.GATHERING: FamilyProfile(
        category=JobCategory.GATHERING,
        affinity=None,
        main_stats=frozenset(),
        supporting_stats=GATHERING_STATS,
        armor=ArmorCapability.NONE,
    ),
}


@dataclass(frozen=True)
class Job:
    """
    A playable job.

    Records are immutable and live in the job database for the whole process.
    `descendants` lists the abbreviations of this job's advanced forms
    (e.g. GLA -> PLD); it is empty for every job that is not a base job.
    """
    abbreviation: str
    name: str
    family: JobFamily
    armor: ArmorCapability
    descendants: Tuple[str, ...] = ()

    @property
    def profile(self) -> FamilyProfile:
        return FAMILY_PROFILES[self.family]

    @property
    def category(self) -> JobCategory:
        return self.profile.category

    @property
    def affinity(self) -> Optional[StatAffinity]:
        return self.profile.affinity

    @property
    def main_stats(self) -> FrozenSet[Stat]:
        """Stats with absolute priority when comparing gear."""
        return self.profile.main_stats

    @property
    def supporting_stats(self) -> FrozenSet[Stat]:
        """Tiebreaker stats, or the only criterion when main_stats is empty."""
        return self.profile.supporting_stats

    @property
    def is_production(self) -> bool:
        return self.category != JobCategory.ADVENTURING

    @property
    def is_base_job(self) -> bool:
        return bool(self.descendants)

    def can_wear(self, capability: ArmorCapability) -> bool:
        """Check if this job may equip armor of the given weight."""
        return self.armor >= capability

    def __str__(self) -> str:
        return self.abbreviation


class Slot(Enum):
    """Equipment slots and the single-character code printed on gear."""
    HANDS = 'A'
    BODY = 'B'
    COWL = 'C'
    EARRINGS = 'E'
    FEET = 'F'
    HEAD = 'H'
    LEGS = 'L'
    MAIN_HAND = 'M'
    NECK = 'N'
    OFF_HAND = 'O'
    RING = 'R'
    STOCKINGS = 'S'   # Feet + Legs
    TWO_HAND = 'T'
    WRISTS = 'W'

    @property
    def code(self) -> str:
        return self.value


# Weapon-holding slots. Gear for these is usually restricted to one job
# (or at most three for shields), unlike armor which is shared by weight.
PRIMARY_SLOTS = frozenset({Slot.MAIN_HAND, Slot.TWO_HAND, Slot.OFF_HAND})


def get_slot(code: str) -> Optional[Slot]:
    """Get slot by its single-character code."""
    for slot in Slot:
        if slot.value == code:
            return slot
    return None


def is_primary_slot(slot: Slot) -> bool:
    return slot in PRIMARY_SLOTS
