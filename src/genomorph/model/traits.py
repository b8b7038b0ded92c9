"""Trait identifiers, categories and pattern kinds."""

from enum import StrEnum


class TraitCategory(StrEnum):
    """Category of a scored trait; decides the final-value mapping."""

    STAT = "stat"
    RESISTANCE = "resistance"
    BEHAVIOR = "behavior"


class TraitId(StrEnum):
    """The closed set of 16 scored traits."""

    # Stats
    STRENGTH = "strength"
    AGILITY = "agility"
    ENDURANCE = "endurance"
    INTELLIGENCE = "intelligence"
    PERCEPTION = "perception"
    PSYCHIC = "psychic"

    # Resistances
    POISON = "poison"
    ACID = "acid"
    FIRE = "fire"
    COLD = "cold"
    PSYCHIC_RESISTANCE = "psychic_resistance"
    RADIATION = "radiation"

    # Behaviors
    AGGRESSION = "aggression"
    CURIOSITY = "curiosity"
    LOYALTY = "loyalty"
    CHAOS = "chaos"


class PatternKind(StrEnum):
    """Kinds of pattern reported in a trait explanation."""

    MOTIF = "motif"
    RUN = "run"
    PALINDROME = "palindrome"
    ALTERNATION = "alternation"
    TANDEM_REPEAT = "tandem_repeat"
