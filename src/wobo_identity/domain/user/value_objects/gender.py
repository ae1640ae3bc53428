from enum import Enum


class Gender(str, Enum):
    """Closed set of gender tags a user can carry."""

    FEMALE = "female"
    MALE = "male"
    NEUTRAL = "neutral"
