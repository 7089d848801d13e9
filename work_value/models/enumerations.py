from enum import Enum


class Level(str, Enum):
    LV1 = "lv1"  # low / rarely / poor
    LV2 = "lv2"  # medium / sometimes / average
    LV3 = "lv3"  # high / often / excellent


class QuitFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    NEVER = "never"


class CommuteMode(str, Enum):
    WALK = "walk"
    DRIVE = "drive"
    PUBLIC = "public"
    NONE = "none"  # unset or unrecognised selector


class Tier(str, Enum):
    LIVING_ON_A_PRAYER = "Living on a Prayer"
    JUST_GETTING_BY = "Just Getting By"
    LIVING_THE_DREAM = "Living the Dream"
    LIVING_LIKE_A_KING = "Living Like a King"
    AWAITING_INPUT = "Input your annual salary"
    UNDEFINED = "Not enough information"

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]


_TIER_COLORS = {
    Tier.LIVING_ON_A_PRAYER: "red",
    Tier.JUST_GETTING_BY: "yellow",
    Tier.LIVING_THE_DREAM: "green",
    Tier.LIVING_LIKE_A_KING: "purple",
    Tier.AWAITING_INPUT: "gray",
    Tier.UNDEFINED: "gray",
}
