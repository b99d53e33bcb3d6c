# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from enum import IntEnum

from emojitable.common.exceptions import UnknownGroup
from emojitable.common.exceptions import UnknownStatus


class Group(IntEnum):
    '''
    Emoji groups as defined by the registry. The declaration order is the
    order of the groups in the registry and in the generated table.

    https://www.unicode.org/reports/tr51/#Sorting
    '''

    SMILEYS_AND_EMOTION = 0
    PEOPLE_AND_BODY = 1
    ANIMALS_AND_NATURE = 2
    FOOD_AND_DRINK = 3
    TRAVEL_AND_PLACES = 4
    ACTIVITIES = 5
    OBJECTS = 6
    SYMBOLS = 7
    FLAGS = 8
    COMPONENT = 9

    @classmethod
    def from_str(cls, string: str) -> Group:
        try:
            return _GROUPS_BY_NAME[string]
        except KeyError:
            raise UnknownGroup('Unknown group', line=string) from None

    def as_str(self) -> str:
        return GROUP_NAMES[self]


GROUP_NAMES: dict[Group, str] = {
    Group.SMILEYS_AND_EMOTION: 'Smileys & Emotion',
    Group.PEOPLE_AND_BODY: 'People & Body',
    Group.ANIMALS_AND_NATURE: 'Animals & Nature',
    Group.FOOD_AND_DRINK: 'Food & Drink',
    Group.TRAVEL_AND_PLACES: 'Travel & Places',
    Group.ACTIVITIES: 'Activities',
    Group.OBJECTS: 'Objects',
    Group.SYMBOLS: 'Symbols',
    Group.FLAGS: 'Flags',
    Group.COMPONENT: 'Component',
}

_GROUPS_BY_NAME = {name: group for group, name in GROUP_NAMES.items()}


class Status(IntEnum):
    # https://www.unicode.org/reports/tr51/#def_fully_qualified_emoji
    FULLY_QUALIFIED = 0
    # https://www.unicode.org/reports/tr51/#def_minimally_qualified_emoji
    MINIMALLY_QUALIFIED = 1
    # https://www.unicode.org/reports/tr51/#def_unqualified_emoji
    UNQUALIFIED = 2
    # Not an emoji, building block code points for other emojis
    COMPONENT = 3

    @classmethod
    def from_str(cls, string: str) -> Status:
        try:
            return _STATUSES_BY_KEYWORD[string]
        except KeyError:
            raise UnknownStatus('Unknown status', line=string) from None

    def as_str(self) -> str:
        return STATUS_KEYWORDS[self]


STATUS_KEYWORDS: dict[Status, str] = {
    Status.FULLY_QUALIFIED: 'fully-qualified',
    Status.MINIMALLY_QUALIFIED: 'minimally-qualified',
    Status.UNQUALIFIED: 'unqualified',
    Status.COMPONENT: 'component',
}

_STATUSES_BY_KEYWORD = {kw: status for status, kw in STATUS_KEYWORDS.items()}


class SkinTone(IntEnum):
    '''
    Skin tones of the five Fitzpatrick modifiers and of the two person
    combinations. Tone siblings are sorted by this order in the table.

    https://www.unicode.org/reports/tr51/#Diversity
    '''

    DEFAULT = 0
    LIGHT = 1
    MEDIUM_LIGHT = 2
    MEDIUM = 3
    MEDIUM_DARK = 4
    DARK = 5
    LIGHT_AND_MEDIUM_LIGHT = 6
    LIGHT_AND_MEDIUM = 7
    LIGHT_AND_MEDIUM_DARK = 8
    LIGHT_AND_DARK = 9
    MEDIUM_LIGHT_AND_LIGHT = 10
    MEDIUM_LIGHT_AND_MEDIUM = 11
    MEDIUM_LIGHT_AND_MEDIUM_DARK = 12
    MEDIUM_LIGHT_AND_DARK = 13
    MEDIUM_AND_LIGHT = 14
    MEDIUM_AND_MEDIUM_LIGHT = 15
    MEDIUM_AND_MEDIUM_DARK = 16
    MEDIUM_AND_DARK = 17
    MEDIUM_DARK_AND_LIGHT = 18
    MEDIUM_DARK_AND_MEDIUM_LIGHT = 19
    MEDIUM_DARK_AND_MEDIUM = 20
    MEDIUM_DARK_AND_DARK = 21
    DARK_AND_LIGHT = 22
    DARK_AND_MEDIUM_LIGHT = 23
    DARK_AND_MEDIUM = 24
    DARK_AND_MEDIUM_DARK = 25


SKIN_TONE_MODIFIERS: dict[str, SkinTone] = {
    '\U0001F3FB': SkinTone.LIGHT,
    '\U0001F3FC': SkinTone.MEDIUM_LIGHT,
    '\U0001F3FD': SkinTone.MEDIUM,
    '\U0001F3FE': SkinTone.MEDIUM_DARK,
    '\U0001F3FF': SkinTone.DARK,
}

# The first modifier in the glyph belongs to the first person
SKIN_TONE_PAIRS: dict[tuple[SkinTone, SkinTone], SkinTone] = {
    (SkinTone.LIGHT, SkinTone.MEDIUM_LIGHT): SkinTone.LIGHT_AND_MEDIUM_LIGHT,
    (SkinTone.LIGHT, SkinTone.MEDIUM): SkinTone.LIGHT_AND_MEDIUM,
    (SkinTone.LIGHT, SkinTone.MEDIUM_DARK): SkinTone.LIGHT_AND_MEDIUM_DARK,
    (SkinTone.LIGHT, SkinTone.DARK): SkinTone.LIGHT_AND_DARK,
    (SkinTone.MEDIUM_LIGHT, SkinTone.LIGHT): SkinTone.MEDIUM_LIGHT_AND_LIGHT,
    (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM):
        SkinTone.MEDIUM_LIGHT_AND_MEDIUM,
    (SkinTone.MEDIUM_LIGHT, SkinTone.MEDIUM_DARK):
        SkinTone.MEDIUM_LIGHT_AND_MEDIUM_DARK,
    (SkinTone.MEDIUM_LIGHT, SkinTone.DARK): SkinTone.MEDIUM_LIGHT_AND_DARK,
    (SkinTone.MEDIUM, SkinTone.LIGHT): SkinTone.MEDIUM_AND_LIGHT,
    (SkinTone.MEDIUM, SkinTone.MEDIUM_LIGHT):
        SkinTone.MEDIUM_AND_MEDIUM_LIGHT,
    (SkinTone.MEDIUM, SkinTone.MEDIUM_DARK): SkinTone.MEDIUM_AND_MEDIUM_DARK,
    (SkinTone.MEDIUM, SkinTone.DARK): SkinTone.MEDIUM_AND_DARK,
    (SkinTone.MEDIUM_DARK, SkinTone.LIGHT): SkinTone.MEDIUM_DARK_AND_LIGHT,
    (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM_LIGHT):
        SkinTone.MEDIUM_DARK_AND_MEDIUM_LIGHT,
    (SkinTone.MEDIUM_DARK, SkinTone.MEDIUM):
        SkinTone.MEDIUM_DARK_AND_MEDIUM,
    (SkinTone.MEDIUM_DARK, SkinTone.DARK): SkinTone.MEDIUM_DARK_AND_DARK,
    (SkinTone.DARK, SkinTone.LIGHT): SkinTone.DARK_AND_LIGHT,
    (SkinTone.DARK, SkinTone.MEDIUM_LIGHT): SkinTone.DARK_AND_MEDIUM_LIGHT,
    (SkinTone.DARK, SkinTone.MEDIUM): SkinTone.DARK_AND_MEDIUM,
    (SkinTone.DARK, SkinTone.MEDIUM_DARK): SkinTone.DARK_AND_MEDIUM_DARK,
}
