# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Any

import dataclasses
from dataclasses import dataclass
from dataclasses import field

from emojitable.common.const import Group
from emojitable.common.const import SkinTone
from emojitable.common.const import Status
from emojitable.common.exceptions import InvalidVersion

_INT16_MIN = -(2 ** 15)
_INT16_MAX = 2 ** 15 - 1


@dataclass(frozen=True, order=True, slots=True)
class Version:
    major: int
    minor: int

    @classmethod
    def from_string(cls, string: str) -> Version:
        '''
        Parses "<major>.<minor>", as used by the alias catalog
        '''
        major, sep, minor = string.partition('.')
        if not sep:
            raise InvalidVersion('Missing decimal in version', line=string)
        return cls(_parse_int16(major, string), _parse_int16(minor, string))

    @classmethod
    def from_emoji_string(cls, string: str) -> Version:
        '''
        Parses "E<major>.<minor>", as used by the registry
        '''
        if not string.startswith('E'):
            raise InvalidVersion("Missing 'E' in emoji version", line=string)
        return cls.from_string(string[1:])

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}'


def _parse_int16(part: str, string: str) -> int:
    # int() would also accept surrounding whitespace, '+' and '_'
    digits = part[1:] if part.startswith('-') else part
    if not digits.isascii() or not digits.isdigit():
        raise InvalidVersion('Invalid version number', line=string)

    value = int(part)
    if not _INT16_MIN <= value <= _INT16_MAX:
        raise InvalidVersion('Version number out of range', line=string)
    return value


@dataclass(slots=True)
class Entry:
    group: Group
    subgroup: str
    status: Status
    unicode_version: Version
    emoji: str
    name: str
    ios_version: Version | None = None
    tags: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Emoji:
    entry: Entry
    skin_tones: int = 1
    skin_tone: SkinTone | None = None
    variations: list[str] = field(default_factory=list)

    @property
    def has_skin_tones(self) -> bool:
        return self.skin_tone is not None

    @property
    def is_tone_sibling(self) -> bool:
        return self.skin_tone not in (None, SkinTone.DEFAULT)

    def matches_search(self, query: str) -> bool:
        if not query:
            return True

        query = query.lower()
        entry = self.entry
        texts = [entry.emoji, entry.name, entry.subgroup]
        texts.extend(entry.tags)
        texts.extend(entry.aliases)
        return any(query in text.lower() for text in texts)

    def to_dict(self) -> dict[str, Any]:
        entry = self.entry
        ios_version = None
        if entry.ios_version is not None:
            ios_version = dataclasses.asdict(entry.ios_version)

        skin_tone = None
        if self.skin_tone is not None:
            skin_tone = self.skin_tone.name

        return {
            'entry': {
                'group': entry.group.as_str(),
                'subgroup': entry.subgroup,
                'status': entry.status.as_str(),
                'unicode_version': dataclasses.asdict(entry.unicode_version),
                'emoji': entry.emoji,
                'name': entry.name,
                'ios_version': ios_version,
                'tags': list(entry.tags),
                'aliases': list(entry.aliases),
            },
            'skin_tones': self.skin_tones,
            'skin_tone': skin_tone,
            'variations': list(self.variations),
        }
