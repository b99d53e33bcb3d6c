# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging
from collections.abc import Iterable

from emojitable.common.catalog import AliasCatalog
from emojitable.common.const import Group
from emojitable.common.const import SKIN_TONE_MODIFIERS
from emojitable.common.const import SKIN_TONE_PAIRS
from emojitable.common.const import SkinTone
from emojitable.common.const import Status
from emojitable.common.exceptions import NoCanonicalVariant
from emojitable.common.exceptions import NoDefaultToneSibling
from emojitable.common.exceptions import UnrecognizedToneCombination
from emojitable.common.structs import Emoji
from emojitable.common.structs import Entry

log = logging.getLogger('emojitable.c.aggregator')


def get_skin_tone(entry: Entry) -> SkinTone | None:
    '''
    Classifies the glyph by the skin tone modifiers it contains
    '''
    tones = [SKIN_TONE_MODIFIERS[char] for char in entry.emoji
             if char in SKIN_TONE_MODIFIERS]

    if not tones:
        return None

    if len(tones) == 1:
        return tones[0]

    if len(tones) == 2:
        first, second = tones
        if first == second:
            return first

        skin_tone = SKIN_TONE_PAIRS.get((first, second))
        if skin_tone is not None:
            return skin_tone

    names = ', '.join(tone.name for tone in tones)
    raise UnrecognizedToneCombination(
        f'Unrecognized skin tone combination ({names})', name=entry.name)


class EmojiAggregator:
    '''
    Merges registry entries into the ordered emoji table.

    Fully-qualified entries create a record, minimally-qualified and
    unqualified entries become variations of the last created record.
    Records with skin tone modifiers are sorted in behind the unmodified
    record of their family, which is marked as SkinTone.DEFAULT.
    '''

    def __init__(self, catalog: AliasCatalog | None = None) -> None:
        if catalog is None:
            catalog = AliasCatalog()
        self._catalog = catalog
        self._emojis: list[Emoji] = []
        self._last: Emoji | None = None

    @property
    def emojis(self) -> list[Emoji]:
        return self._emojis

    def add_all(self, entries: Iterable[Entry]) -> list[Emoji]:
        for entry in entries:
            self.add(entry)
        return self._emojis

    def add(self, entry: Entry) -> None:
        if (entry.status == Status.COMPONENT or
                entry.group == Group.COMPONENT):
            log.debug('Skipping component %s', entry.name)
            return

        if entry.status in (Status.MINIMALLY_QUALIFIED, Status.UNQUALIFIED):
            self._add_variation(entry)
            return

        self._catalog.enrich(entry)

        skin_tone = get_skin_tone(entry)
        if skin_tone in (None, SkinTone.DEFAULT):
            emoji = Emoji(entry=entry, skin_tone=skin_tone)
            self._emojis.append(emoji)
        else:
            emoji = self._insert_tone_sibling(entry, skin_tone)

        self._last = emoji

    def _add_variation(self, entry: Entry) -> None:
        if self._last is None:
            raise NoCanonicalVariant(
                'Failed to find fully qualified variation', name=entry.name)
        self._last.variations.append(entry.emoji)

    def _find_default(self, entry: Entry) -> int:
        for index in range(len(self._emojis) - 1, -1, -1):
            emoji = self._emojis[index]
            if emoji.is_tone_sibling:
                continue
            if (emoji.entry.group == entry.group and
                    emoji.entry.subgroup == entry.subgroup):
                return index

        raise NoDefaultToneSibling(
            'Failed to find the default skin tone', name=entry.name)

    def _insert_tone_sibling(self,
                             entry: Entry,
                             skin_tone: SkinTone) -> Emoji:

        index = self._find_default(entry)
        default = self._emojis[index]
        if default.skin_tone is None:
            log.debug('%s has skin tones', default.entry.name)
            default.skin_tone = SkinTone.DEFAULT
        default.skin_tones += 1

        # Only the siblings directly following the default are searched
        position = index + 1
        while position < len(self._emojis):
            sibling = self._emojis[position]
            if not self._is_sibling(default, sibling):
                break
            assert sibling.skin_tone is not None
            if sibling.skin_tone >= skin_tone:
                break
            position += 1

        emoji = Emoji(entry=entry, skin_tone=skin_tone)
        self._emojis.insert(position, emoji)
        return emoji

    @staticmethod
    def _is_sibling(default: Emoji, emoji: Emoji) -> bool:
        return (emoji.is_tone_sibling and
                emoji.entry.group == default.entry.group and
                emoji.entry.subgroup == default.entry.subgroup)


def aggregate(entries: Iterable[Entry],
              catalog: AliasCatalog | None = None) -> list[Emoji]:

    return EmojiAggregator(catalog).add_all(entries)
