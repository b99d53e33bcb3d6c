# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Any

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from emojitable.common.exceptions import CatalogError
from emojitable.common.exceptions import InvalidVersion
from emojitable.common.structs import Entry
from emojitable.common.structs import Version

log = logging.getLogger('emojitable.c.catalog')

_REQUIRED_KEYS = ('emoji', 'aliases', 'tags', 'ios_version')


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    emoji: str
    aliases: tuple[str, ...]
    tags: tuple[str, ...]
    ios_version: Version

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogRecord:
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise CatalogError(
                f'Catalog record {data.get("emoji")!r} misses '
                f'{", ".join(missing)}')

        try:
            ios_version = Version.from_string(str(data['ios_version']))
        except InvalidVersion as error:
            raise CatalogError(
                f'Catalog record {data["emoji"]!r}: {error}') from error

        return cls(emoji=data['emoji'],
                   aliases=tuple(data['aliases']),
                   tags=tuple(data['tags']),
                   ios_version=ios_version)


class AliasCatalog:
    '''
    Read-only lookup of aliases, tags and the iOS version by emoji glyph
    '''

    def __init__(self, records: Iterable[CatalogRecord] = ()) -> None:
        self._records: dict[str, CatalogRecord] = {}
        for record in records:
            if record.emoji in self._records:
                log.debug('Ignoring duplicate catalog record for %s',
                          record.emoji)
                continue
            self._records[record.emoji] = record

    @classmethod
    def from_json(cls, data: str) -> AliasCatalog:
        try:
            items = json.loads(data)
        except json.JSONDecodeError as error:
            raise CatalogError(f'Invalid catalog JSON: {error}') from error

        if not isinstance(items, list):
            raise CatalogError('Catalog JSON must be an array of records')

        for item in items:
            if not isinstance(item, dict):
                raise CatalogError(f'Invalid catalog record: {item!r}')

        catalog = cls(CatalogRecord.from_dict(item) for item in items)
        log.info('Loaded %s catalog records', len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, emoji: object) -> bool:
        return emoji in self._records

    def get(self, emoji: str) -> CatalogRecord | None:
        return self._records.get(emoji)

    def enrich(self, entry: Entry) -> bool:
        '''
        Copies aliases, tags and iOS version of the matching record into
        the entry. Returns False if the catalog does not know the emoji.
        '''
        record = self._records.get(entry.emoji)
        if record is None:
            return False

        entry.ios_version = record.ios_version
        entry.tags = list(record.tags)
        entry.aliases = list(record.aliases)
        return True
