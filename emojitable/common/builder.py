# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging

from emojitable.common.aggregator import EmojiAggregator
from emojitable.common.catalog import AliasCatalog
from emojitable.common.config import BuildConfig
from emojitable.common.download import cached_download
from emojitable.common.download import read_source
from emojitable.common.registry import parse_registry
from emojitable.common.structs import Emoji

log = logging.getLogger('emojitable.c.builder')


def build(registry_data: str, catalog: AliasCatalog) -> list[Emoji]:
    '''
    Parses the registry and merges its entries into the emoji table
    '''
    aggregator = EmojiAggregator(catalog)
    count = 0
    for entry in parse_registry(registry_data):
        aggregator.add(entry)
        count += 1

    emojis = aggregator.emojis
    log.info('Aggregated %s registry entries into %s emojis',
             count, len(emojis))
    return emojis


def load_registry(config: BuildConfig) -> str:
    if config.registry_path is not None:
        log.info('Reading registry from %s', config.registry_path)
        return read_source(config.registry_path)
    return cached_download(config.unicode_url,
                           config.cache_dir,
                           config.timeout)


def load_catalog(config: BuildConfig) -> AliasCatalog:
    if config.catalog_path is not None:
        log.info('Reading catalog from %s', config.catalog_path)
        data = read_source(config.catalog_path)
    else:
        data = cached_download(config.gemoji_url,
                               config.cache_dir,
                               config.timeout)
    return AliasCatalog.from_json(data)


def build_from_config(config: BuildConfig) -> list[Emoji]:
    catalog = load_catalog(config)
    registry_data = load_registry(config)
    return build(registry_data, catalog)
