# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import os
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from packaging.version import InvalidVersion
from packaging.version import Version

DEFAULT_UNICODE_VERSION = '17.0.0'
DEFAULT_GEMOJI_VERSION = '4.1.0'
DEFAULT_TIMEOUT = 30.0

OUTPUT_FORMATS = ('python', 'json')

UNICODE_URL = 'https://unicode.org/Public/{version}/emoji/emoji-test.txt'
GEMOJI_URL = ('https://raw.githubusercontent.com/github/gemoji/'
              'v{version}/db/emoji.json')


def get_cache_dir() -> Path:
    cache_dir = os.environ.get('EMOJITABLE_CACHE_DIR')
    if cache_dir:
        return Path(cache_dir)

    xdg_cache_home = os.environ.get('XDG_CACHE_HOME')
    if xdg_cache_home:
        return Path(xdg_cache_home) / 'emojitable'

    return Path.home() / '.cache' / 'emojitable'


def parse_release(string: str) -> Version:
    '''
    Validates a "major.minor.patch" release string
    '''
    try:
        version = Version(string)
    except InvalidVersion:
        raise ValueError(f'Invalid release version: {string}') from None

    if len(version.release) != 3 or version.pre or version.dev:
        raise ValueError(f'Expected major.minor.patch release: {string}')
    return version


@dataclass
class BuildConfig:
    unicode_version: str = DEFAULT_UNICODE_VERSION
    gemoji_version: str = DEFAULT_GEMOJI_VERSION
    cache_dir: Path = field(default_factory=get_cache_dir)
    timeout: float = DEFAULT_TIMEOUT
    output_format: str = 'python'
    registry_path: Path | None = None
    catalog_path: Path | None = None

    def __post_init__(self) -> None:
        parse_release(self.unicode_version)
        parse_release(self.gemoji_version)
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f'Unknown output format: {self.output_format}')
        if self.timeout <= 0:
            raise ValueError('Timeout must be positive')

    @property
    def unicode_url(self) -> str:
        return UNICODE_URL.format(version=self.unicode_version)

    @property
    def gemoji_url(self) -> str:
        return GEMOJI_URL.format(version=self.gemoji_version)
