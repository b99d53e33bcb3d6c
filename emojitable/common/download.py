# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import requests

from emojitable.common.config import DEFAULT_TIMEOUT
from emojitable.common.exceptions import DownloadError

log = logging.getLogger('emojitable.c.download')


def get_cache_path(url: str, cache_dir: Path) -> Path:
    checksum = hashlib.sha256(url.encode()).hexdigest()
    return (cache_dir / checksum).with_suffix('.txt')


def cached_download(url: str,
                    cache_dir: Path,
                    timeout: float = DEFAULT_TIMEOUT) -> str:
    '''
    Returns the document at url, downloading it only if it is not
    present in cache_dir yet
    '''
    path = get_cache_path(url, cache_dir)
    try:
        data = path.read_text(encoding='utf8')
    except FileNotFoundError:
        pass
    else:
        log.info('Using cached %s at %s', url, path)
        return data

    data = download(url, timeout)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding='utf8')
    log.info('Downloaded %s to %s', url, path)
    return data


def download(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as error:
        raise DownloadError(f'Download of {url} failed: {error}') from error

    response.encoding = 'utf8'
    return response.text


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding='utf8')
    except OSError as error:
        raise DownloadError(f'Unable to read {path}: {error}') from error
