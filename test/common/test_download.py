# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock
from unittest.mock import patch

import requests

from emojitable.common.download import cached_download
from emojitable.common.download import get_cache_path
from emojitable.common.download import read_source
from emojitable.common.exceptions import DownloadError

URL = 'https://unicode.org/Public/17.0.0/emoji/emoji-test.txt'


def make_response(text: str, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f'{status_code} Client Error')
    return response


class TestCachedDownload(unittest.TestCase):

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.cache_dir = Path(self._tmp.name) / 'cache'

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_cache_path(self) -> None:
        path = get_cache_path(URL, self.cache_dir)
        self.assertEqual(path.parent, self.cache_dir)
        self.assertEqual(path.suffix, '.txt')
        self.assertEqual(len(path.stem), 64)
        self.assertNotEqual(path, get_cache_path(URL + '?', self.cache_dir))

    @patch('emojitable.common.download.requests.get')
    def test_download_then_cache(self, get: MagicMock) -> None:
        get.return_value = make_response('# group: Flags\n')

        self.assertEqual(cached_download(URL, self.cache_dir),
                         '# group: Flags\n')
        self.assertEqual(cached_download(URL, self.cache_dir),
                         '# group: Flags\n')

        get.assert_called_once_with(URL, timeout=30.0)
        self.assertTrue(get_cache_path(URL, self.cache_dir).exists())

    @patch('emojitable.common.download.requests.get')
    def test_http_error(self, get: MagicMock) -> None:
        get.return_value = make_response('Not Found', status_code=404)

        with self.assertRaises(DownloadError) as context:
            cached_download(URL, self.cache_dir, timeout=5)
        self.assertIn(URL, str(context.exception))
        self.assertFalse(get_cache_path(URL, self.cache_dir).exists())

    @patch('emojitable.common.download.requests.get')
    def test_connection_error(self, get: MagicMock) -> None:
        get.side_effect = requests.ConnectionError('unreachable')

        with self.assertRaises(DownloadError):
            cached_download(URL, self.cache_dir)

    def test_read_source(self) -> None:
        path = Path(self._tmp.name) / 'emoji-test.txt'
        path.write_text('#EOF\n', encoding='utf8')
        self.assertEqual(read_source(path), '#EOF\n')

        with self.assertRaises(DownloadError):
            read_source(Path(self._tmp.name) / 'missing.txt')


if __name__ == '__main__':
    unittest.main()
