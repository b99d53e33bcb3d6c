# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Serializes the emoji table as Python source or JSON
'''

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

import emojitable
from emojitable.common.config import BuildConfig
from emojitable.common.structs import Emoji
from emojitable.common.structs import Version

log = logging.getLogger('emojitable.c.emitter')

INDENT = '    '

PYTHON_HEADER = '''\
# This file was generated by emojitable {version}, do not edit.
# Sources: Unicode emoji {unicode_version}, gemoji {gemoji_version}

from emojitable.common.const import Group
from emojitable.common.const import SkinTone
from emojitable.common.const import Status
from emojitable.common.structs import Emoji
from emojitable.common.structs import Entry
from emojitable.common.structs import Version

EMOJIS: tuple[Emoji, ...] = (
'''


def _format_version(version: Version | None) -> str:
    if version is None:
        return 'None'
    return f'Version(major={version.major}, minor={version.minor})'


def _format_strings(strings: Sequence[str]) -> str:
    return '[' + ', '.join(repr(string) for string in strings) + ']'


def _format_emoji(emoji: Emoji) -> list[str]:
    entry = emoji.entry
    skin_tone = 'None'
    if emoji.skin_tone is not None:
        skin_tone = f'SkinTone.{emoji.skin_tone.name}'

    entry_fields = [
        f'group=Group.{entry.group.name}',
        f'subgroup={entry.subgroup!r}',
        f'status=Status.{entry.status.name}',
        f'unicode_version={_format_version(entry.unicode_version)}',
        f'emoji={entry.emoji!r}',
        f'name={entry.name!r}',
        f'ios_version={_format_version(entry.ios_version)}',
        f'tags={_format_strings(entry.tags)}',
        f'aliases={_format_strings(entry.aliases)}',
    ]

    lines = [f'{INDENT}Emoji(', f'{INDENT * 2}entry=Entry(']
    lines.extend(f'{INDENT * 3}{field},' for field in entry_fields)
    lines.append(f'{INDENT * 2}),')
    lines.append(f'{INDENT * 2}skin_tones={emoji.skin_tones},')
    lines.append(f'{INDENT * 2}skin_tone={skin_tone},')
    lines.append(
        f'{INDENT * 2}variations={_format_strings(emoji.variations)},')
    lines.append(f'{INDENT}),')
    return lines


def generate_python_code(emojis: Sequence[Emoji],
                         config: BuildConfig | None = None) -> str:
    if config is None:
        config = BuildConfig()

    code = PYTHON_HEADER.format(version=emojitable.__version__,
                                unicode_version=config.unicode_version,
                                gemoji_version=config.gemoji_version)
    lines: list[str] = []
    for emoji in emojis:
        lines.extend(_format_emoji(emoji))

    if lines:
        code += '\n'.join(lines) + '\n'
    return code + ')\n'


def generate_json(emojis: Sequence[Emoji]) -> str:
    data = [emoji.to_dict() for emoji in emojis]
    return json.dumps(data, ensure_ascii=False, indent=2) + '\n'


def generate(emojis: Sequence[Emoji], config: BuildConfig) -> str:
    if config.output_format == 'json':
        return generate_json(emojis)
    return generate_python_code(emojis, config)


def write_output(text: str, path: Path) -> None:
    '''
    Replaces path with text, the old file stays untouched on failure
    '''
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent,
                                    prefix=f'.{path.name}.',
                                    suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf8', newline='\n') as file:
            file.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    log.info('Wrote %s', path)
