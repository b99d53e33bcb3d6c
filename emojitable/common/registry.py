# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Parser for the Unicode emoji registry (emoji-test.txt)

The registry lists one emoji per line, preceded by group and subgroup
headers:

    # group: Smileys & Emotion

    # subgroup: face-smiling
    1F600 ; fully-qualified # 😀 E1.0 grinning face
'''

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from emojitable.common.const import Group
from emojitable.common.const import Status
from emojitable.common.exceptions import EmojiMismatch
from emojitable.common.exceptions import InvalidScalarValue
from emojitable.common.exceptions import MalformedLine
from emojitable.common.exceptions import MissingGroup
from emojitable.common.exceptions import MissingSubgroup
from emojitable.common.exceptions import ParseError
from emojitable.common.structs import Entry
from emojitable.common.structs import Version

log = logging.getLogger('emojitable.c.registry')

GROUP_PREFIX = '# group: '
SUBGROUP_PREFIX = '# subgroup: '

_MAX_SCALAR = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


@dataclass(slots=True)
class ParserState:
    group: Group | None = None
    subgroup: str = ''


def parse_registry(data: str) -> Iterator[Entry]:
    '''
    Yields an Entry for every data line of the registry document
    '''
    state = ParserState()
    for lineno, line in enumerate(data.splitlines(), start=1):
        try:
            entry = parse_line(state, line)
        except ParseError as error:
            error.lineno = lineno
            raise

        if entry is not None:
            yield entry


def parse_line(state: ParserState, line: str) -> Entry | None:
    '''
    Parses a single line. Header lines update the state and return None,
    as do comments and blank lines.
    '''
    if not line.strip():
        return None

    if line.startswith(GROUP_PREFIX):
        state.group = Group.from_str(line.removeprefix(GROUP_PREFIX).strip())
        log.debug('Group: %s', state.group.as_str())
        return None

    if line.startswith(SUBGROUP_PREFIX):
        state.subgroup = line.removeprefix(SUBGROUP_PREFIX).strip()
        return None

    if line.startswith('#'):
        return None

    if state.group is None:
        raise MissingGroup('Data line before group header', line=line)

    if not state.subgroup:
        raise MissingSubgroup('Data line before subgroup header', line=line)

    return parse_entry(state.group, state.subgroup, line)


def parse_entry(group: Group, subgroup: str, line: str) -> Entry:
    code_points, sep, rest = line.partition(';')
    if not sep:
        raise MalformedLine('Expected code points', line=line)

    status, sep, rest = rest.partition('#')
    if not sep:
        raise MalformedLine('Expected status', line=line)

    fields = rest.strip().split(maxsplit=2)
    if len(fields) < 3:
        raise MalformedLine('Expected emoji, version and name', line=line)

    emoji, unicode_version, name = fields
    validate_code_points(code_points, emoji, line)

    try:
        return Entry(group=group,
                     subgroup=subgroup,
                     status=Status.from_str(status.strip()),
                     unicode_version=Version.from_emoji_string(
                         unicode_version),
                     emoji=emoji,
                     name=name)
    except ParseError as error:
        error.line = line
        raise


def parse_code_points(code_points: str, line: str = '') -> str:
    '''
    Returns the string formed by the whitespace separated hex scalars
    '''
    tokens = code_points.split()
    if not tokens:
        raise MalformedLine('Expected code points', line=line)

    chars: list[str] = []
    for token in tokens:
        try:
            scalar = int(token, 16)
        except ValueError:
            raise MalformedLine(f'Invalid code point {token}',
                                line=line) from None

        if scalar < 0 or scalar > _MAX_SCALAR or scalar in _SURROGATES:
            raise InvalidScalarValue(
                f'Invalid Unicode scalar value {token}', line=line)

        chars.append(chr(scalar))

    return ''.join(chars)


def validate_code_points(code_points: str, emoji: str, line: str = '') -> None:
    if parse_code_points(code_points, line) != emoji:
        raise EmojiMismatch('Code points do not match emoji', line=line)
