# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations


class EmojiTableError(Exception):
    '''
    Base class of every error that aborts a table build
    '''

    def __init__(self, text: str = '') -> None:
        Exception.__init__(self)
        self.text = text

    def __str__(self) -> str:
        return self.text


class ParseError(EmojiTableError):
    '''
    The registry document violates its grammar
    '''

    def __init__(self,
                 text: str = '',
                 line: str | None = None,
                 lineno: int | None = None) -> None:
        EmojiTableError.__init__(self, text)
        self.line = line
        self.lineno = lineno

    def __str__(self) -> str:
        text = self.text
        if self.lineno is not None:
            text = f'line {self.lineno}: {text}'
        if self.line is not None:
            text = f'{text}: {self.line!r}'
        return text


class MissingGroup(ParseError):
    pass


class MissingSubgroup(ParseError):
    pass


class MalformedLine(ParseError):
    pass


class UnknownGroup(ParseError):
    pass


class UnknownStatus(ParseError):
    pass


class InvalidScalarValue(ParseError):
    pass


class EmojiMismatch(ParseError):
    pass


class InvalidVersion(ParseError):
    pass


class AggregationError(EmojiTableError):
    '''
    Parsed entries can not be merged into a consistent table
    '''

    def __init__(self, text: str = '', name: str | None = None) -> None:
        EmojiTableError.__init__(self, text)
        self.name = name

    def __str__(self) -> str:
        if self.name is None:
            return self.text
        return f'{self.text} for {self.name!r}'


class NoCanonicalVariant(AggregationError):
    pass


class NoDefaultToneSibling(AggregationError):
    pass


class UnrecognizedToneCombination(AggregationError):
    pass


class CatalogError(EmojiTableError):
    pass


class DownloadError(EmojiTableError):
    pass
