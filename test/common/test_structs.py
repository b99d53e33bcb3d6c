# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojitable.common.const import Group
from emojitable.common.const import GROUP_NAMES
from emojitable.common.const import SKIN_TONE_PAIRS
from emojitable.common.const import SkinTone
from emojitable.common.const import Status
from emojitable.common.exceptions import InvalidVersion
from emojitable.common.exceptions import UnknownGroup
from emojitable.common.exceptions import UnknownStatus
from emojitable.common.structs import Emoji
from emojitable.common.structs import Entry
from emojitable.common.structs import Version


class TestVersion(unittest.TestCase):

    def test_parse(self) -> None:
        self.assertEqual(Version.from_string('13.1'), Version(13, 1))
        self.assertEqual(Version.from_emoji_string('E0.6'), Version(0, 6))
        self.assertEqual(str(Version(15, 0)), '15.0')

    def test_ordering(self) -> None:
        self.assertLess(Version(0, 6), Version(1, 0))
        self.assertLess(Version(12, 0), Version(12, 1))
        self.assertEqual(max(Version(2, 0), Version(11, 0)), Version(11, 0))

    def test_invalid(self) -> None:
        for string in ('13', '13.', '.1', 'a.b', '1.0.0', ' 1.0', '40000.0'):
            with self.subTest(string=string):
                with self.assertRaises(InvalidVersion):
                    Version.from_string(string)

        with self.assertRaises(InvalidVersion):
            Version.from_emoji_string('1.0')


class TestEnums(unittest.TestCase):

    def test_group_round_trip(self) -> None:
        self.assertEqual(len(GROUP_NAMES), len(Group))
        for group in Group:
            self.assertEqual(Group.from_str(group.as_str()), group)

        self.assertEqual(Group.from_str('Smileys & Emotion'),
                         Group.SMILEYS_AND_EMOTION)
        self.assertLess(Group.SMILEYS_AND_EMOTION, Group.FLAGS)

        with self.assertRaises(UnknownGroup):
            Group.from_str('smileys & emotion')

    def test_status_round_trip(self) -> None:
        for status in Status:
            self.assertEqual(Status.from_str(status.as_str()), status)

        with self.assertRaises(UnknownStatus):
            Status.from_str('Fully-Qualified')

    def test_skin_tone_order(self) -> None:
        self.assertEqual(len(SkinTone), 26)
        self.assertEqual(len(SKIN_TONE_PAIRS), 20)
        self.assertEqual(min(SkinTone), SkinTone.DEFAULT)
        self.assertLess(SkinTone.DARK, SkinTone.LIGHT_AND_MEDIUM_LIGHT)
        self.assertEqual(max(SkinTone), SkinTone.DARK_AND_MEDIUM_DARK)
        self.assertEqual(len(set(SKIN_TONE_PAIRS.values())), 20)


class TestEmojiSearch(unittest.TestCase):

    def setUp(self) -> None:
        entry = Entry(group=Group.PEOPLE_AND_BODY,
                      subgroup='hand-fingers-open',
                      status=Status.FULLY_QUALIFIED,
                      unicode_version=Version(0, 6),
                      emoji='\U0001F44B',
                      name='waving hand',
                      ios_version=Version(6, 0),
                      tags=['goodbye'],
                      aliases=['wave'])
        self.emoji = Emoji(entry=entry)

    def test_matches(self) -> None:
        self.assertTrue(self.emoji.matches_search(''))
        self.assertTrue(self.emoji.matches_search('WAVING'))
        self.assertTrue(self.emoji.matches_search('fingers'))
        self.assertTrue(self.emoji.matches_search('Goodbye'))
        self.assertTrue(self.emoji.matches_search('wav'))
        self.assertTrue(self.emoji.matches_search('\U0001F44B'))
        self.assertFalse(self.emoji.matches_search('hello'))

    def test_to_dict(self) -> None:
        data = self.emoji.to_dict()
        self.assertEqual(data['entry']['group'], 'People & Body')
        self.assertEqual(data['entry']['status'], 'fully-qualified')
        self.assertEqual(data['entry']['ios_version'],
                         {'major': 6, 'minor': 0})
        self.assertIsNone(data['skin_tone'])
        self.assertEqual(data['skin_tones'], 1)
        self.assertEqual(data['variations'], [])


if __name__ == '__main__':
    unittest.main()
