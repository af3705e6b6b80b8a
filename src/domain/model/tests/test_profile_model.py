"""Unit tests for Profile domain model: upsert application and nested lists."""

import unittest
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from domain.model.profile import (
    Education,
    Experience,
    Profile,
    ProfileUpdate,
    SocialLinks,
)


def _update(**overrides) -> ProfileUpdate:
    defaults = dict(status='Developer', skills=['go', 'rust'])
    defaults.update(overrides)
    return ProfileUpdate(**defaults)


class TestSocialLinks(unittest.TestCase):

    def test_from_supplied_keeps_only_given_links(self):
        links = SocialLinks.from_supplied(twitter='https://x.com/a', youtube=None, facebook='')

        self.assertEqual(links.as_dict(), {'twitter': 'https://x.com/a'})

    def test_unknown_platforms_are_ignored(self):
        links = SocialLinks.from_supplied(myspace='https://myspace.com/a')
        self.assertEqual(links.as_dict(), {})


class TestProfileApply(unittest.TestCase):

    def test_create_sets_supplied_fields(self):
        profile = Profile.create('user-1', _update(company='Acme', bio='hi'))

        self.assertEqual(profile.user_id, 'user-1')
        self.assertEqual(profile.status, 'Developer')
        self.assertEqual(profile.skills, ['go', 'rust'])
        self.assertEqual(profile.company, 'Acme')
        self.assertEqual(profile.experience, [])

    def test_apply_leaves_unsupplied_scalars(self):
        profile = Profile.create('user-1', _update(company='Acme', location='Berlin'))

        profile.apply(_update(status='Senior', company='Initech'))

        self.assertEqual(profile.status, 'Senior')
        self.assertEqual(profile.company, 'Initech')
        self.assertEqual(profile.location, 'Berlin')

    def test_apply_does_not_touch_nested_lists(self):
        profile = Profile.create('user-1', _update())
        profile.add_experience(Experience.create('Dev', 'Acme', date(2020, 1, 1)))

        profile.apply(_update(status='Lead'))

        self.assertEqual(len(profile.experience), 1)


class TestNestedEntries(unittest.TestCase):

    def setUp(self):
        self.profile = Profile.create('user-1', _update())

    def test_experience_inserted_at_head(self):
        first = Experience.create('Junior', 'Acme', date(2018, 1, 1))
        second = Experience.create('Senior', 'Initech', date(2021, 1, 1))
        self.profile.add_experience(first)
        self.profile.add_experience(second)

        self.assertEqual([e.id for e in self.profile.experience], [second.id, first.id])

    def test_add_then_remove_experience_round_trip(self):
        existing = Experience.create('Junior', 'Acme', date(2018, 1, 1))
        self.profile.add_experience(existing)
        before = list(self.profile.experience)

        added = Experience.create('Senior', 'Initech', date(2021, 1, 1))
        self.profile.add_experience(added)
        self.assertTrue(self.profile.remove_experience(added.id))

        self.assertEqual(self.profile.experience, before)

    def test_remove_unknown_experience_is_noop(self):
        entry = Experience.create('Junior', 'Acme', date(2018, 1, 1))
        self.profile.add_experience(entry)

        self.assertFalse(self.profile.remove_experience('missing'))
        self.assertEqual(self.profile.experience, [entry])

    def test_remove_middle_education_by_id(self):
        entries = [
            Education.create('MIT', 'BSc', 'CS', date(2010, 9, 1)),
            Education.create('ETH', 'MSc', 'CS', date(2014, 9, 1)),
            Education.create('TUM', 'PhD', 'CS', date(2016, 9, 1)),
        ]
        for entry in entries:
            self.profile.add_education(entry)

        self.assertTrue(self.profile.remove_education(entries[1].id))

        self.assertEqual([e.school for e in self.profile.education], ['TUM', 'MIT'])

    def test_remove_unknown_education_is_noop(self):
        self.assertFalse(self.profile.remove_education('missing'))
        self.assertEqual(self.profile.education, [])


if __name__ == '__main__':
    unittest.main()
