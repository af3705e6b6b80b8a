"""Tests for the MongoDB repositories against a mocked collection."""

import unittest
from unittest.mock import MagicMock
import sys
from datetime import date, datetime, timezone
from pathlib import Path

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from adapter.mongodb.connection import (
    POSTS_COLLECTION_NAME,
    PROFILES_COLLECTION_NAME,
    USERS_COLLECTION_NAME,
)
from adapter.mongodb.indexes import create_index_safe
from adapter.mongodb.post_repository import MongoPostRepository
from adapter.mongodb.profile_repository import MongoProfileRepository
from adapter.mongodb.user_repository import MongoUserRepository
from domain.model.errors import EmailAlreadyExistsError
from domain.model.post import Comment, Post
from domain.model.profile import Experience, Profile, ProfileUpdate, SocialLinks


def _mock_db():
    collection = MagicMock()
    db = MagicMock()
    db.__getitem__.return_value = collection
    return db, collection


NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestMongoUserRepository(unittest.TestCase):

    def setUp(self):
        self.db, self.collection = _mock_db()
        self.repo = MongoUserRepository(self.db)

    def test_uses_users_collection(self):
        self.db.__getitem__.assert_called_with(USERS_COLLECTION_NAME)

    def test_create_inserts_document(self):
        user = self.repo.create('Alice', 'a@x.com', 'avatar', 'hash')

        doc = self.collection.insert_one.call_args[0][0]
        self.assertEqual(doc['_id'], user.id)
        self.assertEqual(doc['email'], 'a@x.com')
        self.assertEqual(doc['password_hash'], 'hash')
        self.assertEqual(user.name, 'Alice')

    def test_duplicate_email(self):
        self.collection.insert_one.side_effect = DuplicateKeyError('E11000 duplicate key')

        with self.assertRaises(EmailAlreadyExistsError):
            self.repo.create('Alice', 'a@x.com', 'avatar', 'hash')

    def test_other_errors_propagate(self):
        self.collection.insert_one.side_effect = PyMongoError('boom')

        with self.assertRaises(PyMongoError):
            self.repo.create('Alice', 'a@x.com', 'avatar', 'hash')

    def test_get_by_email_maps_document(self):
        self.collection.find_one.return_value = {
            '_id': 'u1', 'name': 'Alice', 'email': 'a@x.com', 'avatar': 'av',
            'password_hash': 'hash', 'created_at': NOW, 'updated_at': NOW,
        }

        user = self.repo.get_by_email('a@x.com')

        self.assertEqual(user.id, 'u1')
        self.assertEqual(user.password_hash, 'hash')
        self.collection.find_one.assert_called_once_with({'email': 'a@x.com'})

    def test_get_by_id_missing(self):
        self.collection.find_one.return_value = None

        self.assertIsNone(self.repo.get_by_id('missing'))

    def test_get_by_ids_empty_skips_query(self):
        self.assertEqual(self.repo.get_by_ids([]), {})
        self.collection.find.assert_not_called()

    def test_delete_reports_missing(self):
        self.collection.delete_one.return_value = MagicMock(deleted_count=0)

        self.assertFalse(self.repo.delete('missing'))


class TestMongoProfileRepository(unittest.TestCase):

    def setUp(self):
        self.db, self.collection = _mock_db()
        self.repo = MongoProfileRepository(self.db)

    def _stored(self, **overrides):
        doc = {
            '_id': 'p1', 'user_id': 'u1', 'status': 'Developer', 'skills': ['python'],
            'social': {'twitter': 't'}, 'experience': [], 'education': [],
            'created_at': NOW, 'updated_at': NOW,
        }
        doc.update(overrides)
        return doc

    def test_uses_profiles_collection(self):
        self.db.__getitem__.assert_called_with(PROFILES_COLLECTION_NAME)

    def test_upsert_is_single_atomic_call(self):
        self.collection.find_one_and_update.return_value = self._stored()
        update = ProfileUpdate(
            status='Developer', skills=['python'],
            social=SocialLinks.from_supplied(twitter='t'),
        )

        profile = self.repo.upsert('u1', update)

        args, kwargs = self.collection.find_one_and_update.call_args
        self.assertEqual(args[0], {'user_id': 'u1'})
        self.assertEqual(args[1]['$set']['status'], 'Developer')
        self.assertEqual(args[1]['$set']['social'], {'twitter': 't'})
        self.assertNotIn('company', args[1]['$set'])
        self.assertEqual(args[1]['$setOnInsert']['experience'], [])
        self.assertTrue(kwargs['upsert'])
        self.assertEqual(kwargs['return_document'], ReturnDocument.AFTER)
        self.assertEqual(profile.social.twitter, 't')

    def test_save_stores_dates_as_datetimes(self):
        profile = Profile(
            id='p1', user_id='u1', status='Developer', created_at=NOW, updated_at=NOW,
            experience=[Experience(id='e1', title='Dev', company='Acme', from_date=date(2020, 1, 1))],
        )

        self.repo.save(profile)

        args, kwargs = self.collection.replace_one.call_args
        self.assertEqual(args[0], {'_id': 'p1'})
        stored = args[1]['experience'][0]
        self.assertEqual(stored['from_date'], datetime(2020, 1, 1, tzinfo=timezone.utc))
        self.assertIsNone(stored['to_date'])
        self.assertTrue(kwargs['upsert'])

    def test_read_converts_dates_back(self):
        self.collection.find_one.return_value = self._stored(experience=[{
            'id': 'e1', 'title': 'Dev', 'company': 'Acme',
            'from_date': datetime(2020, 1, 1, tzinfo=timezone.utc), 'to_date': None,
            'location': None, 'current': True, 'description': None,
        }])

        profile = self.repo.get_by_user('u1')

        self.assertEqual(profile.experience[0].from_date, date(2020, 1, 1))
        self.assertTrue(profile.experience[0].current)

    def test_delete_by_user(self):
        self.collection.delete_one.return_value = MagicMock(deleted_count=1)

        self.assertTrue(self.repo.delete_by_user('u1'))
        self.collection.delete_one.assert_called_once_with({'user_id': 'u1'})


class TestMongoPostRepository(unittest.TestCase):

    def setUp(self):
        self.db, self.collection = _mock_db()
        self.repo = MongoPostRepository(self.db)

    def test_uses_posts_collection(self):
        self.db.__getitem__.assert_called_with(POSTS_COLLECTION_NAME)

    def test_find_all_sorted_newest_first(self):
        self.collection.find.return_value.sort.return_value = []

        self.assertEqual(self.repo.find_all(), [])
        self.collection.find.return_value.sort.assert_called_once_with('created_at', -1)

    def test_create_then_read_round_trips_nested_lists(self):
        post = Post.create('u1', 'hello', 'Alice', 'av')
        post.like('u2')
        post.add_comment(Comment.create('u2', 'nice', 'Bob', 'bv'))

        self.repo.create(post)
        doc = self.collection.insert_one.call_args[0][0]
        self.collection.find_one.return_value = doc

        loaded = self.repo.get_by_id(post.id)

        self.assertEqual(doc['likes'], [{'user_id': 'u2'}])
        self.assertEqual(loaded.likes[0].user_id, 'u2')
        self.assertEqual(loaded.comments[0].text, 'nice')

    def test_delete_missing(self):
        self.collection.delete_one.return_value = MagicMock(deleted_count=0)

        self.assertFalse(self.repo.delete('missing'))


class TestCreateIndexSafe(unittest.TestCase):

    def test_creates_index(self):
        collection = MagicMock()

        self.assertTrue(create_index_safe(collection, [('email', 1)], 'idx_email', unique=True))
        collection.create_index.assert_called_once_with([('email', 1)], name='idx_email', unique=True)

    def test_recreates_index_with_conflicting_name(self):
        collection = MagicMock()
        collection.create_index.side_effect = [OperationFailure('Index already exists'), None]
        collection.index_information.return_value = {
            '_id_': {'key': [('_id', 1)]},
            'email_1': {'key': [('email', 1)]},
        }

        self.assertTrue(create_index_safe(collection, [('email', 1)], 'idx_email'))
        collection.drop_index.assert_called_once_with('email_1')

    def test_unrelated_errors_propagate(self):
        collection = MagicMock()
        collection.create_index.side_effect = OperationFailure('not authorized')

        with self.assertRaises(OperationFailure):
            create_index_safe(collection, [('email', 1)], 'idx_email')


if __name__ == '__main__':
    unittest.main()
