"""Unit tests for Post domain model: like/unlike toggles and comment ownership."""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from domain.model.errors import (
    AlreadyLikedError,
    ConflictError,
    NotFoundError,
    NotLikedError,
    PermissionDeniedError,
)
from domain.model.post import Comment, Like, Post


def _post(author: str = 'user-a') -> Post:
    return Post.create(user_id=author, text='hello world', name='Alice', avatar='//avatar/a')


class TestPostLikes(unittest.TestCase):

    def test_like_inserts_at_head(self):
        post = _post()
        post.like('user-b')
        post.like('user-c')

        self.assertEqual(post.likes, [Like('user-c'), Like('user-b')])

    def test_second_like_by_same_user_conflicts(self):
        post = _post()
        post.like('user-b')

        with self.assertRaises(AlreadyLikedError):
            post.like('user-b')
        self.assertEqual(len(post.likes), 1)

    def test_already_liked_is_a_conflict(self):
        self.assertTrue(issubclass(AlreadyLikedError, ConflictError))
        self.assertTrue(issubclass(NotLikedError, ConflictError))

    def test_unlike_without_like_conflicts_and_leaves_list(self):
        post = _post()
        post.like('user-c')

        with self.assertRaises(NotLikedError):
            post.unlike('user-b')
        self.assertEqual(post.likes, [Like('user-c')])

    def test_like_then_unlike_restores_prior_state(self):
        post = _post()
        post.like('user-c')
        before = list(post.likes)

        post.like('user-b')
        post.unlike('user-b')

        self.assertEqual(post.likes, before)

    def test_unlike_removes_only_callers_like(self):
        post = _post()
        for uid in ('user-b', 'user-c', 'user-d'):
            post.like(uid)

        post.unlike('user-c')

        self.assertEqual([l.user_id for l in post.likes], ['user-d', 'user-b'])


class TestPostComments(unittest.TestCase):

    def setUp(self):
        self.post = _post()

    def _comment(self, user_id: str, text: str) -> Comment:
        return Comment.create(user_id=user_id, text=text, name=user_id, avatar='')

    def test_add_comment_inserts_at_head(self):
        first = self._comment('user-a', 'first')
        second = self._comment('user-b', 'second')
        self.post.add_comment(first)
        self.post.add_comment(second)

        self.assertEqual([c.text for c in self.post.comments], ['second', 'first'])

    def test_remove_comment_by_non_author_is_denied(self):
        comment = self._comment('user-a', 'nice')
        self.post.add_comment(comment)

        with self.assertRaises(PermissionDeniedError):
            self.post.remove_comment(comment.id, 'user-b')
        self.assertEqual(len(self.post.comments), 1)

    def test_remove_unknown_comment_is_not_found(self):
        with self.assertRaises(NotFoundError):
            self.post.remove_comment('missing', 'user-a')

    def test_remove_comment_targets_comment_id_not_first_by_author(self):
        """With several comments by the same author only the addressed one goes."""
        older = self._comment('user-a', 'older')
        newer = self._comment('user-a', 'newer')
        self.post.add_comment(older)
        self.post.add_comment(newer)

        removed = self.post.remove_comment(older.id, 'user-a')

        self.assertEqual(removed.id, older.id)
        self.assertEqual([c.id for c in self.post.comments], [newer.id])


class TestPostOwnership(unittest.TestCase):

    def test_check_ownership(self):
        post = _post('user-a')
        post.check_ownership('user-a')
        with self.assertRaises(PermissionDeniedError):
            post.check_ownership('user-b')

    def test_create_generates_distinct_ids(self):
        self.assertNotEqual(_post().id, _post().id)


if __name__ == '__main__':
    unittest.main()
