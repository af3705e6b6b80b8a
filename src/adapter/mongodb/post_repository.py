"""MongoDB implementation of PostRepository."""

from dataclasses import asdict
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import POSTS_COLLECTION_NAME
from domain.model.post import Comment, Like, Post

logger = getLogger(__name__)


class MongoPostRepository:
    def __init__(self, db: Database):
        self.collection = db[POSTS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for posts collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('created_at', -1)], 'idx_posts_created_at_desc')
            create_index_safe(self.collection, [('user_id', 1)], 'idx_posts_user_id')
            return True
        except Exception as e:
            logger.error("Failed to create posts indexes", extra={"error": str(e)})
            return False

    # ── mapping ──────────────────────────────────────────────

    def _to_doc(self, post: Post) -> dict:
        return {
            '_id': post.id,
            'user_id': post.user_id,
            'text': post.text,
            'name': post.name,
            'avatar': post.avatar,
            'likes': [asdict(like) for like in post.likes],
            'comments': [asdict(comment) for comment in post.comments],
            'created_at': post.created_at,
        }

    def _to_domain(self, doc: dict) -> Post:
        """Convert MongoDB document to Post domain model."""
        return Post(
            id=doc['_id'],
            user_id=doc['user_id'],
            text=doc['text'],
            name=doc['name'],
            avatar=doc['avatar'],
            created_at=doc['created_at'],
            likes=[Like(**rec) for rec in doc.get('likes', [])],
            comments=[Comment(**rec) for rec in doc.get('comments', [])],
        )

    # ── write operations ─────────────────────────────────────

    def create(self, post: Post) -> None:
        try:
            self.collection.insert_one(self._to_doc(post))
        except PyMongoError as e:
            logger.error("Failed to create post", extra={"postId": post.id, "error": str(e)})
            raise

    def save(self, post: Post) -> None:
        """Whole-document replace. Not guarded against concurrent writers."""
        try:
            result = self.collection.replace_one({'_id': post.id}, self._to_doc(post))
        except PyMongoError as e:
            logger.error("Failed to save post", extra={"postId": post.id, "error": str(e)})
            raise
        if result.matched_count == 0:
            logger.warning("Post vanished before save", extra={"postId": post.id})

    def delete(self, post_id: str) -> bool:
        try:
            result = self.collection.delete_one({'_id': post_id})
        except PyMongoError as e:
            logger.error("Failed to delete post", extra={"postId": post_id, "error": str(e)})
            raise

        if result.deleted_count == 0:
            logger.warning("Post not found for deletion", extra={"postId": post_id})
            return False
        logger.info("Post deleted", extra={"postId": post_id})
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, post_id: str) -> Post | None:
        try:
            doc = self.collection.find_one({'_id': post_id})
        except PyMongoError as e:
            logger.error("Failed to get post", extra={"postId": post_id, "error": str(e)})
            raise
        return self._to_domain(doc) if doc else None

    def find_all(self) -> list[Post]:
        try:
            return [self._to_domain(doc) for doc in self.collection.find({}).sort('created_at', -1)]
        except PyMongoError as e:
            logger.error("Failed to list posts", extra={"error": str(e)})
            raise
