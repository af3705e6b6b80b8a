"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import EmailAlreadyExistsError
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            avatar=doc.get('avatar', ''),
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            password_hash=doc.get('password_hash'),
        )

    def create(self, name: str, email: str, avatar: str, password_hash: str) -> User:
        """Insert a new user. The unique email index backs the duplicate check."""
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': uuid.uuid4().hex,
            'name': name,
            'email': email,
            'avatar': avatar,
            'password_hash': password_hash,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise EmailAlreadyExistsError()
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise

        logger.info("User created", extra={"userId": user_doc['_id'], "email": email})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str) -> User | None:
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise
        return self._to_domain(doc) if doc else None

    def get_by_id(self, user_id: str) -> User | None:
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise
        return self._to_domain(doc) if doc else None

    def get_by_ids(self, user_ids: list[str]) -> dict[str, User]:
        if not user_ids:
            return {}
        try:
            docs = self.collection.find({'_id': {'$in': list(set(user_ids))}})
            return {doc['_id']: self._to_domain(doc) for doc in docs}
        except PyMongoError as e:
            logger.error("Failed to get users by ID", extra={"count": len(user_ids), "error": str(e)})
            raise

    def delete(self, user_id: str) -> bool:
        try:
            result = self.collection.delete_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to delete user", extra={"userId": user_id, "error": str(e)})
            raise
        if result.deleted_count == 0:
            logger.warning("User not found for deletion", extra={"userId": user_id})
            return False
        logger.info("User deleted", extra={"userId": user_id})
        return True
