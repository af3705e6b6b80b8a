"""MongoDB index management utilities.

Shared index creation with conflict resolution, used by each MongoXxxRepository.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create index, replacing an existing one whose name or key spec collides."""
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise
        return _resolve_conflict(collection, keys, name, **kwargs)


def _resolve_conflict(collection, keys: list, name: str, **kwargs) -> bool:
    """Drop the index that clashes by name or by keys, then recreate."""
    wanted = dict(keys)

    for idx_name, idx_info in collection.index_information().items():
        if idx_name == '_id_':
            continue

        same_name = idx_name == name
        same_keys = dict(idx_info.get('key', [])) == wanted

        if same_name != same_keys:
            logger.warning("Dropping conflicting index", extra={"index": idx_name})
            collection.drop_index(idx_name)
            collection.create_index(keys, name=name, **kwargs)
            logger.info("Recreated index", extra={"index": name})
            return True

    logger.error("Failed to resolve index conflict", extra={"index": name})
    return False


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for users, profiles and posts. Called at app startup."""
    from adapter.mongodb.post_repository import MongoPostRepository
    from adapter.mongodb.profile_repository import MongoProfileRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
        MongoProfileRepository(db).ensure_indexes(),
        MongoPostRepository(db).ensure_indexes(),
    ]
    return all(results)
