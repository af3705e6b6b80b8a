"""MongoDB implementation of ProfileRepository."""

import uuid
from dataclasses import asdict
from datetime import date, datetime, time, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import PROFILES_COLLECTION_NAME
from domain.model.profile import (
    Education, Experience, Profile, ProfileUpdate, SocialLinks,
)

logger = getLogger(__name__)


# BSON has no date-only type: store dates as midnight UTC.

def _date_to_bson(value: date | None) -> datetime | None:
    if value is None:
        return None
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _date_from_bson(value) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    return value


class MongoProfileRepository:
    def __init__(self, db: Database):
        self.collection = db[PROFILES_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for profiles collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('user_id', 1)], 'idx_profiles_user_id', unique=True)
            return True
        except Exception as e:
            logger.error("Failed to create profiles indexes", extra={"error": str(e)})
            return False

    # ── mapping ──────────────────────────────────────────────

    def _entry_to_doc(self, entry: Experience | Education) -> dict:
        doc = asdict(entry)
        doc['from_date'] = _date_to_bson(entry.from_date)
        doc['to_date'] = _date_to_bson(entry.to_date)
        return doc

    def _to_doc(self, profile: Profile) -> dict:
        return {
            '_id': profile.id,
            'user_id': profile.user_id,
            'status': profile.status,
            'skills': profile.skills,
            'company': profile.company,
            'website': profile.website,
            'location': profile.location,
            'bio': profile.bio,
            'github_username': profile.github_username,
            'social': profile.social.as_dict(),
            'experience': [self._entry_to_doc(e) for e in profile.experience],
            'education': [self._entry_to_doc(e) for e in profile.education],
            'created_at': profile.created_at,
            'updated_at': profile.updated_at,
        }

    def _to_domain(self, doc: dict) -> Profile:
        """Convert MongoDB document to Profile domain model."""
        experience = []
        for rec in doc.get('experience', []):
            experience.append(Experience(**{
                **rec,
                'from_date': _date_from_bson(rec['from_date']),
                'to_date': _date_from_bson(rec.get('to_date')),
            }))

        education = []
        for rec in doc.get('education', []):
            education.append(Education(**{
                **rec,
                'from_date': _date_from_bson(rec['from_date']),
                'to_date': _date_from_bson(rec.get('to_date')),
            }))

        return Profile(
            id=doc['_id'],
            user_id=doc['user_id'],
            status=doc['status'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            skills=doc.get('skills', []),
            company=doc.get('company'),
            website=doc.get('website'),
            location=doc.get('location'),
            bio=doc.get('bio'),
            github_username=doc.get('github_username'),
            social=SocialLinks(**doc.get('social', {})),
            experience=experience,
            education=education,
        )

    # ── write operations ─────────────────────────────────────

    def upsert(self, user_id: str, update: ProfileUpdate) -> Profile:
        """Atomic $set of the supplied fields, creating the document if absent."""
        fields = update.supplied_fields()
        fields['social'] = fields['social'].as_dict()
        now = datetime.now(timezone.utc)

        try:
            doc = self.collection.find_one_and_update(
                {'user_id': user_id},
                {
                    '$set': {**fields, 'updated_at': now},
                    '$setOnInsert': {
                        '_id': uuid.uuid4().hex,
                        'created_at': now,
                        'experience': [],
                        'education': [],
                    },
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Failed to upsert profile", extra={"userId": user_id, "error": str(e)})
            raise

        logger.info("Profile upserted", extra={"userId": user_id, "profileId": doc['_id']})
        return self._to_domain(doc)

    def save(self, profile: Profile) -> None:
        """Whole-document replace. Not guarded against concurrent writers."""
        try:
            self.collection.replace_one({'_id': profile.id}, self._to_doc(profile), upsert=True)
        except PyMongoError as e:
            logger.error("Failed to save profile", extra={"profileId": profile.id, "error": str(e)})
            raise
        logger.debug("Profile saved", extra={"profileId": profile.id})

    def delete_by_user(self, user_id: str) -> bool:
        try:
            result = self.collection.delete_one({'user_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to delete profile", extra={"userId": user_id, "error": str(e)})
            raise
        return result.deleted_count > 0

    # ── read operations ──────────────────────────────────────

    def get_by_user(self, user_id: str) -> Profile | None:
        try:
            doc = self.collection.find_one({'user_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get profile", extra={"userId": user_id, "error": str(e)})
            raise
        return self._to_domain(doc) if doc else None

    def find_all(self) -> list[Profile]:
        try:
            return [self._to_domain(doc) for doc in self.collection.find({})]
        except PyMongoError as e:
            logger.error("Failed to list profiles", extra={"error": str(e)})
            raise
