"""MongoDB implementation of WordRepository."""

from logging import getLogger

from pymongo import ReplaceOne
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import WORDS_COLLECTION_NAME
from domain.model.errors import PersistenceError
from domain.model.word import WordCategory, WordEntry

logger = getLogger(__name__)


class MongoWordRepository:
    def __init__(self, db: Database):
        self.collection = db[WORDS_COLLECTION_NAME]

    # ── indexes ────────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for the words collection."""
        try:
            self.collection.create_index([("position", 1)], name="idx_words_position")
            self.collection.create_index([("category", 1)], name="idx_words_category")
            self.collection.create_index(
                [("headword_key", 1), ("translation", 1)], name="idx_words_identity",
            )
            return True
        except PyMongoError as e:
            logger.error("Failed to create words indexes", extra={"error": str(e)})
            return False

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> WordEntry:
        return WordEntry(
            id=doc['_id'],
            headword=doc['headword'],
            translation=doc.get('translation', ''),
            category=WordCategory(doc['category']),
            added_at=doc['added_at'],
            scenario_id=doc.get('scenario_id'),
            phonetic_us=doc.get('phonetic_us', ''),
            phonetic_uk=doc.get('phonetic_uk', ''),
            context_sentence=doc.get('context_sentence', ''),
            context_sentence_translation=doc.get('context_sentence_translation', ''),
            mixed_sentence=doc.get('mixed_sentence', ''),
            dictionary_example=doc.get('dictionary_example', ''),
            dictionary_example_translation=doc.get('dictionary_example_translation', ''),
            inflections=doc.get('inflections') or [],
            source_url=doc.get('source_url'),
        )

    def _to_document(self, entry: WordEntry, position: int) -> dict:
        return {
            '_id': entry.id,
            'position': position,
            'headword': entry.headword,
            'headword_key': entry.key[0],
            'translation': entry.translation,
            'category': entry.category.value,
            'added_at': entry.added_at,
            'scenario_id': entry.scenario_id,
            'phonetic_us': entry.phonetic_us,
            'phonetic_uk': entry.phonetic_uk,
            'context_sentence': entry.context_sentence,
            'context_sentence_translation': entry.context_sentence_translation,
            'mixed_sentence': entry.mixed_sentence,
            'dictionary_example': entry.dictionary_example,
            'dictionary_example_translation': entry.dictionary_example_translation,
            'inflections': list(entry.inflections),
            'source_url': entry.source_url,
        }

    # ── collection state ──────────────────────────────────────

    def load(self) -> list[WordEntry]:
        """Raises PersistenceError when the read fails."""
        try:
            cursor = self.collection.find({}).sort('position', 1)
            return [self._to_domain(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error("Failed to load words", extra={"error": str(e)})
            raise PersistenceError("Failed to load word collection") from e

    def replace(self, entries: list[WordEntry]) -> bool:
        """Upsert every entry and drop the ones no longer present."""
        try:
            ids = [entry.id for entry in entries]
            if entries:
                self.collection.bulk_write([
                    ReplaceOne({'_id': entry.id}, self._to_document(entry, i), upsert=True)
                    for i, entry in enumerate(entries)
                ], ordered=False)
            deleted = self.collection.delete_many({'_id': {'$nin': ids}})
            logger.info("Word collection saved", extra={
                "count": len(entries),
                "deleted": deleted.deleted_count,
            })
            return True
        except PyMongoError as e:
            logger.error("Failed to save word collection", extra={"error": str(e)})
            return False
