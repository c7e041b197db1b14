from fastapi import HTTPException

from adapter.external.registry import build_source_adapters, create_http_client, load_source_configs
from adapter.mongodb.connection import get_database
from adapter.mongodb.word_repository import MongoWordRepository
from port.word_repository import WordRepository
from services.dictionary_service import DictionaryResolver


def get_word_repo() -> WordRepository:
    """Get the word repository, raising 503 if MongoDB is unavailable."""
    db = get_database()
    if db is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return MongoWordRepository(db)


async def get_dictionary_resolver():
    """Resolver over the configured sources, sharing one HTTP client per request."""
    async with create_http_client() as client:
        yield DictionaryResolver(build_source_adapters(load_source_configs(), client))
