"""Dictionary API routes.

Endpoints:
- GET /dictionary/lookup: Resolve a word into drafts without saving it
- GET /dictionary/sources: Configured dictionary sources in priority order
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_dictionary_resolver
from api.models import WordDraftResponse
from adapter.external.registry import load_source_configs
from domain.model.errors import ConfigurationError, ResolutionEmptyError
from services.dictionary_service import DictionaryResolver
from services.word_service import preview_word

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])


@router.get("/lookup", response_model=list[WordDraftResponse])
async def lookup_word(
    word: str = Query(..., min_length=1, max_length=100),
    hint: str | None = Query(None, max_length=200),
    resolver: DictionaryResolver = Depends(get_dictionary_resolver),
):
    """Preview what adding ``word`` would store."""
    try:
        drafts = await preview_word(resolver, word, hint)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ResolutionEmptyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [WordDraftResponse.from_domain(d) for d in drafts]


@router.get("/sources")
async def list_sources():
    """List dictionary sources, lowest priority number first."""
    configs = sorted(load_source_configs(), key=lambda c: c.priority)
    return [
        {
            "id": c.id,
            "name": c.name,
            "link": c.link,
            "is_enabled": c.is_enabled,
            "priority": c.priority,
            "description": c.description,
        }
        for c in configs
    ]
