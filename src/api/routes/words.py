"""Word book API routes.

Endpoints:
- GET /words: Grouped word list for a tab
- POST /words: Look up a word and admit it into a list
- POST /words/import: Import a word list file
- GET /words/export: Export a tab as JSON
- POST /words/delete: Delete (or demote) selected words
- POST /words/move: Move selected words to another list
- PATCH /words/{id}: Edit a word's descriptive fields
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_dictionary_resolver, get_word_repo
from api.models import (
    AddWordRequest,
    DeleteWordsRequest,
    DeleteWordsResponse,
    ImportRequest,
    MoveWordsRequest,
    MoveWordsResponse,
    TallyResponse,
    UpdateWordRequest,
    WordBatchResponse,
    WordEntryResponse,
    WordGroupResponse,
)
from domain.model.errors import ConfigurationError, NotFoundError, PersistenceError, ValidationError
from domain.model.word import WordCategory
from port.word_repository import WordRepository
from services import word_service
from services.dictionary_service import DictionaryResolver
from services.word_import import export_entries, parse_candidates
from services.word_service import WordBatchReport, WordCandidate
from services.word_views import MergeStrategy, filter_entries, group_entries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


def _load(repo: WordRepository):
    try:
        return repo.load()
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))


def _batch_response(report: WordBatchReport) -> WordBatchResponse:
    return WordBatchResponse(
        tally=TallyResponse.from_domain(report.tally),
        added=[WordEntryResponse.from_domain(e) for e in report.added],
        promoted=[WordEntryResponse.from_domain(e) for e in report.promoted],
    )


async def _run_batch(
    resolver: DictionaryResolver,
    repo: WordRepository,
    candidates: list[WordCandidate],
    category: WordCategory,
    scenario_id: str | None,
) -> WordBatchResponse:
    try:
        report = await word_service.add_words(
            resolver, repo, candidates, category, scenario_id=scenario_id,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _batch_response(report)


@router.get("", response_model=list[WordGroupResponse])
async def list_words(
    tab: WordCategory | None = None,
    scenario_id: str | None = None,
    q: str | None = None,
    strategy: MergeStrategy = MergeStrategy.BY_WORD,
    repo: WordRepository = Depends(get_word_repo),
):
    """Get the words visible in a tab, merged by the chosen strategy."""
    visible = filter_entries(_load(repo), tab=tab, scenario_id=scenario_id, query=q)
    return [
        WordGroupResponse(
            headword=group[0].headword,
            count=len(group),
            entries=[WordEntryResponse.from_domain(e) for e in group],
        )
        for group in group_entries(visible, strategy)
    ]


@router.post("", response_model=WordBatchResponse)
async def add_word(
    request: AddWordRequest,
    resolver: DictionaryResolver = Depends(get_dictionary_resolver),
    repo: WordRepository = Depends(get_word_repo),
):
    """Look up a word and add it (every sense, or the one matching the hint)."""
    response = await _run_batch(
        resolver, repo,
        [WordCandidate(text=request.text, translation=request.translation)],
        request.category, request.scenario_id,
    )
    if response.tally.failed:
        raise HTTPException(status_code=404, detail=f"No dictionary data for '{request.text}'")
    return response


@router.post("/import", response_model=WordBatchResponse)
async def import_words(
    request: ImportRequest,
    resolver: DictionaryResolver = Depends(get_dictionary_resolver),
    repo: WordRepository = Depends(get_word_repo),
):
    """Import a JSON or plain-text word list into one list."""
    candidates = parse_candidates(request.content)
    category = request.category or WordCategory.WANT_TO_LEARN
    logger.info("Word import started", extra={
        "candidates": len(candidates), "category": category.value,
    })
    return await _run_batch(resolver, repo, candidates, category, request.scenario_id)


@router.get("/export")
async def export_words(
    tab: WordCategory | None = None,
    scenario_id: str | None = None,
    repo: WordRepository = Depends(get_word_repo),
):
    """Export the words visible in a tab."""
    return export_entries(filter_entries(_load(repo), tab=tab, scenario_id=scenario_id))


@router.post("/delete", response_model=DeleteWordsResponse)
async def delete_words(
    request: DeleteWordsRequest,
    repo: WordRepository = Depends(get_word_repo),
):
    """Delete selected words. From the learning list this only demotes them."""
    try:
        result = word_service.remove_words(repo, request.ids, request.tab)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return DeleteWordsResponse(removed=len(result.removed), demoted=len(result.demoted))


@router.post("/move", response_model=MoveWordsResponse)
async def move_words(
    request: MoveWordsRequest,
    repo: WordRepository = Depends(get_word_repo),
):
    """Move selected words to another list, bypassing admission rules."""
    try:
        moved = word_service.move_words(repo, request.ids, request.category)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return MoveWordsResponse(moved=moved)


@router.patch("/{entry_id}", response_model=WordEntryResponse)
async def update_word(
    entry_id: str,
    request: UpdateWordRequest,
    repo: WordRepository = Depends(get_word_repo),
):
    """Edit a word's descriptive fields."""
    changes = request.model_dump(exclude_unset=True)
    try:
        entry = word_service.update_word(repo, entry_id, changes)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Word not found")
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return WordEntryResponse.from_domain(entry)
