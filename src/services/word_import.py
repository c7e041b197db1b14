"""Import parsing and export for word lists.

Imports accept either a JSON array of ``{"text", "translation"}`` objects
or plain text with one word per line/comma, optionally followed by its
Chinese translation ("book 预订").
"""

import json
import re
from dataclasses import asdict

from domain.model.word import WordEntry
from services.word_service import WordCandidate

_TEXT_SEPARATORS = re.compile(r"[\n,，]+")
_WORD_WITH_TRANSLATION = re.compile(r"^([a-zA-Z0-9\-\s]+?)(?:\s+([\u4e00-\u9fa5].*))?$")


def parse_candidates(content: str) -> list[WordCandidate]:
    """Parse import content, trying JSON first and falling back to text."""
    try:
        data = json.loads(content)
    except ValueError:
        return _parse_text(content)

    if not isinstance(data, list):
        return []
    candidates = []
    for item in data:
        if not isinstance(item, dict) or not item.get("text"):
            continue
        translation = item.get("translation") or item.get("preferredTranslation")
        candidates.append(WordCandidate(
            text=str(item["text"]).strip(),
            translation=str(translation).strip() if translation else None,
        ))
    return candidates


def _parse_text(content: str) -> list[WordCandidate]:
    candidates = []
    for part in _TEXT_SEPARATORS.split(content):
        cleaned = part.strip()
        if not cleaned:
            continue
        match = _WORD_WITH_TRANSLATION.match(cleaned)
        if match:
            translation = match.group(2).strip() if match.group(2) else None
            candidates.append(WordCandidate(text=match.group(1).strip(), translation=translation))
        else:
            candidates.append(WordCandidate(text=cleaned))
    return candidates


def export_entries(entries: list[WordEntry]) -> list[dict]:
    """JSON-serialisable entry dicts, re-importable by parse_candidates."""
    exported = []
    for entry in entries:
        data = asdict(entry)
        data["category"] = entry.category.value
        data["text"] = entry.headword
        exported.append(data)
    return exported
