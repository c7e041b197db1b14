"""Pair dictionary senses with example sentences.

Sentences are matched by keyword: a sense's meanings are split into
keywords and the first unused sentence whose translation contains one of
them is taken. Each sentence is used at most once per resolution.
"""

import re

from domain.model.word import DictionarySense, ExampleSentence

_SEPARATORS = re.compile(r"[,，;；]")
_POS_PREFIX = re.compile(r"^[a-z]+\.\s*")
_PARENTHESES = re.compile(r"[（(].*?[)）]")
_BRACKETS = re.compile(r"[\[【].*?[\]】]")

# Single characters match inside unrelated compounds ("书" in "证书").
MIN_KEYWORD_LENGTH = 2

NO_SENTENCE = ExampleSentence()


def extract_keywords(meanings: list[str] | tuple[str, ...]) -> list[str]:
    """Split meanings into bare keywords, dropping POS prefixes and annotations."""
    keywords: list[str] = []
    for meaning in meanings:
        for part in _SEPARATORS.split(meaning):
            part = _POS_PREFIX.sub("", part)
            part = _PARENTHESES.sub("", part)
            part = _BRACKETS.sub("", part)
            part = part.strip()
            if part:
                keywords.append(part)
    return keywords


def pick_sentence(
    sentences: list[ExampleSentence] | tuple[ExampleSentence, ...],
    keywords: list[str],
    used: set[int],
) -> ExampleSentence:
    """Choose a sentence for one sense and mark it used.

    Falls back to the first sentence only while nothing has been used yet;
    later senses without a match get NO_SENTENCE.
    """
    if not sentences:
        return NO_SENTENCE

    for index, sentence in enumerate(sentences):
        if index in used or not sentence.translation:
            continue
        for keyword in keywords:
            if len(keyword) >= MIN_KEYWORD_LENGTH and keyword in sentence.translation:
                used.add(index)
                return sentence

    if not used:
        used.add(0)
        return sentences[0]

    return NO_SENTENCE


def assign_sentences(
    senses: list[DictionarySense] | tuple[DictionarySense, ...],
    sentences: list[ExampleSentence] | tuple[ExampleSentence, ...],
) -> list[ExampleSentence]:
    """Return one sentence (possibly NO_SENTENCE) per sense, in sense order."""
    used: set[int] = set()
    return [
        pick_sentence(sentences, extract_keywords(sense.meanings), used)
        for sense in senses
    ]
