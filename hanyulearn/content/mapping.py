"""
Map lesson payloads onto review collections.

Two collections come out of one lesson:
- vocabulary: one word per entry, the word itself as its only example
- grammar: words that carry example sentences, each sentence an example
"""

import logging
from typing import Any, Optional

from hanyulearn.schemas import InnerItem, LessonInfo, LessonPayload, OuterItem

from .fields import (
    EXAMPLE_PINYIN,
    EXAMPLE_TEXT,
    EXAMPLE_TRANSLATION,
    GRAMMAR_GROUP,
    VOCAB_MEANING,
    VOCAB_PINYIN,
    VOCAB_WORD,
)


logger = logging.getLogger(__name__)


def _source_id(value: Any) -> Optional[int]:
    """Upstream numeric id, or None when missing or not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    return None


def _outer_id(entry: dict, index: int) -> str:
    # falsy ids (missing, 0, "") fall back to the list position, prefixed so
    # they never equal a real upstream id
    entry_id = entry.get("id")
    return str(entry_id) if entry_id else f"idx_{index}"


def _example_item(example: dict, item_id: str) -> InnerItem:
    return InnerItem(
        id=item_id,
        source_id=_source_id(example.get("id")),
        text=EXAMPLE_TEXT.resolve(example),
        pinyin=EXAMPLE_PINYIN.resolve(example),
        translation=EXAMPLE_TRANSLATION.resolve(example),
        keyword=example.get("keyword"),
        keyword_pinyin=example.get("keyword_pinyin"),
        image_url=example.get("image_url"),
        audio_url=example.get("audio_url"),
    )


def vocabulary_collection(payload: LessonPayload) -> list[OuterItem]:
    """Flat vocabulary list: each word is its own single example."""
    result = []
    for index, entry in enumerate(payload.vocabulary or []):
        item_id = _outer_id(entry, index)
        source_id = _source_id(entry.get("id")) if entry.get("id") else index
        word = VOCAB_WORD.resolve(entry)
        pinyin = VOCAB_PINYIN.resolve(entry)
        meaning = VOCAB_MEANING.resolve(entry)
        card = InnerItem(
            id=item_id,
            source_id=source_id,
            text=word,
            pinyin=pinyin,
            translation=meaning,
            audio_url=entry.get("audio_url"),
        )
        result.append(OuterItem(
            id=item_id,
            source_id=source_id,
            word=word,
            pinyin=pinyin,
            meaning=meaning,
            examples=(card,),
        ))
    return result


def grammar_collection(payload: LessonPayload) -> list[OuterItem]:
    """
    Words with example sentences.

    Vocabulary entries without examples are left out. Examples without an
    upstream id get "{word id}_{position}", so the same content always yields
    the same ids. If no vocabulary entry has examples, the lesson's flat
    grammar list is grouped by grammar point instead.
    """
    result = []
    for index, entry in enumerate(payload.vocabulary or []):
        examples = entry.get("examples") or []
        if not examples:
            continue
        outer_id = _outer_id(entry, index)
        inner = tuple(
            _example_item(example, str(example.get("id") or f"{outer_id}_{pos}"))
            for pos, example in enumerate(examples)
        )
        result.append(OuterItem(
            id=outer_id,
            source_id=_source_id(entry.get("id")),
            word=VOCAB_WORD.resolve(entry),
            pinyin=VOCAB_PINYIN.resolve(entry),
            meaning=VOCAB_MEANING.resolve(entry),
            examples=inner,
        ))

    if not result and payload.grammar:
        logger.debug("No vocabulary examples in lesson, grouping grammar list")
        result = _group_grammar(payload)
    return result


def _group_grammar(payload: LessonPayload) -> list[OuterItem]:
    """Group flat grammar examples by grammar point, keeping first-seen order."""
    default_group = payload.title or "Ngữ pháp"
    groups: dict[str, list[dict]] = {}
    for example in payload.grammar or []:
        groups.setdefault(GRAMMAR_GROUP.resolve(example) or default_group, []).append(example)

    result = []
    for index, (name, examples) in enumerate(groups.items()):
        outer_id = f"grammar_{index}"
        first = examples[0]
        result.append(OuterItem(
            id=outer_id,
            word=name,
            pinyin=first.get("keyword_pinyin") or "",
            examples=tuple(
                _example_item(example, str(example.get("id") or f"{outer_id}_{pos}"))
                for pos, example in enumerate(examples)
            ),
        ))
    return result


def lesson_info(payload: LessonPayload, lesson_id: int, default_hsk_level: int = 1) -> LessonInfo:
    """Header metadata, falling back to the route's HSK level and a numbered title."""
    return LessonInfo(
        lesson_id=lesson_id,
        hsk_level=payload.hsk_level or default_hsk_level,
        title=payload.title or f"Bài {lesson_id}",
        lesson_number=lesson_id,
    )
