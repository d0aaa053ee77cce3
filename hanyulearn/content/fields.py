"""
Field fallback chains for lesson payloads.

Upstream lesson data has used more than one key for the same field over
time (e.g. "chinese" and "sentence"). Every logical field lists its
candidate keys here, in the order they are tried. A candidate counts only
when its value is truthy; otherwise the next one is tried, then the default.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class FieldChain:
    name: str
    candidates: tuple[str, ...]
    default: Any = None

    def resolve(self, data: Mapping[str, Any]) -> Any:
        """Return the first truthy candidate value, else the default."""
        for key in self.candidates:
            value = data.get(key)
            if value:
                return value
        return self.default


# Vocabulary entries
VOCAB_WORD = FieldChain("word", ("word", "character"), "你好")
VOCAB_PINYIN = FieldChain("pinyin", ("pinyin",), "nǐ hǎo")
VOCAB_MEANING = FieldChain("meaning", ("meaning", "translation"), "Xin chào")

# Example sentences (vocabulary[].examples[] and grammar[])
EXAMPLE_TEXT = FieldChain("text", ("chinese", "sentence"), "")
EXAMPLE_PINYIN = FieldChain("pinyin", ("pinyin", "sentence_pinyin"), "")
EXAMPLE_TRANSLATION = FieldChain("translation", ("vietnamese", "translation"), "")

# Grouping key for flat grammar lists
GRAMMAR_GROUP = FieldChain("group", ("grammar_point", "keyword"))
