"""
WordBag: the "big bag of words"

A text is reduced to its words, each with a count of occurrences.

Words are whitespace separated and made of one or more alphabetic code
points (Unicode Alphabetic) with no punctuation inside: leading and
trailing punctuation is removed, and words with uppercase letters are
stored in lowercase. E.g.

    "It ain't over untïl it ain't, over."

holds "it" x2, "over" x2, "untïl" x1.

A word that is already lowercase is stored as the stripped fragment
itself; only words that need folding get a fresh lowercased copy.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterator, List, Optional, Tuple
import logging

import pandas as pd

from .tokenizer import Tokenizer

log = logging.getLogger(__name__)


class WordsView:
    """Sorted, read-only view over the distinct words of a bag (restartable)."""

    def __init__(self, bag: "WordBag") -> None:
        self._bag = bag

    def __iter__(self) -> Iterator[str]:
        return iter(self._bag._sorted_words())

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._bag._sorted_words())

    def __len__(self) -> int:
        return len(self._bag._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._bag._counts

    def __repr__(self) -> str:
        return f"WordsView({list(self)!r})"


class WordBag:
    """
    word -> occurrence count, built up from one or more texts.

    Quick start:
        bag = WordBag().extend_from_text("Hello world.").extend_from_text("Hello!")
        bag.match_count("hello")   # 2
        list(bag.words())          # ['hello', 'world']
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None) -> None:
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self._counts: Counter[str] = Counter()
        self._sorted: Optional[List[str]] = None

    @classmethod
    def new(cls) -> "WordBag":
        """Make a new empty bag."""
        return cls()

    # ---- building ----
    def extend_from_text(self, text: str) -> "WordBag":
        """
        Parse `text` and add every valid word in it to this bag.

        Builder method: returns self, so calls chain across texts.

            bag = WordBag.new().extend_from_text("Hello world.")
            bag.len()                  # 2
            bag.match_count("hello")   # 1
        """
        counts = self._counts
        n_word = 0
        for word in self.tokenizer.iter_words(text):
            counts[word] += 1
            n_word += 1
        if n_word:
            self._sorted = None
        log.debug("extend_from_text: %d words, %d unique total", n_word, len(counts))
        return self

    def update(self, other: "WordBag") -> "WordBag":
        """Fold another bag's counts into this one (e.g. per-worker bags)."""
        if other._counts:
            self._counts.update(other._counts)
            self._sorted = None
        return self

    def __add__(self, other: "WordBag") -> "WordBag":
        if not isinstance(other, WordBag):
            return NotImplemented
        merged = WordBag(tokenizer=self.tokenizer)
        return merged.update(self).update(other)

    # ---- queries ----
    def match_count(self, keyword: str) -> int:
        """
        Number of occurrences of `keyword` in this bag.

        The keyword is not normalized: it should be lowercase and free of
        punctuation, as stored words are. Anything else simply gives 0.

            WordBag().extend_from_text("b b b-banana b").match_count("b")   # 3
        """
        if not self.tokenizer.is_word(keyword):
            return 0
        return self._counts.get(keyword, 0)

    def words(self) -> WordsView:
        return WordsView(self)

    def count(self) -> int:
        """All occurrences, repeats included."""
        return sum(self._counts.values())

    def len(self) -> int:
        """Distinct words, repeats not counted."""
        return len(self._counts)

    def is_empty(self) -> bool:
        return not self._counts

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        ranked = sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked if n is None else ranked[:n]

    def items(self) -> List[Tuple[str, int]]:
        return [(w, self._counts[w]) for w in self._sorted_words()]

    def as_dict(self) -> Dict[str, int]:
        return dict(self.items())

    def to_frame(self):
        """pandas DataFrame with `word` and `count` columns, sorted by word."""
        return pd.DataFrame(self.items(), columns=["word", "count"])

    # ---- dunder helpers ----
    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted_words())

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordBag):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"WordBag(unique={self.len()}, total={self.count()})"

    def _sorted_words(self) -> List[str]:
        if self._sorted is None:
            self._sorted = sorted(self._counts)
        return self._sorted
