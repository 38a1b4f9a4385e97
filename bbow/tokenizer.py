from __future__ import annotations
from typing import Iterator, List
import logging

import regex

log = logging.getLogger(__name__)

# Unicode White_Space / Alphabetic properties (Alphabetic also covers
# combining vowel signs such as Devanagari matras)
_WS_RE = regex.compile(r"\p{White_Space}+")
_ALPHA_RE = regex.compile(r"\p{Alphabetic}")
_WORD_RE = regex.compile(r"\p{Alphabetic}+")


def _is_alpha(ch: str) -> bool:
    return _ALPHA_RE.match(ch) is not None


class Tokenizer:
    """
    Whitespace word splitter for the bag of words 💬

    Rules:
    - Fragments are separated by Unicode White_Space
    - Leading/trailing non-alphabetic code points are stripped from each fragment
    - A fragment with a non-alphabetic code point left inside is dropped entirely
      ("b-banana" -> nothing, not "b" + "banana")
    - Words are lowercased, but only copied when something actually changes

    Quick start:
        tk = Tokenizer()
        tokens = tk("It ain't over untïl it ain't, over.")
        # ['it', 'over', 'untïl', 'it', 'over']

    Notes:
    - No stemming, no stopwords, no CJK segmentation.
    - `__call__` -> `tokenize` shortcut.
    """

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return "Tokenizer(split=White_Space, strip=non-Alphabetic, fold=lower)"

    # ---- rules ----
    @staticmethod
    def fragments(text: str) -> Iterator[str]:
        return (f for f in _WS_RE.split(text) if f)

    @staticmethod
    def strip(fragment: str) -> str:
        i, j = 0, len(fragment)
        while i < j and not _is_alpha(fragment[i]):
            i += 1
        while j > i and not _is_alpha(fragment[j - 1]):
            j -= 1
        if i == 0 and j == len(fragment):
            return fragment
        return fragment[i:j]

    @staticmethod
    def is_word(token: str) -> bool:
        """Non-empty and Alphabetic code points only."""
        return _WORD_RE.fullmatch(token) is not None

    @staticmethod
    def needs_folding(word: str) -> bool:
        return any(ch.lower() != ch for ch in word)

    def normalize(self, word: str) -> str:
        if not self.needs_folding(word):
            return word
        folded = word.lower()
        if self.is_word(folded):
            return folded
        # a lowercase mapping brought in a non-alphabetic mark
        # (U+0130 -> "i" + U+0307): keep only its alphabetic part
        out = []
        for ch in word:
            low = "".join(c for c in ch.lower() if _is_alpha(c))
            out.append(low or ch)
        return "".join(out)

    # ---- public api ----
    def iter_words(self, text: str) -> Iterator[str]:
        for fragment in self.fragments(text):
            token = self.strip(fragment)
            if self.is_word(token):
                yield self.normalize(token)

    def tokenize(self, text: str) -> List[str]:
        if not text or not isinstance(text, str):
            return []
        return list(self.iter_words(text))

    def tokenize_batch(self, texts: List[str]) -> List[List[str]]:
        """
        One token list per text; anything that is not a str gives [].
        """
        out: List[List[str]] = []
        for t in texts:
            if not isinstance(t, str):
                log.debug("tokenize_batch: skipping non-str %r", type(t).__name__)
                out.append([])
                continue
            out.append(self.tokenize(t))
        return out


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    tk = Tokenizer()
    s = "It ain't over untïl it ain't, over. Friends, Romans -- HeLLo world!"
    print(repr(tk))
    print(tk.tokenize(s))
