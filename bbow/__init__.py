"""Big Bag Of Words: word -> occurrence count from free-form text."""

from .tokenizer import Tokenizer
from .wordbag import WordBag, WordsView

__all__ = ["Tokenizer", "WordBag", "WordsView"]
