import logging
import math
from collections import defaultdict

from .tokenizer import Tokenizer

log = logging.getLogger(__name__)

WEIGHTINGS = ("ltc", "ntc")


class BagRanker:
    def __init__(self, bags, tokenizer=None):
        """
        bags: {doc name: WordBag}, e.g. from corpus.bags_from_folder()
        """
        if not bags:
            raise ValueError("BagRanker needs at least one document bag")
        self.bags = dict(bags)
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self.N = len(self.bags)

        self.df = defaultdict(int)
        for bag in self.bags.values():
            for word in bag.words():
                self.df[word] += 1

        # lnc document norms
        self.doc_norms = {}
        for name, bag in self.bags.items():
            self.doc_norms[name] = math.sqrt(
                sum((1 + math.log(tf)) ** 2 for _, tf in bag.items())
            )
        log.debug("BagRanker: %d docs, %d distinct words", self.N, len(self.df))

    def document_frequency(self, word):
        return self.df.get(word, 0)

    def idf(self, word):
        df = self.document_frequency(word)
        if df == 0:
            return 0.0
        return math.log(self.N / df)

    # -----------------------------
    # SMART ltc.lnc / ntc.lnc
    # -----------------------------
    def rank(self, query, top_k=10, weighting="ltc"):
        if weighting not in WEIGHTINGS:
            raise ValueError(f"unknown weighting {weighting!r}, expected one of {WEIGHTINGS}")
        tokens = self.tokenizer.tokenize(query)
        if not tokens:
            return []

        query_tf = defaultdict(int)
        for t in tokens:
            query_tf[t] += 1

        # Query weighting
        query_weights = {}
        for term, tf in query_tf.items():
            idf = self.idf(term)
            if idf == 0.0:
                continue
            if weighting == "ltc":
                query_weights[term] = (1 + math.log(tf)) * idf
            else:
                query_weights[term] = tf * idf

        norm_q = math.sqrt(sum(w ** 2 for w in query_weights.values()))
        if norm_q == 0.0:
            return []

        scores = defaultdict(float)
        for term, w_q in query_weights.items():
            w_q /= norm_q
            for name, bag in self.bags.items():
                tf = bag.match_count(term)
                if tf:
                    scores[name] += w_q * (1 + math.log(tf)) / self.doc_norms[name]

        ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:top_k]
