"""
Functions for TF-IDF scoring of document phrases across a corpus.
"""
import math
from collections import Counter
from typing import AbstractSet, Dict, List, Sequence

from . import config
from .constants import ACTION_MODIFIERS
from .data_models import ScoredPhrase


def augmented_term_frequencies(counts: Counter) -> Dict[str, float]:
    """
    tf(t, d) = 0.5 + 0.5 * count(t, d) / maxFreq, with maxFreq floored at 1.
    Keeps tf in [0.5, 1.0] so very frequent terms do not dominate a document.
    """
    max_freq = max(max(counts.values(), default=0), 1)
    return {term: 0.5 + (0.5 * c) / max_freq for term, c in counts.items()}


def build_docfreq(documents: Sequence[Counter]) -> Counter:
    """Number of documents each term appears in at least once."""
    docfreq = Counter()
    for doc in documents:
        for term in doc.keys():
            docfreq[term] += 1
    return docfreq


def inverse_document_frequency(df: int, total_docs: int) -> float:
    """
    idf = ln(N / (1 + df)) + 1
    Terms found in more than UBIQUITY_DF_RATIO of the documents are treated as
    boilerplate and damped by UBIQUITY_IDF_PENALTY once the corpus has 3+ documents.
    """
    idf = math.log(total_docs / (1.0 + df)) + 1.0
    if total_docs >= config.UBIQUITY_MIN_DOCS and df > total_docs * config.UBIQUITY_DF_RATIO:
        idf *= config.UBIQUITY_IDF_PENALTY
    return idf


def specificity_multiplier(n_words: int) -> float:
    longest = max(config.SPECIFICITY_MULTIPLIERS)
    return config.SPECIFICITY_MULTIPLIERS[min(max(n_words, 1), longest)]


def has_action_modifier(term: str, action_modifiers: AbstractSet[str] = ACTION_MODIFIERS) -> bool:
    return any(w in action_modifiers for w in term.split(" "))


def score_corpus(
    documents: Sequence[Counter],
    action_modifiers: AbstractSet[str] = ACTION_MODIFIERS,
) -> List[ScoredPhrase]:
    """
    Score every distinct phrase of the corpus.

    For each document the augmented tf of a phrase is multiplied by its idf, its
    length specificity multiplier and (if it contains an action word) the action bonus.
    Contributions are summed across documents. Document frequencies need the whole
    corpus, so nothing is scored until every document has been counted.

    Returns phrases sorted by score descending; ties keep first-encounter order.
    """
    docfreq = build_docfreq(documents)
    total_docs = len(documents)
    tf_maps = [augmented_term_frequencies(doc) for doc in documents]

    idf_cache: Dict[str, float] = {}
    scores: Dict[str, float] = {}
    for tf_map in tf_maps:
        for term, tf in tf_map.items():
            idf = idf_cache.get(term)
            if idf is None:
                idf = inverse_document_frequency(docfreq[term], total_docs)
                idf_cache[term] = idf

            tfidf = tf * idf
            tfidf *= specificity_multiplier(term.count(" ") + 1)
            if has_action_modifier(term, action_modifiers):
                tfidf *= config.ACTION_MODIFIER_BONUS

            scores[term] = scores.get(term, 0.0) + tfidf

    ranked = [ScoredPhrase(term, score) for term, score in scores.items()]
    ranked.sort(key=lambda p: p.score, reverse=True)
    return ranked
