import re
from collections import Counter
from typing import AbstractSet, List, Optional

from . import config
from .data_models import Vocabulary

_non_alnum_re = re.compile(r"[^a-z0-9\s]")
_ws_re = re.compile(r"\s+")


def normalize_space(s: str) -> str:
    return _ws_re.sub(" ", s).strip()


def normalize_text(
    text: str,
    stopwords: AbstractSet[str],
    generic_terms: AbstractSet[str],
) -> List[str]:
    """
    Lowercase, replace everything outside [a-z0-9] and whitespace with a space, split on
    whitespace, and keep tokens longer than 2 characters that are not stopwords, generic
    terms, or pure numbers.
    """
    if not text:
        return []
    text = _non_alnum_re.sub(" ", text.lower())
    out: List[str] = []
    for tok in text.split():
        if len(tok) < config.DEFAULT_MIN_TOKEN_LEN:
            continue
        if tok in stopwords or tok in generic_terms:
            continue
        if tok.isdigit():
            continue
        out.append(tok)
    return out


def generate_ngrams(tokens: List[str], n: int) -> List[str]:
    """
    Contiguous n-token windows, left to right, sliding by one.
    Windows that repeat a token (e.g. "service service quality") are skipped.
    """
    if n < 1 or len(tokens) < n:
        return []
    grams: List[str] = []
    for i in range(0, len(tokens) - n + 1):
        window = tokens[i : i + n]
        if len(set(window)) != n:
            continue
        grams.append(" ".join(window))
    return grams


def build_phrase_counts(tokens: List[str]) -> Counter:
    """
    Weighted occurrence counts for one document: every token counts once and every
    n-gram match counts config.NGRAM_OCCURRENCE_WEIGHTS[n] times.

    Keys are inserted in encounter order (tokens, then bigrams, trigrams, ...), which is
    the tie order used when ranking.
    """
    counts = Counter()
    for tok in tokens:
        counts[tok] += config.NGRAM_OCCURRENCE_WEIGHTS[1]
    for n in range(config.DEFAULT_MIN_NGRAM, config.DEFAULT_MAX_NGRAM + 1):
        weight = config.NGRAM_OCCURRENCE_WEIGHTS[n]
        for gram in generate_ngrams(tokens, n):
            counts[gram] += weight
    return counts


def extract_document_phrases(text: str, vocabulary: Optional[Vocabulary] = None) -> Counter:
    vocab = vocabulary or Vocabulary()
    tokens = normalize_text(text, vocab.stopwords, vocab.generic_terms)
    return build_phrase_counts(tokens)


def capitalize_phrase(phrase: str) -> str:
    """Uppercase the first letter of every space-separated word; leave the rest as is."""
    return " ".join(w[:1].upper() + w[1:] for w in phrase.split(" "))
