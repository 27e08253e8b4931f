"""
Corpus analysis entry point: raw page texts in, ranked keyword pool and topic plan out.

Pipeline:
  text -> normalized tokens -> weighted phrase counts (per document)
       -> corpus TF-IDF -> keyword pool -> topics, keyword records, summaries

The computation is pure and synchronous. Sparse or empty input never fails: the pool
falls back to a single placeholder entry. Callers that need a hard error when nothing
was fetched must check their inputs before calling.
"""
from __future__ import annotations

import random
import sys
from typing import Iterable, Optional

from . import config
from .data_models import AnalysisResult, Vocabulary
from .scoring import score_corpus
from .selection import build_keyword_pool, build_keyword_records
from .text_utils import extract_document_phrases
from .topics import build_domain_summary, build_strategic_summary, synthesize_topics


def analyze_corpus(
    raw_texts: Iterable[Optional[str]],
    extra_ignore_terms: Iterable[str] = (),
    topic_count: int = config.DEFAULT_TOPIC_COUNT,
    vocabulary: Optional[Vocabulary] = None,
    keyword_limit: int = config.DEFAULT_KEYWORD_LIMIT,
    rng: Optional[random.Random] = None,
    verbose: bool = False,
) -> AnalysisResult:
    if isinstance(topic_count, bool) or not isinstance(topic_count, int):
        raise ValueError(f"topic_count must be an integer, got {topic_count!r}")
    if topic_count < 1:
        raise ValueError(f"topic_count must be >= 1, got {topic_count}")
    if raw_texts is None:
        raise ValueError("raw_texts must be a sequence of strings")

    vocab = (vocabulary or Vocabulary()).with_ignore_terms(extra_ignore_terms)

    documents = [extract_document_phrases(text or "", vocab) for text in raw_texts]
    ranked = score_corpus(documents, vocab.action_modifiers)
    if verbose:
        print(f"[analyze] docs={len(documents):,}, unique_terms={len(ranked):,}", file=sys.stderr)

    pool = build_keyword_pool(ranked)
    topics = synthesize_topics(pool, topic_count)
    if verbose:
        print(f"[analyze] pool={len(pool):,}, topics={len(topics):,}", file=sys.stderr)

    return AnalysisResult(
        keyword_pool=pool,
        topics=topics,
        domain_summary=build_domain_summary(pool),
        strategic_summary=build_strategic_summary(pool),
        keywords=build_keyword_records(pool, keyword_limit, rng),
    )
