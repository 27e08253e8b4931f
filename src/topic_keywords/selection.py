"""
Functions for building the keyword pool and keyword chart records from ranked phrases.
"""
import math
import random
from typing import List, Optional

from . import config
from .constants import (
    FALLBACK_POOL_TERM,
    INTENT_INFORMATIONAL,
    INTENT_TRANSACTIONAL,
    TRANSACTIONAL_CUES,
)
from .data_models import KeywordRecord, ScoredPhrase
from .text_utils import capitalize_phrase


def build_keyword_pool(ranked: List[ScoredPhrase]) -> List[ScoredPhrase]:
    """
    Prefer multi-word phrases longer than 5 characters. With fewer than
    POOL_MIN_PHRASES of those, single words are appended after them (each group keeps
    score order). An empty pool gets one synthetic placeholder so topic synthesis
    always has something to work with.
    """
    phrases = [p for p in ranked if " " in p.phrase and len(p.phrase) >= config.POOL_MIN_PHRASE_CHARS]
    if len(phrases) >= config.POOL_MIN_PHRASES:
        pool = list(phrases)
    else:
        single_words = [p for p in ranked if " " not in p.phrase]
        pool = phrases + single_words

    if not pool:
        pool.append(ScoredPhrase(FALLBACK_POOL_TERM, config.FALLBACK_POOL_SCORE))
    return pool


def keyword_intent(phrase: str) -> str:
    if any(cue in phrase for cue in TRANSACTIONAL_CUES):
        return INTENT_TRANSACTIONAL
    return INTENT_INFORMATIONAL


def build_keyword_records(
    pool: List[ScoredPhrase],
    limit: int = config.DEFAULT_KEYWORD_LIMIT,
    rng: Optional[random.Random] = None,
) -> List[KeywordRecord]:
    """
    Chart records for the top of the pool.
      volume     = floor(min(100, score * 30 + 40 + jitter)), jitter in [0, 20)
      difficulty = floor(30 + spread), spread in [0, 40)
    Without an rng, jitter and spread sit at their midpoints so the output is reproducible.
    """
    records: List[KeywordRecord] = []
    for p in pool[: max(0, limit)]:
        if rng is None:
            jitter = config.VOLUME_JITTER / 2.0
            spread = config.DIFFICULTY_SPREAD / 2.0
        else:
            jitter = rng.random() * config.VOLUME_JITTER
            spread = rng.random() * config.DIFFICULTY_SPREAD
        volume = math.floor(min(100.0, p.score * config.VOLUME_SCORE_SCALE + config.VOLUME_BASE + jitter))
        difficulty = math.floor(config.DIFFICULTY_BASE + spread)
        records.append(
            KeywordRecord(
                keyword=capitalize_phrase(p.phrase),
                volume=int(volume),
                difficulty=int(difficulty),
                intent=keyword_intent(p.phrase),
                relevance_score=p.score,
            )
        )
    return records
