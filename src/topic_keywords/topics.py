"""
Functions for turning the keyword pool into content-topic records and summaries.

Secondary keywords are picked by rank position (the next entries of the pool,
wrapping around), not by any further scoring.
"""
from typing import List

from . import config
from .constants import (
    COMPETITOR_INSIGHT,
    CONTENT_TYPE_BLOG_POST,
    CONTENT_TYPE_CASE_STUDY,
    CONTENT_TYPE_GUIDE,
    FALLBACK_DOMINANT_TERM,
    FALLBACK_SECONDARY_KEYWORD,
    FALLBACK_TERTIARY_KEYWORD,
    GUIDE_OVERRIDE_TEMPLATE,
    TITLE_TEMPLATES,
    TRAFFIC_HIGH,
    TRAFFIC_MEDIUM,
    TRAFFIC_VERY_HIGH,
)
from .data_models import DomainSummary, ScoredPhrase, TopicRecord
from .text_utils import capitalize_phrase


def content_type_for_index(i: int) -> str:
    if i % 3 == 0:
        return CONTENT_TYPE_GUIDE
    if i % 2 == 0:
        return CONTENT_TYPE_CASE_STUDY
    return CONTENT_TYPE_BLOG_POST


def projected_traffic(score: float) -> str:
    if score > config.TRAFFIC_VERY_HIGH_SCORE:
        return TRAFFIC_VERY_HIGH
    if score > config.TRAFFIC_HIGH_SCORE:
        return TRAFFIC_HIGH
    return TRAFFIC_MEDIUM


def render_title(phrase: str, i: int) -> str:
    """
    Fill the i-th template (cycling) with the capitalized phrase. A phrase that already
    says "guide" is not put into a "Guide" title; it gets the "Mastering" pattern instead.
    """
    formatted = capitalize_phrase(phrase)
    title = TITLE_TEMPLATES[i % len(TITLE_TEMPLATES)].replace("{kw}", formatted)
    if "guide" in phrase and "Guide" in title:
        title = GUIDE_OVERRIDE_TEMPLATE.replace("{kw}", formatted)
    return title


def _phrase_at(pool: List[ScoredPhrase], index: int, fallback: str) -> str:
    if not pool:
        return fallback
    return pool[index % len(pool)].phrase or fallback


def synthesize_topics(pool: List[ScoredPhrase], topic_count: int) -> List[TopicRecord]:
    if not pool:
        return []
    topics: List[TopicRecord] = []
    for i in range(topic_count):
        main = pool[i % len(pool)]
        formatted = capitalize_phrase(main.phrase)
        secondary = _phrase_at(pool, i + 1, FALLBACK_SECONDARY_KEYWORD)
        tertiary = _phrase_at(pool, i + 2, FALLBACK_TERTIARY_KEYWORD)

        topics.append(
            TopicRecord(
                title=render_title(main.phrase, i),
                description=(
                    f'Targeting the high-intent segment of "{formatted}". '
                    f"This piece addresses user needs regarding {secondary} and positions "
                    f"the brand as a specific authority in this vertical."
                ),
                primary_keyword=formatted,
                secondary_keywords=[secondary, tertiary],
                content_type=content_type_for_index(i),
                projected_traffic=projected_traffic(main.score),
            )
        )
    return topics


def build_domain_summary(pool: List[ScoredPhrase]) -> DomainSummary:
    dominant = pool[0].phrase if pool else FALLBACK_DOMINANT_TERM
    audience = pool[1].phrase if len(pool) > 1 else dominant
    return DomainSummary(
        niche=f"Identified Focus: {capitalize_phrase(dominant)}",
        target_audience=f"Professionals and consumers actively researching {audience}.",
        competitor_insight=COMPETITOR_INSIGHT,
    )


def build_strategic_summary(pool: List[ScoredPhrase]) -> str:
    dominant = pool[0].phrase if pool else FALLBACK_DOMINANT_TERM
    return (
        f'Analysis detected high specificity in "{capitalize_phrase(dominant)}". '
        "Strategy pivots to long-tail, high-intent keywords to capture qualified traffic "
        "rather than broad volume."
    )
