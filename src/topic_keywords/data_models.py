"""
Dataclasses for keyword ranking and topic synthesis.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List

from .constants import ACTION_MODIFIERS, GENERIC_TERMS, STOPWORDS


@dataclass(frozen=True)
class Vocabulary:
    stopwords: FrozenSet[str] = STOPWORDS
    generic_terms: FrozenSet[str] = GENERIC_TERMS
    action_modifiers: FrozenSet[str] = ACTION_MODIFIERS

    def with_ignore_terms(self, terms: Iterable[str]) -> "Vocabulary":
        """
        Return a copy whose generic terms also block the given ignore terms (lowercased).
        The base sets are left untouched.
        """
        extra = {t.strip().lower() for t in (terms or []) if t and t.strip()}
        if not extra:
            return self
        return Vocabulary(
            stopwords=self.stopwords,
            generic_terms=self.generic_terms | extra,
            action_modifiers=self.action_modifiers,
        )


@dataclass
class ScoredPhrase:
    phrase: str
    score: float

    @property
    def n_words(self) -> int:
        return self.phrase.count(" ") + 1

    def to_dict(self) -> dict:
        return {"term": self.phrase, "score": self.score}


@dataclass
class KeywordRecord:
    keyword: str
    volume: int
    difficulty: int
    intent: str
    relevance_score: float

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "volume": self.volume,
            "difficulty": self.difficulty,
            "intent": self.intent,
            "relevance_score": self.relevance_score,
        }


@dataclass
class TopicRecord:
    title: str
    description: str
    primary_keyword: str
    secondary_keywords: List[str]
    content_type: str
    projected_traffic: str

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "primary_keyword": self.primary_keyword,
            "secondary_keywords": list(self.secondary_keywords),
            "content_type": self.content_type,
            "projected_traffic": self.projected_traffic,
        }


@dataclass
class DomainSummary:
    niche: str
    target_audience: str
    competitor_insight: str

    def to_dict(self) -> dict:
        return {
            "niche": self.niche,
            "target_audience": self.target_audience,
            "competitor_insights": self.competitor_insight,
        }


@dataclass
class AnalysisResult:
    keyword_pool: List[ScoredPhrase]
    topics: List[TopicRecord]
    domain_summary: DomainSummary
    strategic_summary: str
    keywords: List[KeywordRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "domain_analysis": self.domain_summary.to_dict(),
            "keyword_pool": [p.to_dict() for p in self.keyword_pool],
            "keywords": [k.to_dict() for k in self.keywords],
            "topics": [t.to_dict() for t in self.topics],
            "strategic_summary": self.strategic_summary,
        }
