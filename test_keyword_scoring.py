#!/usr/bin/env python3
"""
Tests for tokenization, phrase building, TF-IDF scoring and keyword pool selection.
"""
import math
from collections import Counter

import pytest

from topic_keywords import config
from topic_keywords.constants import FALLBACK_POOL_TERM, GENERIC_TERMS, STOPWORDS
from topic_keywords.data_models import ScoredPhrase, Vocabulary
from topic_keywords.scoring import (
    augmented_term_frequencies,
    build_docfreq,
    has_action_modifier,
    inverse_document_frequency,
    score_corpus,
    specificity_multiplier,
)
from topic_keywords.selection import build_keyword_pool
from topic_keywords.text_utils import (
    build_phrase_counts,
    extract_document_phrases,
    generate_ngrams,
    normalize_text,
)


def test_normalize_text_filters_tokens():
    text = "The Luxury-Villa, 2024 amenities! OK? Our services & privacy 42nd"
    tokens = normalize_text(text, STOPWORDS, GENERIC_TERMS)
    # "the"/"our" are stopwords, "services"/"privacy" generic, "2024" numeric, "ok" too short
    assert tokens == ["luxury", "villa", "amenities", "42nd"]


def test_normalize_text_empty_input():
    assert normalize_text("", STOPWORDS, GENERIC_TERMS) == []
    assert normalize_text("   \n\t ", STOPWORDS, GENERIC_TERMS) == []


def test_generate_ngrams_sliding_windows():
    tokens = ["alpha", "bravo", "charlie", "delta"]
    assert generate_ngrams(tokens, 2) == ["alpha bravo", "bravo charlie", "charlie delta"]
    assert generate_ngrams(tokens, 4) == ["alpha bravo charlie delta"]
    assert generate_ngrams(tokens, 5) == []


def test_generate_ngrams_drops_repeated_words():
    tokens = ["engine", "engine", "tuning", "engine"]
    assert generate_ngrams(tokens, 2) == ["engine tuning", "tuning engine"]
    assert generate_ngrams(tokens, 3) == []


def test_generate_ngrams_keeps_recurring_phrases():
    tokens = ["solar", "panel", "solar", "panel"]
    assert generate_ngrams(tokens, 2) == ["solar panel", "panel solar", "solar panel"]


def test_build_phrase_counts_weights_longer_phrases():
    tokens = ["alpha", "bravo", "charlie", "delta", "echo"]
    counts = build_phrase_counts(tokens)
    assert counts["alpha"] == 1
    assert counts["alpha bravo"] == 2
    assert counts["alpha bravo charlie"] == 4
    assert counts["alpha bravo charlie delta"] == 5
    assert counts["alpha bravo charlie delta echo"] == 6
    # first-encounter order: tokens, then bigrams, trigrams, ...
    assert list(counts)[:6] == ["alpha", "bravo", "charlie", "delta", "echo", "alpha bravo"]


def test_build_phrase_counts_matches_literal_replication():
    tokens = ["solar", "panel", "install", "solar", "panel"]
    counts = build_phrase_counts(tokens)
    literal = list(tokens)
    for n, k in ((2, 2), (3, 4), (4, 5), (5, 6)):
        literal.extend(generate_ngrams(tokens, n) * k)
    assert counts == Counter(literal)


def test_augmented_term_frequencies():
    tf = augmented_term_frequencies(Counter({"a": 4, "b": 2, "c": 1}))
    assert tf["a"] == pytest.approx(1.0)
    assert tf["b"] == pytest.approx(0.75)
    assert tf["c"] == pytest.approx(0.625)
    assert augmented_term_frequencies(Counter()) == {}


def test_build_docfreq_ignores_in_document_repetition():
    docs = [Counter({"a": 5, "b": 1}), Counter({"a": 1}), Counter({"c": 3})]
    df = build_docfreq(docs)
    assert df == Counter({"a": 2, "b": 1, "c": 1})


def test_inverse_document_frequency_boilerplate_dampening():
    damped = inverse_document_frequency(4, 5)
    assert damped == pytest.approx((math.log(5 / 5) + 1.0) * 0.2)
    assert inverse_document_frequency(1, 5) == pytest.approx(math.log(5 / 2) + 1.0)
    # two-document corpora are never damped
    assert inverse_document_frequency(2, 2) == pytest.approx(math.log(2 / 3) + 1.0)
    # exactly 60% is not "more than" 60%
    assert inverse_document_frequency(3, 5) == pytest.approx(math.log(5 / 4) + 1.0)


def test_boilerplate_term_scores_lower_per_document():
    docs = [Counter({"boilerplate": 1, "unique": 1})]
    docs += [Counter({"boilerplate": 1, f"filler{i}": 1}) for i in range(3)]
    docs.append(Counter({"other": 1}))
    scores = {p.phrase: p.score for p in score_corpus(docs)}
    per_doc_boilerplate = scores["boilerplate"] / 4
    assert per_doc_boilerplate == pytest.approx(1.0 * 1.0 * 0.2 * 0.3)
    assert scores["unique"] == pytest.approx((math.log(5 / 2) + 1.0) * 0.3)
    assert per_doc_boilerplate < scores["unique"]


def test_specificity_multiplier_table():
    assert specificity_multiplier(1) == 0.3
    assert specificity_multiplier(2) == 1.2
    assert specificity_multiplier(3) == 1.6
    assert specificity_multiplier(4) == 1.9
    assert specificity_multiplier(5) == 2.2
    assert specificity_multiplier(9) == 2.2


def test_has_action_modifier():
    assert has_action_modifier("fleet management systems")
    assert not has_action_modifier("fleet managers")
    assert has_action_modifier("widget", {"widget"})


def test_action_modifier_bonus_applied_once():
    docs = [Counter({"asset management": 1, "asset ledger": 1})]
    scores = {p.phrase: p.score for p in score_corpus(docs)}
    assert scores["asset management"] == pytest.approx(scores["asset ledger"] * config.ACTION_MODIFIER_BONUS)


def test_length_boost_beats_single_word():
    docs = [extract_document_phrases("copper kettle brewing recipe notes")]
    scores = {p.phrase: p.score for p in score_corpus(docs)}
    assert scores["copper kettle brewing recipe notes"] > scores["copper"]


def test_score_corpus_sorted_with_stable_ties():
    docs = [Counter({"zeta": 1, "alpha": 1, "beta gamma": 1})]
    ranked = score_corpus(docs)
    assert [p.phrase for p in ranked] == ["beta gamma", "zeta", "alpha"]
    assert ranked[1].score == ranked[2].score


def test_scores_accumulate_across_documents():
    docs = [Counter({"retail space": 1}), Counter({"retail space": 1})]
    ranked = score_corpus(docs)
    idf = math.log(2 / 3) + 1.0
    assert ranked[0].score == pytest.approx(2 * 1.0 * idf * 1.2)


def test_score_corpus_empty():
    assert score_corpus([]) == []
    assert score_corpus([Counter()]) == []


def test_ignore_terms_never_appear_in_phrases():
    vocab = Vocabulary().with_ignore_terms(["Espresso"])
    docs = [extract_document_phrases("Premium coffee roasting about espresso blends and espresso tools", vocab)]
    for p in score_corpus(docs):
        words = p.phrase.split(" ")
        assert "espresso" not in words
        assert "about" not in words
        assert "and" not in words


def test_no_self_repeating_phrases():
    docs = [extract_document_phrases("engine tuning engine tuning engine oil tuning tips")]
    ranked = score_corpus(docs)
    assert ranked
    for p in ranked:
        words = p.phrase.split(" ")
        assert len(set(words)) == len(words)


def test_vocabulary_with_ignore_terms_does_not_touch_base():
    base = Vocabulary()
    extended = base.with_ignore_terms([" Acme ", "", "BRAND"])
    assert "acme" in extended.generic_terms and "brand" in extended.generic_terms
    assert "acme" not in base.generic_terms
    assert "acme" not in GENERIC_TERMS
    assert base.with_ignore_terms([]) is base


def test_keyword_pool_prefers_phrases():
    ranked = [ScoredPhrase(f"phrase number{i}", 10.0 - i) for i in range(6)]
    ranked.insert(2, ScoredPhrase("single", 9.5))
    pool = build_keyword_pool(ranked)
    assert [p.phrase for p in pool] == [f"phrase number{i}" for i in range(6)]


def test_keyword_pool_falls_back_to_single_words():
    ranked = [
        ScoredPhrase("solar", 3.0),
        ScoredPhrase("solar panel", 2.0),
        ScoredPhrase("a b", 1.9),  # too short to count as a phrase
        ScoredPhrase("panel", 1.0),
    ]
    pool = build_keyword_pool(ranked)
    assert [p.phrase for p in pool] == ["solar panel", "solar", "panel"]


def test_keyword_pool_synthetic_fallback():
    pool = build_keyword_pool([])
    assert len(pool) == 1
    assert pool[0].phrase == FALLBACK_POOL_TERM
    assert pool[0].score == config.FALLBACK_POOL_SCORE


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
