"""
Configuration defaults for keyword ranking and topic synthesis.
"""

DEFAULT_TOPIC_COUNT = 5
DEFAULT_KEYWORD_LIMIT = 15  # keyword chart records drawn from the top of the pool
DEFAULT_MIN_TOKEN_LEN = 3   # tokens must be longer than 2 characters

# N-gram range used when building phrases (unigrams come from the tokens themselves)
DEFAULT_MIN_NGRAM = 2
DEFAULT_MAX_NGRAM = 5

# Occurrence weight per phrase length: each n-gram match is counted this many times
# before term frequency is computed, so longer phrases dominate the counts.
NGRAM_OCCURRENCE_WEIGHTS = {
    1: 1,
    2: 2,
    3: 4,
    4: 5,
    5: 6,
}

# Specificity multipliers by phrase word count (>= 5 words use the last entry)
SPECIFICITY_MULTIPLIERS = {
    1: 0.3,  # heavy penalty for single words
    2: 1.2,
    3: 1.6,
    4: 1.9,
    5: 2.2,
}

# Bonus when any word in the phrase is an action/intent modifier
ACTION_MODIFIER_BONUS = 1.5

# Ubiquity dampening: terms present in more than this share of documents are boilerplate
UBIQUITY_DF_RATIO = 0.6
UBIQUITY_IDF_PENALTY = 0.2
UBIQUITY_MIN_DOCS = 3  # only applied when the corpus has more than two documents

# Keyword pool selection
POOL_MIN_PHRASES = 6          # fewer multi-word phrases than this -> add single words
POOL_MIN_PHRASE_CHARS = 6     # phrases must be longer than 5 characters
FALLBACK_POOL_SCORE = 0.9

# Projected traffic tiers (raw TF-IDF score thresholds, strictly greater than)
TRAFFIC_VERY_HIGH_SCORE = 2.0
TRAFFIC_HIGH_SCORE = 1.0

# Keyword chart records: volume = score * scale + base + jitter, capped at 100
VOLUME_SCORE_SCALE = 30.0
VOLUME_BASE = 40.0
VOLUME_JITTER = 20.0
DIFFICULTY_BASE = 30.0
DIFFICULTY_SPREAD = 40.0
