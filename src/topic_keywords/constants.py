"""
Vocabulary tables and text templates used for keyword ranking and topic synthesis.
"""

# Curated English stopwords plus navigation chrome that survives markup stripping
STOPWORDS = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it",
    "for", "not", "on", "with", "he", "as", "you", "do", "at", "this", "but",
    "his", "by", "from", "they", "we", "say", "her", "she", "or", "an",
    "will", "my", "one", "all", "would", "there", "their", "what", "so", "up",
    "out", "if", "about", "who", "get", "which", "go", "me", "when", "make",
    "can", "like", "time", "no", "just", "him", "know", "take", "people",
    "into", "year", "your", "good", "some", "could", "them", "see", "other",
    "than", "then", "now", "look", "only", "come", "its", "over", "think",
    "also", "back", "after", "use", "two", "how", "our", "work", "first",
    "well", "way", "even", "new", "want", "because", "any", "these", "give",
    "day", "most", "us", "is", "are", "was", "were", "has", "had", "been",
    "where", "through", "being", "under",
    # Site chrome
    "click", "menu", "close", "open",
})

# Corporate boilerplate that says nothing about the topic of a page
GENERIC_TERMS = frozenset({
    "alfuttaim", "futtaim", "group", "division", "divisions", "company",
    "corporate", "business", "services", "service", "products", "product",
    "solutions", "solution", "global", "international", "leading", "leader",
    "world", "region", "regional", "dubai", "uae", "middle", "east",
    # Navigation and legal footer
    "contact", "us", "about", "home", "menu", "search", "privacy", "policy",
    "terms", "conditions", "copyright", "rights", "reserved", "learn", "more",
    "read", "view", "details", "page", "website", "site", "content", "news",
    "media", "press", "careers", "career", "job", "jobs", "overview",
    # Mission-statement filler
    "vision", "mission", "values", "excellence", "quality", "innovation",
    "innovative", "strategic", "strategy", "customer", "customers", "client",
    "clients", "partner", "partners", "experience", "experiences", "best", "top",
})

# Words that signal actionable or intent-bearing phrases
ACTION_MODIFIERS = frozenset({
    "guide", "strategy", "strategies", "management", "system", "maintenance",
    "optimization", "investment", "trends", "analysis", "benefits", "review",
    "comparison", "efficiency", "planning", "technology", "integration",
    "support", "solutions", "development",
})

# Words that mark a keyword as transactional in the keyword chart
TRANSACTIONAL_CUES = ("price", "cost", "buy")

# Title templates, cycled by topic index; {kw} is the capitalized primary phrase
TITLE_TEMPLATES = (
    "The Ultimate Guide to {kw}",
    "{kw}: A Strategic Analysis for 2025",
    "How {kw} Drives ROI",
    "Optimizing {kw} for Maximum Efficiency",
    "The Hidden Benefits of {kw}",
    "10 Proven Strategies for {kw}",
    "{kw} vs Traditional Alternatives: A Comparison",
    "The Future of {kw} in the Industry",
    "Mastering {kw}: Expert Insights",
    "Cost-Effective {kw} Solutions",
)
GUIDE_OVERRIDE_TEMPLATE = "Mastering {kw}: Expert Insights"

# Content types in round-robin order
CONTENT_TYPE_GUIDE = "Guide"
CONTENT_TYPE_CASE_STUDY = "Case Study"
CONTENT_TYPE_BLOG_POST = "Blog Post"

TRAFFIC_VERY_HIGH = "Very High"
TRAFFIC_HIGH = "High"
TRAFFIC_MEDIUM = "Medium"

INTENT_TRANSACTIONAL = "Transactional"
INTENT_INFORMATIONAL = "Informational"

# Fallback literals
FALLBACK_POOL_TERM = "strategic market analysis"
FALLBACK_SECONDARY_KEYWORD = "industry analysis"
FALLBACK_TERTIARY_KEYWORD = "optimization"
FALLBACK_DOMINANT_TERM = "Industry"

COMPETITOR_INSIGHT = (
    "Competitors are ranking for broad terms. Opportunity exists in long-tail, "
    "3-4 word specific phrases identified below."
)

# Elements dropped before reading visible page text
NON_CONTENT_TAGS = ("script", "style", "nav", "footer", "header", "aside", "form")
HTML_SUFFIXES = (".html", ".htm")
