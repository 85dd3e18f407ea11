"""
Canonical topic taxonomy.

Maps free-text topic labels (synonyms, abbreviations) to a fixed list of
canonical topic names. Changes to CANONICAL_TOPICS affect stored interests;
add synonyms rather than renaming canonical entries.
"""

from typing import Iterable, List, Optional

CANONICAL_TOPICS = (
    # Technology
    "AI",
    "Machine Learning",
    "Data Science",
    "Web3",
    "Blockchain",
    "Cybersecurity",
    "Software Engineering",
    "Cloud Computing",
    # Industries
    "Healthcare",
    "Climate",
    "Energy",
    "Supply Chain",
    "Retail",
    "Manufacturing",
    "Agriculture",
    "Education",
    "Real Estate",
    # Career paths
    "Entrepreneurship",
    "Startups",
    "VC",
    "Product Management",
    "Consulting",
    "Finance",
    "Investment Banking",
    "Marketing",
    "Sales",
    # Skills
    "Networking",
    "Leadership",
    "Public Speaking",
    "Research",
    "Design",
    "UX",
    # Academic
    "MBA",
    "Engineering",
    "Computer Science",
    "Business",
    "Policy",
)

# Keys are lower-case
TOPIC_SYNONYMS = {
    "artificial intelligence": "AI",
    "nlp": "AI",
    "computer vision": "AI",
    "deep learning": "Machine Learning",
    "neural networks": "Machine Learning",
    "ml": "Machine Learning",
    "sustainability": "Climate",
    "climate tech": "Climate",
    "clean tech": "Climate",
    "cleantech": "Climate",
    "renewable energy": "Energy",
    "startup": "Startups",
    "founder": "Startups",
    "venture capital": "VC",
    "investing": "VC",
    "entrepreneurial": "Entrepreneurship",
    "health": "Healthcare",
    "medical": "Healthcare",
    "biotech": "Healthcare",
    "pharma": "Healthcare",
    "health tech": "Healthcare",
    "data analysis": "Data Science",
    "analytics": "Data Science",
    "crypto": "Web3",
    "web 3": "Web3",
    "software development": "Software Engineering",
    "programming": "Software Engineering",
    "coding": "Software Engineering",
    "product manager": "Product Management",
    "pm": "Product Management",
    "strategy": "Consulting",
    "management consulting": "Consulting",
    "banking": "Investment Banking",
    "ib": "Investment Banking",
    "network": "Networking",
    "public talk": "Public Speaking",
    "speaking": "Public Speaking",
    "user experience": "UX",
    "ui/ux": "UX",
    "design thinking": "Design",
}

_CANONICAL_BY_LOWER = {t.lower(): t for t in CANONICAL_TOPICS}


def normalize_topic_name(text: str) -> Optional[str]:
    """Canonical topic for text (case-insensitive), or None if unknown."""
    key = text.strip().lower()
    if key in _CANONICAL_BY_LOWER:
        return _CANONICAL_BY_LOWER[key]
    return TOPIC_SYNONYMS.get(key)


def extract_canonical_topics(raw_topics: Iterable[str]) -> List[str]:
    """Distinct canonical topics found in raw_topics, in first-seen order."""
    found = (normalize_topic_name(t) for t in raw_topics)
    return list(dict.fromkeys(t for t in found if t))
