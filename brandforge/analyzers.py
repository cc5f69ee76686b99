# brandforge/analyzers.py
"""
Idea analyzers: read a free-text startup idea and infer what the brand is about.

Features:
- Keyword extraction (stopwords and generic startup filler removed)
- Industry inference (keyword scoring against INDUSTRY_PROFILES)
- Audience inference (first matching AUDIENCE_RULES row, else the industry default)
- Tone inference (keyword scoring against TONE_RULES, else the industry default)

Stem matching rules:
- a stem with a space or hyphen is a phrase, matched at a word boundary in the lowered text
- a stem of 3 letters or fewer must equal a token (or its plural), so "app" never hits "apparel"
- any longer stem matches tokens that start with it ("sustainab" hits "sustainability")
"""

import re
import logging
from typing import List

from .models import IdeaProfile

logger = logging.getLogger(__name__)

# ---------- Lookup tables ----------
INDUSTRY_PROFILES = {
    "fashion": {
        "label": "Fashion & Apparel",
        "stems": ["sneaker", "shoe", "footwear", "apparel", "cloth", "fashion", "streetwear",
                  "jacket", "dress", "hoodie", "sock", "jewel", "accessor", "tshirt", "t-shirt"],
        "audience": "Style-conscious shoppers",
        "tone": "bold",
        "offering": "collection",
        "roots": ["stride", "thread", "loom"],
        "sections": ["The Collection", "How It's Made", "Fit Guide", "Community Lookbook", "FAQ"],
        "primary_cta": "Shop the drop",
        "secondary_cta": "See the lookbook",
        "accent": ("Signal Coral", "#FF6F59"),
    },
    "food": {
        "label": "Food & Beverage",
        "stems": ["food", "coffee", "tea", "snack", "meal", "restaurant", "bakery", "drink",
                  "beverage", "juice", "kitchen", "recipe", "cafe", "brew", "chocolate", "dessert"],
        "audience": "Busy food lovers",
        "tone": "warm",
        "offering": "menu",
        "roots": ["crumb", "ladle", "basil"],
        "sections": ["Menu Highlights", "Our Ingredients", "How Ordering Works", "Reviews", "Find Us"],
        "primary_cta": "Order now",
        "secondary_cta": "See the menu",
        "accent": ("Paprika", "#D9480F"),
    },
    "fitness": {
        "label": "Health & Fitness",
        "stems": ["fitness", "gym", "workout", "yoga", "running", "runner", "training", "sport",
                  "athlet", "exercise", "pilates", "cycling", "marathon"],
        "audience": "Active people building better habits",
        "tone": "bold",
        "offering": "programs",
        "roots": ["pulse", "rep", "peak"],
        "sections": ["Programs", "How It Works", "Coaches", "Member Stories", "Pricing"],
        "primary_cta": "Start training",
        "secondary_cta": "View programs",
        "accent": ("Volt", "#C6F432"),
    },
    "wellness": {
        "label": "Health & Wellness",
        "stems": ["health", "wellness", "wellbeing", "mental", "sleep", "meditat", "therapy",
                  "clinic", "doctor", "medical", "nutrition", "supplement", "stress"],
        "audience": "People investing in their wellbeing",
        "tone": "calm",
        "offering": "care",
        "roots": ["vita", "calma", "well"],
        "sections": ["Our Approach", "Services", "Meet the Experts", "Client Stories", "FAQ"],
        "primary_cta": "Book a session",
        "secondary_cta": "How it works",
        "accent": ("Lagoon", "#2A9D8F"),
    },
    "beauty": {
        "label": "Beauty & Personal Care",
        "stems": ["beauty", "skincare", "skin", "cosmetic", "makeup", "hair", "fragrance",
                  "perfume", "nail", "salon", "grooming", "serum"],
        "audience": "Beauty enthusiasts who read the label",
        "tone": "premium",
        "offering": "range",
        "roots": ["glow", "lumi", "dew"],
        "sections": ["Bestsellers", "Ingredients", "Find Your Routine", "Reviews", "Our Story"],
        "primary_cta": "Shop the range",
        "secondary_cta": "Find your routine",
        "accent": ("Blush", "#F4A6B8"),
    },
    "finance": {
        "label": "Finance & Fintech",
        "stems": ["financ", "fintech", "bank", "budget", "invest", "money", "payment", "saving",
                  "crypto", "insurance", "loan", "tax", "accounting", "wallet"],
        "audience": "People taking control of their money",
        "tone": "technical",
        "offering": "account",
        "roots": ["ledger", "vault", "coin"],
        "sections": ["Features", "Security", "Pricing", "Customer Stories", "FAQ"],
        "primary_cta": "Open an account",
        "secondary_cta": "See pricing",
        "accent": ("Mint", "#3DDC97"),
    },
    "education": {
        "label": "Education & Learning",
        "stems": ["educat", "learn", "school", "course", "tutor", "teach", "study", "class",
                  "language", "skill", "bootcamp", "lesson"],
        "audience": "Lifelong learners",
        "tone": "warm",
        "offering": "courses",
        "roots": ["mentor", "quill", "spark"],
        "sections": ["Courses", "How Learning Works", "Instructors", "Learner Outcomes", "Pricing"],
        "primary_cta": "Start learning",
        "secondary_cta": "Browse courses",
        "accent": ("Marigold", "#F4B400"),
    },
    "software": {
        "label": "Software & Technology",
        "stems": ["app", "software", "saas", "ai", "tool", "developer", "code", "api", "cloud",
                  "automation", "data", "analytics", "tech", "robot", "device", "platform"],
        "audience": "Teams that want to move faster",
        "tone": "technical",
        "offering": "platform",
        "roots": ["stack", "byte", "node"],
        "sections": ["Product Tour", "Features", "Integrations", "Pricing", "Docs & Support"],
        "primary_cta": "Start free trial",
        "secondary_cta": "Book a demo",
        "accent": ("Electric Indigo", "#6366F1"),
    },
    "travel": {
        "label": "Travel & Hospitality",
        "stems": ["travel", "trip", "hotel", "tour", "vacation", "flight", "adventure", "hostel",
                  "camping", "hiking", "booking", "getaway"],
        "audience": "Curious travelers",
        "tone": "playful",
        "offering": "trips",
        "roots": ["roam", "atlas", "compass"],
        "sections": ["Destinations", "How It Works", "Travel Stories", "Deals", "Plan With Us"],
        "primary_cta": "Plan your trip",
        "secondary_cta": "Explore destinations",
        "accent": ("Lagoon Blue", "#00A6D6"),
    },
    "pets": {
        "label": "Pet Care",
        "stems": ["pet", "dog", "cat", "puppy", "puppies", "kitten", "vet", "animal", "leash"],
        "audience": "Devoted pet owners",
        "tone": "warm",
        "offering": "care",
        "roots": ["paw", "wag", "whisker"],
        "sections": ["Shop", "Why Pets Love It", "Vet Approved", "Happy Tails", "FAQ"],
        "primary_cta": "Shop for your pet",
        "secondary_cta": "Read pet tips",
        "accent": ("Tennis Ball", "#D4E157"),
    },
    "home": {
        "label": "Home & Living",
        "stems": ["home", "furniture", "decor", "interior", "garden", "plant", "candle",
                  "kitchenware", "cleaning", "bedding"],
        "audience": "Renters and homeowners who love their space",
        "tone": "calm",
        "offering": "home goods",
        "roots": ["nook", "hearth", "linen"],
        "sections": ["Shop by Room", "Materials", "Styling Ideas", "Reviews", "Our Story"],
        "primary_cta": "Shop the home edit",
        "secondary_cta": "Get inspired",
        "accent": ("Terracotta", "#C8553D"),
    },
}

GENERAL_PROFILE = {
    "label": "Consumer Startup",
    "stems": [],
    "audience": "Early adopters looking for something better",
    "tone": "warm",
    "offering": "product",
    "roots": ["nova", "kin", "bright"],
    "sections": ["What We Do", "How It Works", "Why It Matters", "Testimonials", "FAQ"],
    "primary_cta": "Get early access",
    "secondary_cta": "Learn more",
    "accent": ("Sky", "#4EA8DE"),
}

# first match wins, so narrower groups come first
AUDIENCE_RULES = [
    (["gen z", "genz", "gen-z", "zoomer", "teen"], "Gen Z consumers who value authenticity and self-expression"),
    (["millennial"], "Millennials looking for brands that share their values"),
    (["student", "college", "university", "campus"], "Students on a budget"),
    (["parent", "mom", "dad", "famil", "kid", "child", "baby", "toddler"], "Parents and young families"),
    (["developer", "engineer", "programmer", "coder"], "Developers and technical teams"),
    (["small business", "smb", "freelanc", "entrepreneur", "founder", "solopreneur"],
     "Small business owners and independent founders"),
    (["pet owner", "dog owner", "cat owner"], "Devoted pet owners"),
    (["gamer", "gaming", "esport"], "Gamers and streaming communities"),
    (["athlete", "runner", "cyclist"], "Athletes and weekend warriors"),
    (["professional", "remote work", "executive", "office", "corporate"], "Busy professionals"),
    (["senior", "retire", "elderly", "older adult"], "Older adults and retirees"),
    (["creator", "influencer", "artist", "designer", "musician"], "Independent creators and artists"),
]

# scored like industries; ties resolve in table order
TONE_RULES = [
    ("premium", "Refined and premium",
     ["luxury", "luxurious", "premium", "exclusive", "high-end", "high end", "elegant", "bespoke",
      "artisan", "boutique"]),
    ("earthy", "Grounded and sustainable",
     ["eco", "sustainab", "organic", "natural", "green", "recycl", "zero-waste", "zero waste",
      "plant-based", "ethical", "biodegrad", "vegan", "upcycl"]),
    ("playful", "Playful and upbeat",
     ["fun", "playful", "quirky", "colorful", "colourful", "cute", "silly", "gamif", "joy"]),
    ("bold", "Bold and energetic",
     ["bold", "edgy", "loud", "streetwear", "hype", "extreme", "fearless", "disrupt", "rebel"]),
    ("calm", "Calm and reassuring",
     ["calm", "minimal", "mindful", "gentle", "simple", "peace", "relax", "soothing", "quiet"]),
    ("technical", "Smart and precise",
     ["smart", "ai", "automat", "data", "analytic", "precision", "secure", "enterprise", "b2b", "api"]),
    ("warm", "Warm and friendly",
     ["friendly", "cozy", "cosy", "community", "local", "homemade", "caring", "kind", "neighborhood"]),
]

TONE_LABELS = {key: label for key, label, _ in TONE_RULES}

STOPWORDS = {
    "a", "an", "the", "and", "or", "but", "for", "with", "that", "this", "these", "those", "to",
    "of", "in", "on", "at", "by", "from", "into", "about", "as", "is", "are", "be", "been", "it",
    "its", "i", "im", "we", "our", "my", "me", "you", "your", "they", "their", "who", "which",
    "what", "where", "when", "how", "so", "very", "really", "just", "more", "most", "also", "all",
    "any", "some", "like", "than", "then", "can", "will", "would", "should", "could", "want",
    "wants", "need", "needs", "help", "helps", "focus", "focuses", "focused", "based", "people",
    "new", "use", "uses", "using", "get", "gets", "way", "ways", "make", "makes", "making",
}

# words that describe any startup and make poor names
GENERIC_WORDS = {
    "brand", "brands", "startup", "company", "business", "businesses", "idea", "product",
    "products", "service", "services", "platform", "solution", "solutions", "app", "apps", "build",
    "building", "create", "creating", "launch", "launching", "start", "starting", "design",
    "designs", "online", "website", "marketplace", "gen", "friendly", "world", "everyone", "thing",
}

_TOKEN_RE = re.compile(r"[a-z][a-z']*")


# ---------- Matching helpers ----------
def tokenize(text: str) -> List[str]:
    return [t.replace("'", "") for t in _TOKEN_RE.findall(text.lower())]


def stem_hits(stem, tokens, text):
    """True when `stem` occurs in the idea (see module docstring for the rules)."""
    if " " in stem or "-" in stem:
        return re.search(r"\b" + re.escape(stem), text) is not None
    if len(stem) <= 3:
        return any(t == stem or t == stem + "s" for t in tokens)
    return any(t.startswith(stem) for t in tokens)


def score_stems(stems, tokens, text) -> int:
    return sum(1 for s in stems if stem_hits(s, tokens, text))


def _best_scored(rows, tokens, text):
    """rows: iterable of (key, stems). Returns highest-scoring key (table order on ties) or None."""
    best_key, best_score = None, 0
    for key, stems in rows:
        score = score_stems(stems, tokens, text)
        if score > best_score:
            best_key, best_score = key, score
    return best_key


# ---------- Inference ----------
def industry_profile(industry: str) -> dict:
    return INDUSTRY_PROFILES.get(industry, GENERAL_PROFILE)


def extract_keywords(idea: str) -> List[str]:
    keywords = []
    for token in tokenize(idea):
        if len(token) < 3 or token in STOPWORDS or token in GENERIC_WORDS:
            continue
        if token not in keywords:
            keywords.append(token)
    return keywords


def infer_industry(idea: str) -> str:
    text = idea.lower()
    tokens = tokenize(idea)
    rows = ((key, profile["stems"]) for key, profile in INDUSTRY_PROFILES.items())
    return _best_scored(rows, tokens, text) or "general"


def infer_audience(idea: str, industry: str) -> str:
    text = idea.lower()
    tokens = tokenize(idea)
    for stems, label in AUDIENCE_RULES:
        if score_stems(stems, tokens, text):
            return label
    return industry_profile(industry)["audience"]


def infer_tone(idea: str, industry: str) -> str:
    text = idea.lower()
    tokens = tokenize(idea)
    rows = ((key, stems) for key, _, stems in TONE_RULES)
    return _best_scored(rows, tokens, text) or industry_profile(industry)["tone"]


def pick_focus(keywords, industry):
    """
    Word the brand name grows from:
      - first keyword that matched the industry
      - else first keyword (4+ letters) that is not a tone or audience cue
      - else "" and the generator falls back to the industry roots
    """
    stems = industry_profile(industry)["stems"]
    for word in keywords:
        if score_stems(stems, [word], word):
            return word

    cue_stems = [s for _, _, stems_ in TONE_RULES for s in stems_]
    cue_stems += [s for stems_, _ in AUDIENCE_RULES for s in stems_]
    for word in keywords:
        if len(word) >= 4 and not score_stems(cue_stems, [word], word):
            return word
    return ""


def analyze_idea(idea: str) -> IdeaProfile:
    industry = infer_industry(idea)
    keywords = extract_keywords(idea)
    profile = IdeaProfile(
        keywords=keywords,
        focus=pick_focus(keywords, industry),
        industry=industry,
        audience=infer_audience(idea, industry),
        tone=infer_tone(idea, industry),
    )
    logger.debug(f"Analyzed idea: industry={profile.industry} tone={profile.tone} focus={profile.focus!r}")
    return profile
