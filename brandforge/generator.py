# brandforge/generator.py
"""
Rule-based brand derivation: idea text -> BrandResult.

Deterministic: every choice between template variants is keyed by a SHA-256
digest of the normalized idea, so the same text gives the same brand in any
process. All templates are keyed by the inferred tone or industry.
"""

import re
import hashlib
import logging
from typing import List

from .models import BrandResult, IdeaProfile, WebsiteOutline, STORYBOARD_SHOTS
from .analyzers import analyze_idea, industry_profile, TONE_LABELS
from .palette import build_palette, is_hex_color
from .errors import GenerationError

logger = logging.getLogger(__name__)

# ---------- Template tables ----------
NAME_SUFFIXES = {
    "premium": ["ora", "elle", "aire", "ique"],
    "earthy": ["leaf", "root", "grove", "moss"],
    "playful": ["ly", "oo", "io", "zy"],
    "bold": ["forge", "bolt", "rush", "x"],
    "calm": ["haven", "ease", "nest", "mist"],
    "technical": ["ify", "labs", "stack", "sync"],
    "warm": ["kin", "hearth", "bee", "nest"],
}

TAGLINES = {
    "premium": ["Crafted for those who notice.", "{Offering}, elevated.", "Quiet luxury, every day."],
    "earthy": ["Made better, for a better planet.", "Good for you. Kinder to the earth.",
               "Honest {offering}, grounded in nature."],
    "playful": ["Seriously fun {offering}.", "Life's better with a little {name}.", "Made for your happy place."],
    "bold": ["Built loud. Built to last.", "Don't blend in.", "{name}. No half measures."],
    "calm": ["Less noise. More you.", "Simple {offering}, done right.", "Breathe easier with {name}."],
    "technical": ["Smarter {offering}, zero guesswork.", "Precision you can build on.", "Do more with less effort."],
    "warm": ["Made with care, made for you.", "{Offering} that feels like home.", "Good things, shared."],
}

HERO_TITLES = ["Meet {name}", "Welcome to {name}", "This is {name}"]

TONE_SECTIONS = {
    "premium": "Craftsmanship",
    "earthy": "Our Impact",
    "playful": "Join the Fun",
    "bold": "The Manifesto",
    "calm": "Our Philosophy",
    "technical": "Security & Privacy",
    "warm": "Our Community",
}

TONE_POSTS = {
    "premium": "Detail shot: the finishing touches that make every {offering} from {name} feel considered.",
    "earthy": "Impact check: the small, sustainable choices behind every {offering} we make.",
    "playful": "Challenge time: show us how {name} fits your day and tag a friend who needs it.",
    "bold": "Manifesto drop: we built {name} for people who refuse to settle. Are you in?",
    "calm": "Slow Sunday: three simple ways {name} takes one thing off your mind this week.",
    "technical": "Under the hood: a 30-second walkthrough of how {name} gets it right every time.",
    "warm": "Community love: a thank-you note to the first people who believed in {name}.",
}

# (lighting / setting, soundtrack) per tone
TONE_VISUALS = {
    "premium": ("low, golden studio light on dark surfaces", "a slow, minimal piano line"),
    "earthy": ("soft natural daylight with green, textured backdrops", "an acoustic guitar loop"),
    "playful": ("bright, saturated colors and quick zooms", "an upbeat pop hook"),
    "bold": ("hard contrast and fast, handheld camera moves", "a heavy bass drop"),
    "calm": ("airy morning light and plenty of empty space", "ambient, breathing synth pads"),
    "technical": ("clean desk setups and crisp screen close-ups", "a tight electronic pulse"),
    "warm": ("cozy indoor light and real, lived-in spaces", "a feel-good indie track"),
}

FALLBACK_NAME = "Nova"
PROPER_LEADS = ("Gen ",)


# ---------- Helpers ----------
def normalize_idea(idea: str) -> str:
    return " ".join(idea.lower().split())


def stable_index(seed: str, n: int, salt: str = "") -> int:
    """Deterministic index in range(n) for `seed`; `salt` decorrelates separate choices."""
    digest = hashlib.sha256(f"{salt}:{seed}".encode("utf-8")).hexdigest()
    return int(digest, 16) % n


def _lower_first(text: str) -> str:
    if not text or text.startswith(PROPER_LEADS):
        return text
    return text[0].lower() + text[1:]


def _fill(template: str, **values) -> str:
    offering = values.get("offering", "")
    return template.format(Offering=offering[:1].upper() + offering[1:], **values)


# ---------- Derivation steps ----------
def make_name(profile: IdeaProfile, seed: str) -> str:
    roots = industry_profile(profile.industry)["roots"]
    root = re.sub(r"[^a-z]", "", profile.focus.lower()) or roots[stable_index(seed, len(roots), "root")]
    if len(root) > 4 and root.endswith("s") and not root.endswith("ss"):
        root = root[:-1]
    if len(root) > 8:
        root = root[:6]

    suffixes = NAME_SUFFIXES.get(profile.tone, NAME_SUFFIXES["warm"])
    suffix = suffixes[stable_index(seed, len(suffixes), "suffix")]
    if root[-1] in "aeiouy" and suffix[0] in "aeiouy":
        root = root[:-1] or root
    if root.endswith(suffix[0]):
        suffix = suffix[1:] or suffix

    name = (root + suffix).capitalize()
    return name if name.isalpha() else FALLBACK_NAME


def make_tagline(profile: IdeaProfile, name: str, seed: str) -> str:
    options = TAGLINES.get(profile.tone, TAGLINES["warm"])
    offering = industry_profile(profile.industry)["offering"]
    return _fill(options[stable_index(seed, len(options), "tagline")], name=name, offering=offering)


def make_website(profile: IdeaProfile, name: str, seed: str) -> WebsiteOutline:
    industry = industry_profile(profile.industry)
    tone_label = TONE_LABELS.get(profile.tone, TONE_LABELS["warm"])

    sections = list(industry["sections"])
    extra = TONE_SECTIONS.get(profile.tone)
    if extra and extra not in sections:
        sections.insert(2, extra)

    primary, secondary = industry["primary_cta"], industry["secondary_cta"]
    if primary.strip().lower() == secondary.strip().lower():
        secondary = "Learn more" if primary.lower() != "learn more" else "Contact us"

    title = HERO_TITLES[stable_index(seed, len(HERO_TITLES), "hero")].format(name=name)
    subtitle = f"{tone_label} {industry['offering']} for {_lower_first(profile.audience)}."
    return WebsiteOutline(
        hero_title=title,
        hero_subtitle=subtitle,
        sections=sections,
        primary_cta=primary,
        secondary_cta=secondary,
    )


def make_social_posts(profile: IdeaProfile, name: str, tagline: str) -> List[str]:
    offering = industry_profile(profile.industry)["offering"]
    subject = profile.focus or offering
    audience = _lower_first(profile.audience)
    return [
        f"Launch teaser: something new is coming for {audience}. {name} drops soon. #{name}",
        f"Behind the scenes: how we make our {subject} and why every detail matters.",
        _fill(TONE_POSTS.get(profile.tone, TONE_POSTS["warm"]), name=name, offering=offering),
        f"Poll: what matters most to you when choosing {offering}? Tell us in the comments.",
        f"Customer spotlight: a first week with {name}, in their own words.",
        f"Our promise, in one line: {tagline}",
    ]


def make_storyboard(profile: IdeaProfile, name: str, tagline: str, colors, primary_cta: str) -> List[str]:
    offering = industry_profile(profile.industry)["offering"]
    subject = profile.focus or offering
    lighting, soundtrack = TONE_VISUALS.get(profile.tone, TONE_VISUALS["warm"])
    lead = colors[0].name
    second = colors[1].name if len(colors) > 1 else lead
    shots = [
        f"Opening: {profile.audience} in an everyday moment, shot with {lighting}.",
        f"Problem: a quick montage of the hassle of settling for ordinary {offering}.",
        f"Reveal: {name} enters the frame as the scene shifts to {lead} and {second}.",
        f"In use: fast cuts of the {subject} in action, set to {soundtrack}.",
        f"Proof: real customers react on camera, on-screen text reads \"{tagline}\"",
        f"End card: {name} logo on {lead}, call to action \"{primary_cta}\".",
    ]
    return shots[:STORYBOARD_SHOTS]


def check_invariants(result: BrandResult) -> List[str]:
    """Returns a list of broken output rules; empty means the brand is complete."""
    problems = []
    for field_name in ("idea", "industry", "audience", "tone", "name", "tagline"):
        if not str(getattr(result, field_name, "") or "").strip():
            problems.append(f"{field_name} is empty")
    if not result.colors:
        problems.append("colors is empty")
    for color in result.colors:
        if not color.name.strip():
            problems.append("color without a name")
        if not is_hex_color(color.hex):
            problems.append(f"malformed hex {color.hex!r}")
    site = result.website
    if not site.hero_title.strip() or not site.hero_subtitle.strip():
        problems.append("website hero is empty")
    if not site.sections or not all(s.strip() for s in site.sections):
        problems.append("website sections are empty")
    if not site.primary_cta.strip() or not site.secondary_cta.strip():
        problems.append("website CTA is empty")
    elif site.primary_cta == site.secondary_cta:
        problems.append("primary and secondary CTA are identical")
    if not result.social_posts or not all(p.strip() for p in result.social_posts):
        problems.append("social posts are empty")
    if len(result.ad_storyboard) != STORYBOARD_SHOTS:
        problems.append(f"storyboard has {len(result.ad_storyboard)} shots, expected {STORYBOARD_SHOTS}")
    return problems


# ---------- Full pipeline ----------
def derive_brand(idea: str) -> BrandResult:
    seed = normalize_idea(idea)
    profile = analyze_idea(idea)
    name = make_name(profile, seed)
    tagline = make_tagline(profile, name, seed)
    colors = build_palette(profile.tone, profile.industry)
    website = make_website(profile, name, seed)
    return BrandResult(
        idea=idea,
        industry=industry_profile(profile.industry)["label"],
        audience=profile.audience,
        tone=TONE_LABELS.get(profile.tone, TONE_LABELS["warm"]),
        name=name,
        tagline=tagline,
        colors=colors,
        website=website,
        social_posts=make_social_posts(profile, name, tagline),
        ad_storyboard=make_storyboard(profile, name, tagline, colors, website.primary_cta),
    )


def generate_brand(idea: str) -> BrandResult:
    """
    Derives a complete brand for already-validated idea text.
    Any failure, including a broken output rule, surfaces as GenerationError.
    """
    try:
        result = derive_brand(idea)
    except Exception as e:
        logger.exception("Brand derivation failed")
        raise GenerationError() from e

    problems = check_invariants(result)
    if problems:
        logger.error(f"Derived brand rejected: {'; '.join(problems)}")
        raise GenerationError()

    logger.info(f"Generated brand {result.name!r} (industry={result.industry}, tone={result.tone})")
    return result
