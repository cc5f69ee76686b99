from dataclasses import dataclass, field
from typing import List, Dict, Any

STORYBOARD_SHOTS = 6


@dataclass
class IdeaProfile:
    keywords: List[str]           # salient words, in order of appearance
    focus: str                    # word the name is built around, may be ""
    industry: str                 # key into INDUSTRY_PROFILES, e.g. "fashion"
    audience: str                 # e.g. "Gen Z shoppers"
    tone: str                     # key into TONE_RULES / PALETTES, e.g. "playful"


@dataclass
class BrandColor:
    name: str                     # e.g. "Moss"
    hex: str                      # "#RRGGBB"


@dataclass
class WebsiteOutline:
    hero_title: str
    hero_subtitle: str
    sections: List[str]
    primary_cta: str
    secondary_cta: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heroTitle": self.hero_title,
            "heroSubtitle": self.hero_subtitle,
            "sections": list(self.sections),
            "primaryCta": self.primary_cta,
            "secondaryCta": self.secondary_cta,
        }


@dataclass
class BrandResult:
    idea: str
    industry: str                 # display label, e.g. "Fashion & Apparel"
    audience: str
    tone: str                     # display label, e.g. "Playful and energetic"
    name: str
    tagline: str
    colors: List[BrandColor]
    website: WebsiteOutline
    social_posts: List[str] = field(default_factory=list)
    ad_storyboard: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase JSON shape consumed by the form."""
        return {
            "idea": self.idea,
            "industry": self.industry,
            "audience": self.audience,
            "tone": self.tone,
            "name": self.name,
            "tagline": self.tagline,
            "colors": [{"name": c.name, "hex": c.hex} for c in self.colors],
            "website": self.website.to_dict(),
            "socialPosts": list(self.social_posts),
            "adStoryboard": list(self.ad_storyboard),
        }
