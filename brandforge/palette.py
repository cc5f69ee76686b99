# brandforge/palette.py
import io
import re
import colorsys
from typing import List

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .models import BrandColor
from .analyzers import industry_profile

HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")

# ---------- Palettes (by tone) ----------
PALETTES = {
    "premium": [("Obsidian", "#111111"), ("Champagne", "#E8D8B0"), ("Ivory", "#FAF7F0"), ("Antique Gold", "#B08D57")],
    "earthy": [("Forest", "#2F5D50"), ("Moss", "#8AA67A"), ("Sand", "#E9DCC3"), ("Clay", "#B5651D")],
    "playful": [("Bubblegum", "#FF6FB5"), ("Sunny", "#FFD23F"), ("Aqua Pop", "#3BCEAC"), ("Grape", "#7B2CBF")],
    "bold": [("Jet", "#0B0B0F"), ("Electric Red", "#FF2E2E"), ("Chalk", "#F5F5F5"), ("Laser Lime", "#B6FF00")],
    "calm": [("Mist", "#DDE7EE"), ("Sage", "#A3B9A5"), ("Dusk Blue", "#5B7DB1"), ("Linen", "#F4EFE6")],
    "technical": [("Midnight", "#0F172A"), ("Signal Blue", "#2563EB"), ("Slate", "#64748B"), ("Cloud", "#F1F5F9")],
    "warm": [("Cocoa", "#4A2C2A"), ("Apricot", "#F4A261"), ("Cream", "#FFF4E0"), ("Rosewood", "#B5495B")],
}


def is_hex_color(value) -> bool:
    return isinstance(value, str) and HEX_RE.fullmatch(value) is not None


def hex_to_rgb(hex_color):
    return int(hex_color[1:3], 16), int(hex_color[3:5], 16), int(hex_color[5:7], 16)


def build_palette(tone: str, industry: str) -> List[BrandColor]:
    """Tone palette, then the industry accent when its hex is not already in it."""
    swatches = PALETTES.get(tone, PALETTES["warm"])
    colors = [BrandColor(name=name, hex=hex_) for name, hex_ in swatches]
    accent_name, accent_hex = industry_profile(industry)["accent"]
    if accent_hex.upper() not in {c.hex.upper() for c in colors}:
        colors.append(BrandColor(name=accent_name, hex=accent_hex))
    return colors


# ---------- Mood classifier ----------
def palette_mood(hex_colors):
    """Coarse HSV read of a palette: neon | muted | warm | cool | pastel | neutral."""
    hsv = np.array([colorsys.rgb_to_hsv(*(v / 255.0 for v in hex_to_rgb(h))) for h in hex_colors])
    avg_h, avg_s, avg_v = hsv.mean(axis=0)

    if avg_s > 0.7 and avg_v > 0.7:
        return "neon"
    if avg_v < 0.5 and avg_s < 0.5:
        return "muted"
    if avg_s < 0.35 and avg_v > 0.8:
        return "pastel"
    if (avg_h < 0.12) or (avg_h > 0.88) or (0.08 < avg_h < 0.17):
        return "warm"
    if 0.17 <= avg_h <= 0.6:
        return "cool"
    return "neutral"


def relative_luminance(hex_color) -> float:
    rgb = np.array(hex_to_rgb(hex_color), dtype=np.float32) / 255.0
    linear = np.where(rgb <= 0.03928, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)
    return float(np.dot(linear, [0.2126, 0.7152, 0.0722]))


# ---------- Swatch rendering ----------
def render_swatch(colors: List[BrandColor], width=640, height=160):
    """
    Returns PNG bytes (BytesIO, rewound) of the palette as equal vertical bands,
    each labelled with its name and hex in black or white, whichever reads better.
    """
    n = len(colors)
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    edges = np.linspace(0, width, n + 1).astype(int)
    for i, color in enumerate(colors):
        arr[:, edges[i]:edges[i + 1]] = hex_to_rgb(color.hex)

    img = Image.fromarray(arr)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    for i, color in enumerate(colors):
        ink = (0, 0, 0) if relative_luminance(color.hex) > 0.4 else (255, 255, 255)
        x = int(edges[i]) + 8
        draw.text((x, height - 36), color.name, fill=ink, font=font)
        draw.text((x, height - 20), color.hex.upper(), fill=ink, font=font)

    out = io.BytesIO()
    img.save(out, format="PNG")
    out.seek(0)
    return out
