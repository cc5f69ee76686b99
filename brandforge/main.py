# brandforge/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, Field

from .config import get_settings, configure_logging
from .errors import BrandForgeError, GenerationError
from .generator import generate_brand
from .palette import palette_mood, render_swatch
from .validation import validate_idea

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

MALFORMED_BODY_MESSAGE = "Request body must be JSON with an 'idea' text field."

app = FastAPI(title="BrandForge - idea to brand concept")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


class GenerateBrandRequest(BaseModel):
    idea: str = Field(..., description="Free-text description of the startup idea")


@app.exception_handler(BrandForgeError)
async def brandforge_error_handler(request: Request, exc: BrandForgeError):
    return JSONResponse(content={"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
    return JSONResponse(content={"error": MALFORMED_BODY_MESSAGE}, status_code=400)


def _brand_for(payload: GenerateBrandRequest):
    try:
        idea = validate_idea(payload.idea)
    except BrandForgeError:
        logger.info("Rejected empty idea")
        raise
    return generate_brand(idea)


@app.post("/api/generate-brand")
async def generate_brand_endpoint(payload: GenerateBrandRequest):
    result = _brand_for(payload)
    return JSONResponse(content=result.to_dict())


@app.post("/api/palette-preview")
async def palette_preview(payload: GenerateBrandRequest):
    """
    Returns the derived palette as a PNG strip.
    Mood and brand name travel as headers so the image can be inspected next to them.
    """
    result = _brand_for(payload)
    try:
        png_io = render_swatch(result.colors, width=settings.swatch_width, height=settings.swatch_height)
        mood = palette_mood([c.hex for c in result.colors])
    except Exception as e:
        logger.exception("Palette preview failed")
        raise GenerationError() from e
    headers = {"X-Palette-Mood": mood, "X-Brand-Name": result.name}
    return StreamingResponse(png_io, media_type="image/png", headers=headers)


@app.get("/api/tokens")
async def get_tokens():
    """
    Returns recommended UI tokens per brand tone (radius, shadow, type scale, spacing, motion),
    so a renderer can style a generated concept.
    """
    return JSONResponse(content={"status": "ok", "tokens": DESIGN_TOKENS})


@app.get("/api/health")
async def health():
    return {"status": "ok"}


DESIGN_TOKENS = {
    "premium": {
        "border_radius": "8px",
        "shadows": "elevated-subtle",
        "typography": {"primary": "Serif Pair", "scale": {"h1": "42px", "body": "18px"}},
        "spacing_scale": "balanced",
        "motion": "subtle",
        "notes": "Elegant, spacious, refined color accents"
    },
    "earthy": {
        "border_radius": "12px",
        "shadows": "soft",
        "typography": {"primary": "Humanist Sans", "scale": {"h1": "38px", "body": "17px"}},
        "spacing_scale": "airy",
        "motion": "gentle",
        "notes": "Natural textures, muted greens, recycled-paper feel"
    },
    "playful": {
        "border_radius": "16px",
        "shadows": "soft",
        "typography": {"primary": "Rounded Sans", "scale": {"h1": "36px", "body": "16px"}},
        "spacing_scale": "airy",
        "motion": "high",
        "notes": "Playful, rounded, colorful CTAs"
    },
    "bold": {
        "border_radius": "0px",
        "shadows": "hard",
        "typography": {"primary": "Condensed Grotesk", "scale": {"h1": "48px", "body": "16px"}},
        "spacing_scale": "compact",
        "motion": "high",
        "notes": "High contrast, oversized headlines, loud accent color"
    },
    "calm": {
        "border_radius": "14px",
        "shadows": "none",
        "typography": {"primary": "Light Sans", "scale": {"h1": "34px", "body": "17px"}},
        "spacing_scale": "airy",
        "motion": "subtle",
        "notes": "Plenty of whitespace, pale backgrounds, slow fades"
    },
    "technical": {
        "border_radius": "6px",
        "shadows": "minimal",
        "typography": {"primary": "Neutral Sans", "scale": {"h1": "34px", "body": "15px"}},
        "spacing_scale": "compact",
        "motion": "moderate",
        "notes": "Sharp, efficient, neutral color palettes"
    },
    "warm": {
        "border_radius": "10px",
        "shadows": "soft",
        "typography": {"primary": "Friendly Serif", "scale": {"h1": "36px", "body": "17px"}},
        "spacing_scale": "balanced",
        "motion": "moderate",
        "notes": "Inviting photography, warm neutrals, handwritten accents"
    },
}
