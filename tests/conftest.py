"""Shared fixtures for the BrandForge test suite."""

import pytest
from fastapi.testclient import TestClient

from brandforge.main import app

SCENARIO_IDEA = "eco-friendly sneaker brand for Gen Z"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def sample_ideas():
    """One idea per industry profile plus a few awkward inputs."""
    return [
        SCENARIO_IDEA,
        "I want to build an eco-friendly sneaker brand for Gen Z that focuses on sustainability and minimalist design.",
        "Late-night coffee and dessert bar for college students",
        "Home workout programs for busy parents",
        "Mental health check-ins for remote workers",
        "Luxury skincare with organic ingredients",
        "A budgeting app that helps students save money",
        "Online coding bootcamp for career changers",
        "AI tool that writes API docs for developers",
        "Adventure travel trips for retirees",
        "Subscription box of healthy treats for dogs",
        "Cozy candles and bedding for small apartments",
        "Something nobody has thought of yet",
        "x",
        "!!!",
        "Ünïcödé idea ☕ with emoji",
    ]
