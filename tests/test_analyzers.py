"""Tests for brandforge.analyzers."""

import pytest

from brandforge.analyzers import (
    GENERAL_PROFILE,
    INDUSTRY_PROFILES,
    TONE_LABELS,
    analyze_idea,
    extract_keywords,
    industry_profile,
    infer_audience,
    infer_industry,
    infer_tone,
    stem_hits,
    tokenize,
)


class TestStemHits:
    def test_short_stem_needs_whole_token(self):
        assert not stem_hits("app", ["apparel"], "apparel")
        assert stem_hits("app", ["app"], "app")

    def test_short_stem_accepts_plural(self):
        assert stem_hits("dog", ["dogs"], "dogs")

    def test_long_stem_matches_prefix(self):
        assert stem_hits("sustainab", ["sustainability"], "sustainability")

    def test_phrase_matched_in_text(self):
        text = "made for gen z shoppers"
        assert stem_hits("gen z", tokenize(text), text)
        assert not stem_hits("gen z", tokenize("genetic zoo"), "genetic zoo")


class TestExtractKeywords:
    def test_drops_stopwords_and_filler(self):
        idea = "I want to build an eco-friendly sneaker brand for Gen Z"
        assert extract_keywords(idea) == ["eco", "sneaker"]

    def test_order_kept_and_duplicates_dropped(self):
        assert extract_keywords("Candles, candles and more CANDLES for cozy homes") == ["candles", "cozy", "homes"]

    def test_empty_when_nothing_salient(self):
        assert extract_keywords("!!! a the") == []


class TestInferIndustry:
    @pytest.mark.parametrize("idea,expected", [
        ("eco-friendly sneaker brand for Gen Z", "fashion"),
        ("A budgeting app that helps students save money", "finance"),
        ("Luxury skincare with organic ingredients", "beauty"),
        ("Online coding bootcamp for career changers", "education"),
        ("Adventure travel trips for retirees", "travel"),
        ("organic apparel", "fashion"),
    ])
    def test_keyword_scoring(self, idea, expected):
        assert infer_industry(idea) == expected

    def test_tie_goes_to_table_order(self):
        # one hit each for food ("coffee") and pets ("dog")
        assert infer_industry("coffee subscription for dog owners") == "food"

    def test_no_hits_is_general(self):
        assert infer_industry("Something nobody has thought of") == "general"
        assert industry_profile("general") is GENERAL_PROFILE


class TestInferAudience:
    def test_first_matching_rule(self):
        assert infer_audience("eco-friendly sneaker brand for Gen Z", "fashion").startswith("Gen Z")
        assert infer_audience("meal kits for busy parents", "food") == "Parents and young families"
        assert infer_audience("A budgeting app that helps students save money", "finance") == "Students on a budget"

    def test_falls_back_to_industry_default(self):
        assert infer_audience("Adventure travel trips", "travel") == INDUSTRY_PROFILES["travel"]["audience"]


class TestInferTone:
    def test_scored_cue(self):
        assert infer_tone("eco-friendly sneaker brand for Gen Z", "fashion") == "earthy"

    def test_tie_goes_to_table_order(self):
        # "luxury" (premium) vs "organic" (earthy)
        assert infer_tone("Luxury skincare with organic ingredients", "beauty") == "premium"

    def test_falls_back_to_industry_default(self):
        assert infer_tone("A budgeting app that helps students save money", "finance") == "technical"
        assert infer_tone("Something nobody has thought of", "general") == GENERAL_PROFILE["tone"]

    def test_every_default_tone_has_a_label(self):
        for profile in list(INDUSTRY_PROFILES.values()) + [GENERAL_PROFILE]:
            assert profile["tone"] in TONE_LABELS


class TestAnalyzeIdea:
    def test_scenario_profile(self):
        profile = analyze_idea("eco-friendly sneaker brand for Gen Z")
        assert profile.industry == "fashion"
        assert profile.tone == "earthy"
        assert profile.focus == "sneaker"

    def test_focus_skips_tone_cues(self):
        profile = analyze_idea("Quirky puzzles for commuters")
        assert profile.industry == "general"
        assert profile.focus == "puzzles"

    def test_focus_empty_without_keywords(self):
        assert analyze_idea("!!!").focus == ""
