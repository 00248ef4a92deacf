"""
Unit tests for the individual scorers.

Tests:
- Format matching
- Acceptance criteria analysis
- Clarity scoring
- INVEST assessments
"""

import pytest

from storyscore.analysis.acceptance_criteria import analyze_acceptance_criteria
from storyscore.analysis.clarity import (
    score_acceptance_criteria,
    score_clarity,
    score_clarity_ambiguity,
    score_format,
)
from storyscore.analysis.format_matcher import match_story_format
from storyscore.analysis.invest import (
    assess_estimable,
    assess_independent,
    assess_invest,
    assess_negotiable,
    assess_small,
    assess_testable,
    assess_valuable,
)
from storyscore.models.report import CriteriaAnalysis, FormatMatch
from storyscore.models.scoring_config import DEFAULT_SCORING_CONFIG as CONFIG


# ============================================================================
# FORMAT MATCHER TESTS
# ============================================================================

class TestFormatMatcher:
    """Tests for template extraction."""

    def test_extracts_parts(self):
        match = match_story_format(
            "As a user, I want to reset my password, so that I can regain access to my account"
        )

        assert match == FormatMatch(
            persona="user",
            goal="to reset my password",
            value="I can regain access to my account",
        )

    def test_as_an_and_case_insensitive(self):
        match = match_story_format("as an Admin, i want reports, SO THAT I can audit usage")

        assert match is not None
        assert match.article == "an"
        assert match.persona == "Admin"
        assert match.goal == "reports"
        assert match.value == "I can audit usage"

    def test_match_inside_longer_text(self):
        match = match_story_format("Story: As a buyer, I want a receipt, so that I can expense it")
        assert match is not None
        assert match.persona == "buyer"

    @pytest.mark.parametrize("story", [
        "Reset password",
        "As a user I want to log in so that I can work",
        "I want to log in, so that I can work",
        "As a user, I want to log in",
    ])
    def test_no_match(self, story: str):
        assert match_story_format(story) is None


# ============================================================================
# ACCEPTANCE CRITERIA ANALYZER TESTS
# ============================================================================

class TestAcceptanceCriteriaAnalyzer:
    """Tests for AC splitting and testability counting."""

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\n  \t\n"])
    def test_empty_input(self, text):
        analysis = analyze_acceptance_criteria(text)

        assert analysis.criteria == []
        assert analysis.testable_keywords_found is False
        assert analysis.non_testable_count == 0

    def test_blank_lines_dropped_order_kept(self):
        analysis = analyze_acceptance_criteria("Given a cart\n\n   \nWhen I pay\r\nThen I get a receipt\n")

        assert analysis.criteria == ["Given a cart", "When I pay", "Then I get a receipt"]
        assert analysis.non_testable_count == 0
        assert analysis.testable_keywords_found is True

    def test_counts_non_testable(self):
        analysis = analyze_acceptance_criteria("Verify that totals add up\nLooks nice\nFast")

        assert analysis.count == 3
        assert analysis.non_testable_count == 2
        assert analysis.testable_keywords_found is True

    def test_keyword_match_is_case_insensitive_substring(self):
        analysis = analyze_acceptance_criteria("ENSURE THAT emails are sent\nAuthentication works")

        # "Authentication" contains "then"
        assert analysis.non_testable_count == 0


# ============================================================================
# CLARITY TESTS
# ============================================================================

class TestClarity:
    """Tests for format, wording and AC sub-scores."""

    def test_format_scores(self):
        match = FormatMatch(persona="user", goal="x", value="y")
        assert score_format(match, CONFIG).score == 10
        assert score_format(None, CONFIG).score == 2

    def test_short_story(self):
        result = score_clarity_ambiguity("Too short", CONFIG)

        assert result.score == 15
        assert "very short" in result.feedback

    def test_short_and_ambiguous_story(self):
        result = score_clarity_ambiguity("It could break", CONFIG)

        assert result.score == 10
        assert "very short" in result.feedback
        assert "'could'" in result.feedback

    def test_ambiguous_long_story_capped(self):
        result = score_clarity_ambiguity("As a user, I want the page to load fast etc.", CONFIG)

        assert result.score == 15
        assert "'etc.'" in result.feedback

    def test_clear_story(self):
        result = score_clarity_ambiguity("As a user, I want to export my data as CSV", CONFIG)

        assert result.score == 15
        assert result.feedback == "Language appears reasonably clear."

    def test_ac_missing(self):
        result = score_acceptance_criteria("", CriteriaAnalysis(), CONFIG)

        assert result.score == 0
        assert "Given/When/Then" in result.feedback

    def test_ac_present_but_empty(self):
        result = score_acceptance_criteria("   \n ", analyze_acceptance_criteria("   \n "), CONFIG)

        assert result.score == 5
        assert "present but empty" in result.feedback

    def test_ac_provided(self):
        text = "Given X\nWhen Y\nThen Z"
        result = score_acceptance_criteria(text, analyze_acceptance_criteria(text), CONFIG)

        assert result.score == 15
        assert "3 criteria found" in result.feedback

    def test_ac_deduction_when_most_not_testable(self):
        text = "It should just work\nMake it nice"
        result = score_acceptance_criteria(text, analyze_acceptance_criteria(text), CONFIG)

        assert result.score == 10
        assert "Verify that" in result.feedback

    def test_ac_no_deduction_at_exactly_half(self):
        text = "Given a user\nMake it nice"
        result = score_acceptance_criteria(text, analyze_acceptance_criteria(text), CONFIG)

        assert result.score == 15

    def test_ac_deduction_never_negative(self):
        config = CONFIG.from_dict({"weights": {"ac_non_testable_deduction": 50}})
        text = "Make it nice"
        result = score_acceptance_criteria(text, analyze_acceptance_criteria(text), config)

        assert result.score == 0

    def test_total(self):
        story = "As a user, I want to reset my password, so that I can regain access"
        result = score_clarity(story, "", match_story_format(story), CriteriaAnalysis())

        assert result.total_score == 10 + 15 + 0


# ============================================================================
# INVEST TESTS
# ============================================================================

class TestInvest:
    """Tests for each INVEST letter."""

    @pytest.mark.parametrize("story,expected", [
        ("As a user, I want reports once the import finishes", 3),
        ("This is dependent on the billing story", 3),
        ("As a user, I want reports", 6),
    ])
    def test_independent(self, story: str, expected: int):
        assert assess_independent(story, CONFIG).score == expected

    @pytest.mark.parametrize("story,expected", [
        ("Store the orders in the Database", 3),
        ("Expose an API endpoint for invoices", 3),
        ("Write a SQL query for totals", 3),
        ("As a user, I want to see my invoices", 8),
    ])
    def test_negotiable(self, story: str, expected: int):
        assert assess_negotiable(story, CONFIG).score == expected

    def test_valuable(self):
        clear = FormatMatch(persona="user", goal="x", value="I can regain access")
        vague = FormatMatch(persona="user", goal="x", value="  fast  ")

        result = assess_valuable(clear, CONFIG)
        assert result.score == 10
        assert "'I can regain access'" in result.justification
        assert assess_valuable(vague, CONFIG).score == 3
        assert assess_valuable(None, CONFIG).score == 3

    def test_estimable(self):
        criteria = analyze_acceptance_criteria("Given X")
        long_story = "x" * 26

        assert assess_estimable(long_story, criteria, CONFIG).score == 8
        assert assess_estimable("x" * 25, criteria, CONFIG).score == 6
        assert assess_estimable(long_story, CriteriaAnalysis(), CONFIG).score == 6

    def test_small(self):
        seven = analyze_acceptance_criteria("\n".join(["Given X"] * 7))
        eight = analyze_acceptance_criteria("\n".join(["Given X"] * 8))

        assert assess_small("x" * 200, seven, CONFIG).score == 8
        assert assess_small("x" * 201, seven, CONFIG).score == 3
        assert assess_small("x" * 50, eight, CONFIG).score == 3

    def test_testable(self):
        none = assess_testable(CriteriaAnalysis(), CONFIG)
        good = assess_testable(analyze_acceptance_criteria("Given X\nThen Y"), CONFIG)
        mixed = assess_testable(analyze_acceptance_criteria("Given X\nLooks nice"), CONFIG)
        vague = assess_testable(analyze_acceptance_criteria("Looks nice"), CONFIG)

        assert none.score == 3
        assert "cannot be assessed" in none.justification
        assert good.score == 8
        assert "AC(s)" not in good.justification
        assert mixed.score == 8
        assert "1 AC(s)" in mixed.justification
        assert vague.score == 6

    def test_total(self):
        story = "As a user, I want to reset my password, so that I can regain access to my account"
        result = assess_invest(story, match_story_format(story), CriteriaAnalysis())

        assert result.total_score == 41
