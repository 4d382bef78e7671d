"""Tests for the match engine."""

import pytest

from wtf.matching.engine import FUZZY_THRESHOLD, MAX_SUGGESTIONS, MatchEngine, find_suggestions
from wtf.matching.models import Confidence, MatchQuery, Suggestion, TypoEntry


def _commands(suggestions: list[Suggestion]) -> list[str]:
    return [s.command for s in suggestions]


class TestEmptyInput:
    """Test inputs that cannot produce suggestions."""

    def test_empty_string(self) -> None:
        """Test empty input returns no suggestions."""
        assert find_suggestions("") == []

    def test_whitespace_only(self) -> None:
        """Test blank input returns no suggestions."""
        assert find_suggestions("   \t ") == []

    def test_no_match_anywhere(self) -> None:
        """Test unmatched input returns an empty list."""
        assert find_suggestions("qqq", [], [], ["git"]) == []


class TestExactMatches:
    """Test custom and built-in exact lookups."""

    def test_classic_sl(self) -> None:
        """Test the sl -> ls fix."""
        result = find_suggestions("sl", [], [("sl", "ls")])

        assert result[0] == Suggestion("ls", Confidence.EXACT, 1.0, "sl typo")

    def test_input_is_trimmed(self) -> None:
        """Test surrounding whitespace does not block exact lookup."""
        result = find_suggestions("  sl \n", [], [("sl", "ls")], [])

        assert _commands(result) == ["ls"]

    def test_exact_is_case_sensitive(self) -> None:
        """Test exact lookup does not fold case."""
        assert find_suggestions("SL", [], [("sl", "ls")], []) == []

    def test_phrase_keeps_trailing_arguments(self) -> None:
        """Test a stored phrase substitutes and keeps what follows."""
        result = find_suggestions("npm onstall express", [], [("npm onstall", "npm install")])

        assert result[0].command == "npm install express"
        assert result[0].confidence == Confidence.EXACT
        assert result[0].score == 1.0
        assert result[0].explanation == "npm typo"

    def test_phrase_preserves_argument_spacing(self) -> None:
        """Test the remainder after a phrase is reattached verbatim."""
        result = find_suggestions("npm onstall  express", [], [("npm onstall", "npm install")], [])

        assert _commands(result) == ["npm install  express"]

    def test_first_token_substitution(self) -> None:
        """Test fixing only the tool name keeps the arguments."""
        result = find_suggestions("gti status", [], [("gti", "git")])

        assert result[0] == Suggestion("git status", Confidence.EXACT, 1.0, "gti typo")
        assert _commands(result).count("git status") == 1

    def test_first_token_rejoins_with_single_spaces(self) -> None:
        """Test token substitution normalizes spacing."""
        result = find_suggestions("gti   push   origin", [], [("gti", "git")], [])

        assert _commands(result) == ["git push origin"]

    def test_whole_input_and_first_token(self) -> None:
        """Test a whole-input fix and a token fix can both be offered."""
        builtin = [("gti status", "git status --short"), ("gti", "git")]

        result = find_suggestions("gti status", [], builtin, [])

        assert _commands(result) == ["git status --short", "git status"]


class TestCustomPriority:
    """Test custom typos outrank the built-in table."""

    def test_custom_beats_builtin(self) -> None:
        """Test a custom fix is listed before any built-in one."""
        result = find_suggestions("gti", [("gti", "git status")], [("gti", "git")])

        commands = _commands(result)
        assert commands[0] == "git status"
        assert result[0].confidence == Confidence.CUSTOM
        assert result[0].explanation == "custom fix"
        if "git" in commands:
            assert commands.index("git status") < commands.index("git")

    def test_custom_skips_builtin_for_same_wrong(self) -> None:
        """Test the built-in entry for a custom-owned typo is not offered."""
        result = find_suggestions("gti", [("gti", "git status")], [("gti", "git")], ["git"])

        assert _commands(result) == ["git status"]

    def test_custom_first_token(self) -> None:
        """Test a custom single-word typo fixes the tool name."""
        result = find_suggestions("dc up -d", [TypoEntry("dc", "docker compose")], [], [])

        assert result == [Suggestion("docker compose up -d", Confidence.CUSTOM, 1.0, "custom fix")]

    def test_custom_phrase(self) -> None:
        """Test a custom phrase keeps trailing arguments."""
        custom = [TypoEntry("k get po", "kubectl get pods")]

        result = find_suggestions("k get po -A", custom, [], [])

        assert _commands(result) == ["kubectl get pods -A"]

    def test_priority_order(self) -> None:
        """Test Custom > Exact > Fuzzy regardless of score."""
        engine = MatchEngine(scorer=lambda a, b: 1.0)
        custom = [("gti status", "git status --short")]
        builtin = [("gti", "git")]

        result = engine.find_suggestions("gti status -b", custom, builtin, ["gut"])

        assert [s.confidence for s in result] == [
            Confidence.CUSTOM,
            Confidence.EXACT,
            Confidence.FUZZY,
        ]
        assert _commands(result) == ["git status --short -b", "git status -b", "gut status -b"]


class TestFuzzyMatches:
    """Test similarity matching against canonical commands."""

    def test_fuzzy_first_token(self) -> None:
        """Test a close tool name is suggested with its arguments."""
        result = find_suggestions("dokcer ps -a", [], [], ["docker"])

        assert len(result) == 1
        assert result[0].command == "docker ps -a"
        assert result[0].confidence == Confidence.FUZZY
        assert result[0].score >= FUZZY_THRESHOLD
        assert result[0].explanation == "similar to 'docker'"

    def test_fuzzy_multi_word_canonical(self) -> None:
        """Test a canonical phrase is compared with as many leading tokens."""
        result = find_suggestions("git stauts -s", [], [], ["git", "git status"])

        assert _commands(result) == ["git status -s"]
        assert result[0].score == pytest.approx(0.98, abs=1e-3)

    def test_fuzzy_ignores_case(self) -> None:
        """Test fuzzy comparison lowercases the typed tokens."""
        result = find_suggestions("DOKCER ps", [], [], ["docker"])

        assert _commands(result) == ["docker ps"]

    def test_identity_not_suggested(self) -> None:
        """Test a correct tool name is not offered back unchanged."""
        assert find_suggestions("git push", [], [], ["git"]) == []

    def test_known_subcommand_not_rewritten(self) -> None:
        """Test a correct subcommand is not swapped for a similar one."""
        result = find_suggestions("git push", [], [], ["git", "git push", "git pull", "git stash"])

        assert result == []

    def test_every_differing_word_must_be_similar(self) -> None:
        """Test a close phrase score alone does not rewrite a dissimilar word."""
        engine = MatchEngine(scorer=lambda a, b: 0.95 if " " in a else 0.5)

        result = engine.find_suggestions("git shove", [], [], ["git push"])

        assert result == []

    def test_threshold_is_inclusive(self) -> None:
        """Test 0.85 is accepted and 0.84 is not."""
        scores = {"alpha": 0.85, "beta": 0.84}
        engine = MatchEngine(scorer=lambda a, b: scores[b])

        result = engine.find_suggestions("alpah", [], [], ["alpha", "beta"])

        assert _commands(result) == ["alpha"]
        assert result[0].score == 0.85

    def test_sorted_by_score(self) -> None:
        """Test fuzzy suggestions are ordered by descending score."""
        scores = {"aa": 0.86, "bb": 0.95, "cc": 0.9}
        engine = MatchEngine(scorer=lambda a, b: scores[b])

        result = engine.find_suggestions("zz", [], [], ["aa", "bb", "cc"])

        assert _commands(result) == ["bb", "cc", "aa"]

    def test_skipped_when_custom_owns_token(self) -> None:
        """Test no fuzzy pass runs for a custom-owned first token."""
        engine = MatchEngine(scorer=lambda a, b: 1.0)

        result = engine.find_suggestions("gti log", [("gti", "git")], [], ["gut"])

        assert _commands(result) == ["git log"]

    def test_deduplicated_against_exact(self) -> None:
        """Test a fuzzy result equal to an exact one is dropped."""
        engine = MatchEngine(scorer=lambda a, b: 0.9)

        result = engine.find_suggestions("gti status", [], [("gti", "git")], ["git"])

        assert result == [Suggestion("git status", Confidence.EXACT, 1.0, "gti typo")]


class TestOutputInvariants:
    """Test bounded, unique and deterministic output."""

    def test_truncated_to_limit(self) -> None:
        """Test at most five suggestions are returned."""
        canonical = ["gitk", "gits", "gitx", "gitt", "gitz", "gita"]

        result = find_suggestions("gitq", [], [], canonical)

        assert len(result) == MAX_SUGGESTIONS
        assert _commands(result) == ["gitk", "gits", "gitx", "gitt", "gitz"]
        assert all(s.confidence == Confidence.FUZZY for s in result)

    def test_limit_is_configurable(self) -> None:
        """Test a smaller limit truncates further."""
        engine = MatchEngine(limit=2)

        result = engine.find_suggestions("gitq", [], [], ["gitk", "gits", "gitx"])

        assert len(result) == 2

    def test_unique_commands(self) -> None:
        """Test no command appears twice."""
        custom = [("gti", "git"), ("gti status", "git status")]
        builtin = [("gti", "git"), ("gti status", "git status")]

        for text in ["gti", "gti status", "gti status -s", "sl", "dokcer ps"]:
            result = find_suggestions(text, custom, builtin)
            commands = _commands(result)
            assert len(commands) == len(set(commands))
            assert len(commands) <= MAX_SUGGESTIONS

    def test_idempotent(self) -> None:
        """Test repeated calls return identical output."""
        custom = [TypoEntry("gti", "git status")]

        first = find_suggestions("dokcer run -it ubuntu", custom)
        second = find_suggestions("dokcer run -it ubuntu", custom)

        assert first == second

    def test_inputs_not_mutated(self) -> None:
        """Test the caller's collections are left untouched."""
        custom = [TypoEntry("gti", "git")]
        builtin = [TypoEntry("sl", "ls")]
        canonical = ["git", "ls"]

        find_suggestions("gti status", custom, builtin, canonical)

        assert custom == [TypoEntry("gti", "git")]
        assert builtin == [TypoEntry("sl", "ls")]
        assert canonical == ["git", "ls"]


class TestDefaultTables:
    """Test end-to-end behaviour with the compiled-in data."""

    def test_sl(self) -> None:
        """Test sl resolves to ls."""
        result = find_suggestions("sl")

        assert result[0].command == "ls"
        assert result[0].confidence == Confidence.EXACT

    def test_gti_status(self) -> None:
        """Test gti status resolves to git status once."""
        result = find_suggestions("gti status")

        assert result[0] == Suggestion("git status", Confidence.EXACT, 1.0, "gti typo")
        assert _commands(result).count("git status") == 1

    def test_npm_onstall(self) -> None:
        """Test the phrase fix keeps the package argument."""
        result = find_suggestions("npm onstall express")

        assert result[0].command == "npm install express"
        assert result[0].confidence == Confidence.EXACT

    @pytest.mark.parametrize("command", ["git push", "npm test", "git fetch origin", "git"])
    def test_correct_commands_get_no_fuzzy_fix(self, command) -> None:
        """Test valid commands are not rewritten into other commands."""
        result = find_suggestions(command)

        assert [s for s in result if s.confidence == Confidence.FUZZY] == []

    def test_fuzzy_tool_name(self) -> None:
        """Test an unknown misspelling falls back to similarity."""
        result = find_suggestions("kubectk get pods")

        assert result
        assert result[0].command == "kubectl get pods"
        assert result[0].confidence == Confidence.FUZZY


class TestModels:
    """Test the suggestion data shapes."""

    def test_suggestion_to_dict(self) -> None:
        """Test serialization uses the confidence value."""
        suggestion = Suggestion("ls", Confidence.EXACT, 1.0, "sl typo")

        assert suggestion.to_dict() == {
            "command": "ls",
            "confidence": "exact",
            "score": 1.0,
            "explanation": "sl typo",
        }

    def test_suggestion_equality(self) -> None:
        """Test equality covers every field."""
        a = Suggestion("ls", Confidence.EXACT, 1.0, "sl typo")

        assert a == Suggestion("ls", Confidence.EXACT, 1.0, "sl typo")
        assert a != Suggestion("ls", Confidence.CUSTOM, 1.0, "sl typo")

    def test_confidence_priority(self) -> None:
        """Test ranking weights."""
        assert Confidence.CUSTOM.priority > Confidence.EXACT.priority > Confidence.FUZZY.priority

    def test_match_query(self) -> None:
        """Test query normalization keeps the raw text."""
        query = MatchQuery("  gti   status -s ")

        assert query.raw == "  gti   status -s "
        assert query.text == "gti   status -s"
        assert query.tokens == ("gti", "status", "-s")
        assert query.head == "gti"
        assert query.tail == ("status", "-s")
        assert query.replace_head("git") == "git status -s"
        assert query.replace_head("git status", 2) == "git status -s"
