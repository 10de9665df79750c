"""Tests for the Filter service."""

import threading

import pytest

from language_filter import (
    Category,
    EmptyContentError,
    Filter,
    PatternError,
    ReplacementPolicy,
    UnknownContentError,
    UnknownContentFileError,
    UnknownReplacementError,
)
from language_filter.core.definitions import GARBLED_TOKEN
from language_filter.service.config import Settings


# ---------------------------------------------------------------------------
# Construction and configuration
# ---------------------------------------------------------------------------

class TestConfiguration:
    def test_defaults(self):
        f = Filter()
        assert len(f.matchlist) > 0
        assert f.exceptionlist == ()
        assert f.replacement is ReplacementPolicy.STARS
        assert f.creative_letters is False

    def test_creative_matchlist_aligned(self):
        f = Filter()
        assert len(f.creative_matchlist) == len(f.matchlist)
        assert f.creative_matchlist != f.matchlist
        assert len("".join(f.creative_matchlist)) > len("".join(f.matchlist))

    @pytest.mark.parametrize(
        "category", [Category.HATE, Category.PROFANITY, Category.SEX, Category.VIOLENCE]
    )
    def test_builtin_lists(self, category):
        assert len(Filter(matchlist=category).matchlist) > 0
        assert len(Filter(exceptionlist=category).exceptionlist) > 0

    def test_literal_list(self):
        words = ["blah\\w*", "test"]
        assert Filter(matchlist=words).matchlist == tuple(words)

    def test_file_list(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("bad\nugly\n", encoding="utf-8")
        f = Filter(matchlist=path, exceptionlist=str(path))
        assert f.matchlist == ("bad", "ugly")
        assert f.exceptionlist == ("bad", "ugly")

    def test_invalid_options(self, tmp_path):
        with pytest.raises(EmptyContentError):
            Filter(matchlist=[])
        with pytest.raises(UnknownContentError):
            Filter(exceptionlist={"bad": 1})
        with pytest.raises(UnknownContentFileError):
            Filter(matchlist=tmp_path / "missing.txt")
        with pytest.raises(UnknownReplacementError):
            Filter(replacement="asterisks")

    def test_setters_rebuild_creative_list(self):
        f = Filter(matchlist=["bad", "ugly"])
        f.matchlist = ["worse"]
        assert f.matchlist == ("worse",)
        assert len(f.creative_matchlist) == 1

    def test_rejected_setters_keep_previous_config(self):
        f = Filter(matchlist=["bad"], exceptionlist=["bad boy"], replacement="vowels")
        with pytest.raises(EmptyContentError):
            f.matchlist = []
        with pytest.raises(UnknownContentError):
            f.exceptionlist = 3.5
        with pytest.raises(UnknownReplacementError):
            f.replacement = "bogus"
        assert f.matchlist == ("bad",)
        assert f.exceptionlist == ("bad boy",)
        assert f.replacement is ReplacementPolicy.VOWELS

    def test_default_sources(self):
        f = Filter(matchlist=["bad"], exceptionlist=["bad boy"])
        f.exceptionlist = Category.DEFAULT
        assert f.exceptionlist == ()
        f.matchlist = Category.DEFAULT
        assert f.matchlist == Filter(matchlist=Category.PROFANITY).matchlist

    def test_from_settings(self):
        settings = Settings(
            default_category="sex", replacement="vowels", creative_letters=True
        )
        f = Filter.from_settings(settings)
        assert f.matchlist == Filter(matchlist=Category.SEX).matchlist
        assert f.replacement is ReplacementPolicy.VOWELS
        assert f.creative_letters is True


# ---------------------------------------------------------------------------
# match / matched / sanitize
# ---------------------------------------------------------------------------

class TestLanguage:
    def test_simple_match(self):
        f = Filter(matchlist=["bad"])
        assert f.match("this is bad")
        assert f.matched("this is bad") == ["bad"]
        assert f.sanitize("this is bad") == "this is ***"

    def test_no_match(self):
        f = Filter(matchlist=["bad"])
        assert not f.match("this is badly good")
        assert f.matched("this is badly good") == []
        assert f.sanitize("this is badly good") == "this is badly good"

    @pytest.mark.parametrize("text", ["bad", "bad x", "x bad", "x_bad_x", "x-bad-x", "x.bad.x"])
    def test_fenced_match(self, text):
        assert Filter(matchlist=["bad"]).match(text)

    @pytest.mark.parametrize("text", ["hi", "ba", "", None])
    def test_short_text_is_never_matched(self, text):
        f = Filter(matchlist=["hi", "ba", "\\w*"], replacement="garbled")
        assert not f.match(text)
        assert f.matched(text) == []
        assert f.sanitize(text) == text

    def test_three_characters_is_enough(self):
        assert Filter(matchlist=["bad"]).match("bad")

    def test_matched_follows_list_order(self):
        assert Filter(matchlist=["bad", "ugly"]).matched("bad and ugly") == ["bad", "ugly"]
        assert Filter(matchlist=["ugly", "bad"]).matched("bad and ugly") == ["ugly", "bad"]

    def test_matched_deduplicates_by_value(self):
        f = Filter(matchlist=["bad", "ba\\w"])
        assert f.matched("bad bad BAD") == ["bad", "BAD"]

    def test_matched_reports_substrings(self):
        f = Filter(matchlist=["blah\\w*"])
        assert f.matched("blahblah and blahs") == ["blahblah", "blahs"]

    def test_malformed_fragment_raises(self):
        f = Filter(matchlist=["bad("])
        with pytest.raises(PatternError):
            f.match("bad text")


class TestExceptions:
    def test_fragment_inside_exception_word(self):
        f = Filter(matchlist=["ass"], exceptionlist=["classic"])
        assert not f.match("a classic car")
        assert f.sanitize("a classic car") == "a classic car"

    def test_exception_protects_contained_match(self):
        f = Filter(matchlist=["ass"], exceptionlist=["ass-kicking"])
        assert not f.match("what an ass-kicking day")
        assert f.matched("what an ass-kicking day") == []
        assert f.sanitize("what an ass-kicking day") == "what an ass-kicking day"

    def test_unprotected_occurrences_still_match(self):
        f = Filter(matchlist=["ass"], exceptionlist=["ass-kicking"])
        text = "ass-kicking and ass"
        assert f.match(text)
        assert f.matched(text) == ["ass"]
        assert f.sanitize(text) == "ass-kicking and ***"

    def test_partial_overlap_does_not_protect(self):
        f = Filter(matchlist=["bad boy"], exceptionlist=["boy scout"])
        assert f.matched("bad boy scout") == ["bad boy"]

    def test_self_overlapping_exception(self):
        f = Filter(matchlist=["bad"], exceptionlist=["bad bad"])
        assert f.sanitize("bad bad bad") == "bad bad ***"
        assert f.matched("bad bad bad") == ["bad"]
        assert f.match("bad bad bad")

    def test_sanitize_rescans_exceptions_between_patterns(self):
        f = Filter(matchlist=["bad", "ass"], exceptionlist=["ass-kicking"])
        assert f.sanitize("bad ass-kicking ass") == "*** ass-kicking ***"

    def test_exceptions_are_not_creative(self):
        f = Filter(matchlist=["ass"], exceptionlist=["ass-kicking"], creative_letters=True)
        assert not f.match("ass-kicking")
        assert f.match("a55-kicking")


class TestCreativeLetters:
    def test_leetspeak_matches(self):
        f = Filter(matchlist=["bad"], creative_letters=True)
        assert f.match("b4d")
        assert f.match("8@d")
        assert f.matched("so b4d") == ["b4d"]

    def test_literal_list_ignores_leetspeak(self):
        assert not Filter(matchlist=["bad"]).match("b4d")

    def test_toggle(self):
        f = Filter(matchlist=["bad"])
        f.creative_letters = True
        assert f.match("b4d")
        f.creative_letters = False
        assert not f.match("b4d")

    def test_creative_sanitize(self):
        f = Filter(matchlist=["bad"], creative_letters=True)
        assert f.sanitize("that was b4d") == "that was ***"

    def test_creative_keeps_regex_escapes(self):
        f = Filter(matchlist=["blah\\w*"], creative_letters=True)
        assert f.matched("bl4hing") == ["bl4hing"]


class TestReplacement:
    @pytest.mark.parametrize(
        "policy, expected",
        [
            ("stars", "***"),
            ("vowels", "b*d"),
            ("nonconsonants", "b*d"),
            ("garbled", GARBLED_TOKEN),
            ("default", GARBLED_TOKEN),
        ],
    )
    def test_policies(self, policy, expected):
        assert Filter(matchlist=["bad"], replacement=policy).sanitize("bad") == expected

    def test_replacement_setter(self):
        f = Filter(matchlist=["bad"])
        f.replacement = ReplacementPolicy.GARBLED
        assert f.sanitize("so bad") == f"so {GARBLED_TOKEN}"

    @pytest.mark.parametrize("policy", ["stars", "garbled"])
    def test_sanitize_is_idempotent(self, policy):
        f = Filter(matchlist=["bad", "ugly"], replacement=policy)
        once = f.sanitize("bad, ugly and bad-tempered")
        assert f.sanitize(once) == once

    def test_sanitize_does_not_touch_configuration(self):
        f = Filter(matchlist=["bad"], exceptionlist=["bad boy"])
        f.sanitize("bad bad boy")
        assert f.matchlist == ("bad",)
        assert f.exceptionlist == ("bad boy",)


def test_concurrent_reads_see_consistent_state():
    f = Filter(matchlist=["bad"])
    errors = []

    def reader():
        for _ in range(200):
            state = f.state
            if len(state.matchlist) != len(state.creative_matchlist):
                errors.append(state)
            f.match("bad and ugly")

    def writer():
        for i in range(50):
            f.matchlist = ["bad"] * (i % 5 + 1)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads.append(threading.Thread(target=writer))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
