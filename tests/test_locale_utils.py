"""Tests for locale_utils.py.

Covers normalize_locale, get_babel_locale, locale_candidates and
resolve_babel_locale. Includes property-based tests with Hypothesis for
locale normalization.
"""

import logging

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from dateparts.locale_utils import (
    get_babel_locale,
    locale_candidates,
    normalize_locale,
    resolve_babel_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("pt-BR") == "pt_BR"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"

    def test_surrounding_whitespace_stripped(self) -> None:
        assert normalize_locale(" de-DE ") == "de_DE"

    @given(st.text(alphabet=st.sampled_from("abcXYZ-_"), max_size=20))
    def test_output_has_no_hyphens(self, code: str) -> None:
        assert "-" not in normalize_locale(code)

    @given(st.text(alphabet=st.sampled_from("abcXYZ-_"), max_size=20))
    def test_idempotent(self, code: str) -> None:
        once = normalize_locale(code)
        assert normalize_locale(once) == once


class TestGetBabelLocale:
    """Test get_babel_locale function with caching."""

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert isinstance(locale, Locale)
        assert locale.language == "pt"
        assert locale.territory == "BR"

    def test_caching(self) -> None:
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE")

    def test_invalid_locale_raises(self) -> None:
        with pytest.raises((UnknownLocaleError, ValueError)):
            get_babel_locale("invalid_locale_code_xyz")


class TestLocaleCandidates:
    """Test locale_candidates truncation order."""

    def test_truncates_from_the_right(self) -> None:
        assert locale_candidates("zh-Hant-TW") == ("zh_Hant_TW", "zh_Hant", "zh")

    def test_language_only(self) -> None:
        assert locale_candidates("pt") == ("pt",)

    def test_empty_parts_ignored(self) -> None:
        assert locale_candidates("pt--BR") == ("pt_BR", "pt")

    def test_empty_code(self) -> None:
        assert locale_candidates("") == ()


class TestResolveBabelLocale:
    """Test resolve_babel_locale fallback chain."""

    @pytest.fixture(autouse=True)
    def _clear_cache(self) -> None:
        resolve_babel_locale.cache_clear()

    def test_exact_match(self) -> None:
        locale, is_fallback = resolve_babel_locale("pt-BR")
        assert str(locale) == "pt_BR"
        assert is_fallback is False

    def test_unknown_territory_falls_back_to_language(self) -> None:
        locale, is_fallback = resolve_babel_locale("pt-XX")
        assert locale.language == "pt"
        assert is_fallback is True

    def test_unknown_language_falls_back_to_default(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="dateparts.locale_utils"):
            locale, is_fallback = resolve_babel_locale("xx-UNKNOWN")
        assert str(locale) == "en_US"
        assert is_fallback is True
        assert "Unknown locale 'xx-UNKNOWN'" in caplog.text

    @pytest.mark.parametrize("code", ["", "   ", "!!", "123"])
    def test_malformed_codes_never_raise(self, code: str) -> None:
        locale, is_fallback = resolve_babel_locale(code)
        assert str(locale) == "en_US"
        assert is_fallback is True
