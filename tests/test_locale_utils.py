"""Tests for locale_utils: normalization, primary language, system locale."""

from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from phraselex.locale_utils import (
    clear_locale_cache,
    get_primary_language,
    get_system_locale,
    normalize_locale,
)


class TestNormalizeLocale:
    """normalize_locale lowercases and converts hyphens to underscores."""

    def test_bcp47_to_posix(self) -> None:
        """BCP-47 tag converted to lowercase POSIX form."""
        assert normalize_locale("en-US") == "en_us"

    def test_script_subtag(self) -> None:
        """Every hyphen is converted."""
        assert normalize_locale("bs-Latn-BA") == "bs_latn_ba"

    def test_invariant(self) -> None:
        """The empty tag stays empty."""
        assert normalize_locale("") == ""

    @given(st.text(alphabet="abcdefgXYZ-_", max_size=12))
    def test_idempotent(self, tag: str) -> None:
        """Normalizing twice changes nothing."""
        once = normalize_locale(tag)
        assert normalize_locale(once) == once
        assert "-" not in once


class TestGetPrimaryLanguage:
    """Primary-language subtag extraction."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en", "en"),
            ("en-US", "en"),
            ("EN_us", "en"),
            ("sr-Latn-RS", "sr"),
            ("de_DE.UTF-8", "de"),
            ("ca_ES@valencia", "ca"),
            ("srl-RS", "srl"),
        ],
    )
    def test_parsed_by_babel(self, tag: str, expected: str) -> None:
        """Well-formed tags reduce to their language."""
        assert get_primary_language(tag) == expected

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [("", ""), ("x1-YY", "x1"), ("en_us_extra_parts_here", "en")],
    )
    def test_unparseable_falls_back_to_split(self, tag: str, expected: str) -> None:
        """Tags Babel rejects use the text before the first separator."""
        assert get_primary_language(tag) == expected

    def test_cached(self) -> None:
        """Repeated lookups hit the cache; clearing empties it."""
        get_primary_language("fr-CA")
        get_primary_language("fr-CA")
        assert get_primary_language.cache_info().hits >= 1

        clear_locale_cache()
        assert get_primary_language.cache_info().currsize == 0


class TestGetSystemLocale:
    """Ambient locale detection."""

    def test_os_locale_preferred(self) -> None:
        """locale.getlocale() wins when it names a real locale."""
        with patch("locale.getlocale", return_value=("pl_PL", "UTF-8")):
            assert get_system_locale() == "pl_PL"

    def test_environment_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LC_ALL takes precedence over LANG when the OS locale is C."""
        monkeypatch.setenv("LC_ALL", "ru_RU.UTF-8")
        monkeypatch.setenv("LANG", "de_DE.UTF-8")
        with patch("locale.getlocale", return_value=("C", None)):
            assert get_system_locale() == "ru_RU"

    def test_pseudo_locales_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """C and POSIX values are ignored."""
        monkeypatch.setenv("LC_ALL", "C")
        monkeypatch.setenv("LC_MESSAGES", "POSIX")
        monkeypatch.setenv("LANG", "cs_CZ.UTF-8")
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "cs_CZ"

    def test_default_when_undetermined(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """With nothing set, en_US is returned."""
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "en_US"

    def test_raise_on_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """raise_on_failure turns the default into an error."""
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        with (
            patch("locale.getlocale", return_value=(None, None)),
            pytest.raises(RuntimeError, match="system locale"),
        ):
            get_system_locale(raise_on_failure=True)

    def test_getlocale_error_tolerated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A ValueError from getlocale() falls through to the environment."""
        monkeypatch.setenv("LC_ALL", "fr_FR")
        with patch("locale.getlocale", side_effect=ValueError("unknown locale")):
            assert get_system_locale() == "fr_FR"
