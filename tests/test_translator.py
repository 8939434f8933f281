"""Tests for the Translator API."""

import logging
from decimal import Decimal
from unittest.mock import patch

import pytest

from phraselex import Translator
from phraselex.diagnostics import InvalidPhraseError, MissingPhrasesError
from phraselex.enums import PluralFamily
from phraselex.plural import PluralFamilyResolver, build_family_map
from phraselex.runtime import is_integral

PHRASES = {
    "test.plural": ["{0} item", "{0} items"],
    "test.interpolate": ["{0}, your name is {0}!"],
    "test.multi": ["{0} {1}"],
}


@pytest.fixture
def translator() -> Translator:
    """Invariant-locale translator seeded with the basic phrases."""
    t = Translator("")
    t.extend(PHRASES)
    return t


class TestBasicScenarios:
    """Pluralization, interpolation and fallbacks."""

    def test_pluralization(self, translator: Translator) -> None:
        """0 and 2 are plural, 1 is singular."""
        assert translator.translate("test.plural", 0) == "0 items"
        assert translator.translate("test.plural", 1) == "1 item"
        assert translator.translate("test.plural", 2) == "2 items"

    def test_interpolation(self, translator: Translator) -> None:
        """Repeated placeholders reuse the same argument."""
        assert (
            translator.translate("test.interpolate", "Ada")
            == "Ada, your name is Ada!"
        )

    def test_missing_key(self, translator: Translator) -> None:
        """A missing key is returned unchanged."""
        assert translator.translate("no.such.key") == "no.such.key"
        assert translator.translate("no.such.key", 5, "x") == "no.such.key"

    def test_missing_argument(self, translator: Translator) -> None:
        """An unsatisfiable template is returned as written."""
        assert translator.translate("test.multi") == "{0} {1}"

    def test_argument_with_raising_repr(self) -> None:
        """An argument that cannot render itself leaves the template as written."""

        class Loud:
            def __repr__(self) -> str:
                msg = "boom"
                raise RuntimeError(msg)

        t = Translator("", {"k": ["{0!r}"], "s": ["{0!s}"]})
        assert t.translate("k", Loud()) == "{0!r}"
        assert t.translate("s", Loud()) == "{0!s}"

    def test_extend_then_translate(self, translator: Translator) -> None:
        """New phrases are visible immediately."""
        translator.extend({"fresh": ["Fresh {0}"]})
        assert translator.translate("fresh", "start") == "Fresh start"

    def test_unset_then_translate(self, translator: Translator) -> None:
        """Removed phrases fall back to the key."""
        translator.unset("test.plural")
        assert translator.translate("test.plural", 2) == "test.plural"

    def test_clear(self, translator: Translator) -> None:
        """clear() empties the bank."""
        translator.clear()
        assert translator.phrases == {}
        assert translator.translate("test.multi", 1, 2) == "test.multi"

    def test_replace(self, translator: Translator) -> None:
        """replace() swaps the whole bank."""
        translator.replace({"only": ["Only {0}"]})
        assert not translator.has("test.plural")
        assert translator.translate("only", "me") == "Only me"


class TestPluralSelection:
    """Variant choice from the first argument."""

    def test_non_integral_first_argument_uses_variant_zero(
        self, translator: Translator
    ) -> None:
        """Floats, Decimals, strings and bools do not trigger pluralization."""
        assert translator.translate("test.plural", 2.0) == "2.0 item"
        assert translator.translate("test.plural", Decimal(2)) == "2 item"
        assert translator.translate("test.plural", "2") == "2 item"
        assert translator.translate("test.plural", True) == "True item"

    def test_no_arguments_uses_variant_zero(self, translator: Translator) -> None:
        """With no arguments, variant 0 is used and placeholders stay."""
        assert translator.translate("test.plural") == "{0} item"

    def test_missing_variant_falls_back_to_zero(self) -> None:
        """A rule index beyond the stored variants selects variant 0."""
        t = Translator("ru", {"files": ["{0} файл", "{0} файла"]})
        assert t.translate("files", 1) == "1 файл"
        assert t.translate("files", 3) == "3 файла"
        assert t.translate("files", 5) == "5 файл"

    def test_russian_three_forms(self) -> None:
        """All three Russian forms are reachable."""
        t = Translator("ru-RU", {"files": ["{0} файл", "{0} файла", "{0} файлов"]})
        assert t.translate("files", 21) == "21 файл"
        assert t.translate("files", 22) == "22 файла"
        assert t.translate("files", 25) == "25 файлов"
        assert t.translate("files", 11) == "11 файлов"

    def test_arabic_boundaries(self) -> None:
        """Arabic selects indices 2, 3 and 5 for 2, 3 and 100."""
        forms = ["zero {0}", "one {0}", "two {0}", "few {0}", "many {0}", "other {0}"]
        t = Translator("ar-EG", {"n": forms})
        assert t.translate("n", 2) == "two 2"
        assert t.translate("n", 3) == "few 3"
        assert t.translate("n", 11) == "many 11"
        assert t.translate("n", 100) == "other 100"

    def test_arabic_negative_count_uses_default(self) -> None:
        """A negative raw index never wraps to the last variant."""
        forms = ["zero", "one", "two", "few", "many", "other"]
        t = Translator("ar", {"n": forms})
        assert t.translate("n", -1) == "zero"

    def test_chinese_single_form(self) -> None:
        """Single-form locales always use variant 0."""
        t = Translator("zh-CN", {"n": ["{0} 个", "unused"]})
        assert t.translate("n", 5) == "5 个"

    def test_unknown_locale_pluralizes_like_english(self) -> None:
        """Unrecognized locales use the German family."""
        t = Translator("tlh-QO", {"n": ["{0} thing", "{0} things"]})
        assert t.plural_family is PluralFamily.GERMAN
        assert t.translate("n", 1) == "1 thing"
        assert t.translate("n", 7) == "7 things"


class TestExplicitEntryPoints:
    """translate_plural and translate_singular."""

    def test_translate_plural_interpolates_count_first(self) -> None:
        """The count is {0}; further arguments start at {1}."""
        t = Translator("fr", {"apples": ["{0} pomme de {1}", "{0} pommes de {1}"]})
        assert t.translate_plural("apples", 1, "Normandie") == "1 pomme de Normandie"
        assert t.translate_plural("apples", 2, "Normandie") == "2 pommes de Normandie"

    def test_translate_plural_fractional(self) -> None:
        """Fractional counts are accepted by the explicit entry point."""
        t = Translator("en", {"km": ["{0} kilometre", "{0} kilometres"]})
        assert t.translate_plural("km", 1.5) == "1.5 kilometres"
        assert t.translate_plural("km", Decimal("1")) == "1 kilometre"

    def test_translate_plural_unusable_count(self) -> None:
        """A non-numeric count falls back to variant 0 without raising."""
        t = Translator("en", {"km": ["{0} kilometre", "{0} kilometres"]})
        assert t.translate_plural("km", "many") == "many kilometre"  # type: ignore[arg-type]
        assert t.translate_plural("km", float("nan")) == "nan kilometre"

    def test_translate_plural_missing_key(self) -> None:
        """Missing keys return the key."""
        assert Translator("en").translate_plural("absent", 3) == "absent"

    def test_translate_singular_ignores_integer(self) -> None:
        """translate_singular never pluralizes."""
        t = Translator("en", {"n": ["{0} item", "{0} items"]})
        assert t.translate_singular("n", 5) == "5 item"
        assert t.translate_singular("absent") == "absent"


class TestConstruction:
    """Constructors and read-only properties."""

    def test_default_locale_from_system(self) -> None:
        """Without a locale, the system locale is used."""
        with patch("phraselex.runtime.translator.get_system_locale", return_value="pl_PL"):
            t = Translator()
        assert t.locale == "pl_PL"
        assert t.plural_family is PluralFamily.POLISH

    def test_seed_phrases(self) -> None:
        """Seed phrases are available immediately."""
        t = Translator("en", PHRASES)
        assert set(t.phrases) == set(PHRASES)
        assert t.phrases["test.plural"] == ("{0} item", "{0} items")

    def test_invalid_seed_rejected(self) -> None:
        """Seed phrases are validated like extend()."""
        with pytest.raises(InvalidPhraseError):
            Translator("en", {"bad": []})

    def test_extend_none_rejected(self) -> None:
        """extend(None) raises MissingPhrasesError."""
        with pytest.raises(MissingPhrasesError):
            Translator("en").extend(None)

    def test_phrases_view_is_read_only(self) -> None:
        """The phrases view cannot be mutated."""
        t = Translator("en", PHRASES)
        with pytest.raises(TypeError):
            t.phrases["x"] = ("y",)  # type: ignore[index]

    def test_custom_resolver(self) -> None:
        """A caller-supplied resolver decides the family."""
        resolver = PluralFamilyResolver(build_family_map({PluralFamily.CHINESE: ("",)}))
        t = Translator("en", {"n": ["{0} item", "{0} items"]}, resolver=resolver)
        assert t.plural_family is PluralFamily.CHINESE
        assert t.translate("n", 3) == "3 item"

    def test_repr(self) -> None:
        """Repr names locale, family and phrase count."""
        t = Translator("de", {"a": ["x"]})
        assert repr(t) == "Translator(locale='de', plural_family=german, phrases=1)"

    def test_logs_initialization(self, caplog: pytest.LogCaptureFixture) -> None:
        """Construction is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="phraselex.runtime.translator"):
            Translator("lt")
        assert "Translator initialized for locale: 'lt'" in caplog.text


class TestIsIntegral:
    """Integral argument detection."""

    @pytest.mark.parametrize("value", [0, 1, -5, 2**70])
    def test_integers(self, value: int) -> None:
        """Python ints are integral."""
        assert is_integral(value)

    @pytest.mark.parametrize("value", [True, False, 1.0, Decimal(1), "1", None, 1j])
    def test_non_integers(self, value: object) -> None:
        """bool, float, Decimal, str, None and complex are not."""
        assert not is_integral(value)
