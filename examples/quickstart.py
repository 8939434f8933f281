"""Quickstart example for phraselex.

Demonstrates plural variant selection across locales, positional
interpolation, and the silent fallbacks used on display paths.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from phraselex import InvalidPhraseError, Translator


def example_1_english() -> None:
    """Example 1: Singular/plural in English."""
    print("=" * 60)
    print("Example 1: English (singular/plural)")
    print("=" * 60)

    t = Translator("en-US", {"cart.items": ["{0} item in your cart", "{0} items in your cart"]})
    for count in (0, 1, 2):
        print(t.translate("cart.items", count))
    print()


def example_2_slavic() -> None:
    """Example 2: Three forms in Polish and Russian."""
    print("=" * 60)
    print("Example 2: Polish and Russian (one/few/many)")
    print("=" * 60)

    pl = Translator("pl", {"files": ["{0} plik", "{0} pliki", "{0} plików"]})
    ru = Translator("ru-RU", {"files": ["{0} файл", "{0} файла", "{0} файлов"]})
    for count in (1, 2, 5, 22, 25):
        print(f"pl: {pl.translate('files', count):<12} ru: {ru.translate('files', count)}")
    print()


def example_3_arabic() -> None:
    """Example 3: All six Arabic forms."""
    print("=" * 60)
    print("Example 3: Arabic (six forms)")
    print("=" * 60)

    forms = ["zero: {0}", "one: {0}", "two: {0}", "few: {0}", "many: {0}", "other: {0}"]
    ar = Translator("ar-EG", {"books": forms})
    for count in (0, 1, 2, 3, 11, 100):
        print(ar.translate("books", count))
    print()


def example_4_interpolation_and_fallbacks() -> None:
    """Example 4: Interpolation, missing keys and bad templates."""
    print("=" * 60)
    print("Example 4: Interpolation and Fallbacks")
    print("=" * 60)

    t = Translator("", {
        "greeting": ["{0}, your name is {0}!"],
        "pair": ["{0} and {1}"],
    })
    print(t.translate("greeting", "Ada"))
    print(t.translate("pair", "bread"))   # missing {1}: template returned
    print(t.translate("no.such.key"))     # missing key: key returned
    print()


def example_5_explicit_count() -> None:
    """Example 5: Fractional counts via translate_plural()."""
    print("=" * 60)
    print("Example 5: Explicit Counts")
    print("=" * 60)

    fr = Translator("fr", {"distance": ["{0} kilomètre vers {1}", "{0} kilomètres vers {1}"]})
    print(fr.translate_plural("distance", Decimal("1.5"), "Lyon"))
    print(fr.translate_plural("distance", 1, "Lyon"))
    print()


def example_6_validation() -> None:
    """Example 6: Rejected phrase input."""
    print("=" * 60)
    print("Example 6: Validation")
    print("=" * 60)

    t = Translator("en")
    try:
        t.extend({"ok": ["fine"], "broken": []})
    except InvalidPhraseError as e:
        print(e)
    print(f"'ok' stored: {t.has('ok')}")
    print()


if __name__ == "__main__":
    example_1_english()
    example_2_slavic()
    example_3_arabic()
    example_4_interpolation_and_fallbacks()
    example_5_explicit_count()
    example_6_validation()
