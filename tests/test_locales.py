"""Tests for the locale table and plural policy lookup."""

import pytest

from ingredient_display.locales import (
    DEFAULT_LOCALE,
    LOCALES,
    PluralPolicy,
    active_locale,
    active_plural_policy,
    plural_policy_for,
)


def test_known_locales():
    assert plural_policy_for("en-US") is PluralPolicy.ALWAYS
    assert plural_policy_for("de-DE") is PluralPolicy.WITHOUT_UNIT
    assert plural_policy_for("ja-JP") is PluralPolicy.NEVER


@pytest.mark.parametrize("locale", ["xx-XX", "", None])
def test_unknown_locale_defaults_to_without_unit(locale):
    assert plural_policy_for(locale) is PluralPolicy.WITHOUT_UNIT


def test_locale_values_unique():
    values = [v for v, _, _ in LOCALES]
    assert len(values) == len(set(values))


def test_active_policy_follows_environment(monkeypatch):
    monkeypatch.setenv("RECIPE_LOCALE", "zh-CN")
    assert active_plural_policy() is PluralPolicy.NEVER
    monkeypatch.setenv("RECIPE_LOCALE", "nowhere")
    assert active_plural_policy() is PluralPolicy.WITHOUT_UNIT


def test_policy_of():
    assert PluralPolicy.of("never") is PluralPolicy.NEVER
    assert PluralPolicy.of(PluralPolicy.ALWAYS) is PluralPolicy.ALWAYS
    assert PluralPolicy.of("sometimes") is PluralPolicy.WITHOUT_UNIT
    assert PluralPolicy.of(None) is PluralPolicy.WITHOUT_UNIT


def test_default_locale_when_environment_unset(monkeypatch):
    monkeypatch.delenv("RECIPE_LOCALE", raising=False)
    assert active_locale() == DEFAULT_LOCALE == "en-US"
    assert active_plural_policy() is PluralPolicy.ALWAYS
