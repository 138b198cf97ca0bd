import logging
import os
from enum import Enum

log = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"


class PluralPolicy(str, Enum):
    ALWAYS = "always"
    WITHOUT_UNIT = "without-unit"
    NEVER = "never"

    @classmethod
    def of(cls, value):
        """Unknown or missing values behave like ``without-unit``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            log.debug("unknown plural policy %r, using without-unit", value)
            return cls.WITHOUT_UNIT


# (value, name, plural_food_handling)
LOCALES = [
    ("en-US", "American English", PluralPolicy.ALWAYS),
    ("en-GB", "British English", PluralPolicy.ALWAYS),
    ("de-DE", "Deutsch", PluralPolicy.WITHOUT_UNIT),
    ("fr-FR", "Français", PluralPolicy.WITHOUT_UNIT),
    ("nl-NL", "Nederlands", PluralPolicy.WITHOUT_UNIT),
    ("es-ES", "Español", PluralPolicy.WITHOUT_UNIT),
    ("it-IT", "Italiano", PluralPolicy.WITHOUT_UNIT),
    ("pl-PL", "Polski", PluralPolicy.WITHOUT_UNIT),
    ("ja-JP", "日本語", PluralPolicy.NEVER),
    ("ko-KR", "한국어", PluralPolicy.NEVER),
    ("zh-CN", "简体中文", PluralPolicy.NEVER),
    ("zh-TW", "繁體中文", PluralPolicy.NEVER),
]


def plural_policy_for(locale) -> PluralPolicy:
    for value, _, handling in LOCALES:
        if value == locale:
            return handling
    log.debug("no plural policy for locale %r, using without-unit", locale)
    return PluralPolicy.WITHOUT_UNIT


def active_locale() -> str:
    return os.environ.get("RECIPE_LOCALE") or DEFAULT_LOCALE


def active_plural_policy() -> PluralPolicy:
    return plural_policy_for(active_locale())
