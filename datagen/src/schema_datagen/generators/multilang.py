"""
Multi-language consistency for translated field families.

Fields such as ``name_en`` / ``name_ar`` / ``name_fr`` form a family sharing
the base name ``name``. Within one document every member of a family is
rendered from one shared seed that indexes parallel translation tables, so
all languages describe the same synthetic entity.
"""

import logging
from dataclasses import dataclass, field

from ..sourcedata import translations
from .random_source import RandomSource

logger = logging.getLogger(__name__)

LANG_SUFFIXES = (
    "_en", "_ar", "_fr", "_es", "_de", "_zh", "_ja",
    "_ru", "_it", "_pt", "_nl", "_tr", "_hi", "_ko",
)
DEFAULT_LANGUAGE = "en"

# Shared seeds are drawn from [0, SEED_SPACE)
SEED_SPACE = 7200


@dataclass(frozen=True)
class LanguageField:
    """A field name split into its base name and language code."""

    base_name: str
    lang: str


def detect_language_field(field_name: str) -> LanguageField | None:
    """
    Split a language-suffixed field name.

    >>> detect_language_field("city_AR")
    LanguageField(base_name='city', lang='ar')

    Returns None when the name carries no known language suffix.
    """
    lower = field_name.lower()
    for suffix in LANG_SUFFIXES:
        if lower.endswith(suffix) and len(field_name) > len(suffix):
            return LanguageField(
                base_name=field_name[: -len(suffix)], lang=suffix[1:]
            )
    return None


def seed_from_value(value: str) -> int:
    """Seed derived from a rendered value (sum of its code points)."""
    return sum(ord(ch) for ch in value)


@dataclass
class LanguageContext:
    """
    Short-lived state for one properties level of one document.

    Attributes:
        seeds: Shared seed per family base name
        english_values: Default-language value per family base name
    """

    rng: RandomSource
    seeds: dict[str, int] = field(default_factory=dict)
    english_values: dict[str, str] = field(default_factory=dict)

    def assign_seed(self, base_name: str) -> int:
        """Assign the family seed once; later calls return the same seed."""
        if base_name not in self.seeds:
            self.seeds[base_name] = self.rng.rand_int(0, SEED_SPACE - 1)
        return self.seeds[base_name]

    def seed_for(self, base_name: str) -> int:
        """Family seed, falling back to one derived from the English value."""
        if base_name in self.seeds:
            return self.seeds[base_name]
        english = self.english_values.get(base_name)
        if english is not None:
            return seed_from_value(english)
        return self.assign_seed(base_name)


# ================================
# FAMILIES
# ================================


def _is_status(base: str) -> bool:
    return base == "status" or "_status" in base or "status_" in base


def detect_family(base_name: str) -> str | None:
    """Translated family a base name belongs to, or None."""
    base = base_name.lower()
    if "first" in base and "name" in base:
        return "first_name"
    if "last" in base and "name" in base:
        return "last_name"
    if ("full" in base and "name" in base) or base == "name":
        return "full_name"
    if "city" in base:
        return "city"
    if _is_status(base):
        return "status"
    if "product" in base and "name" in base:
        return "product"
    if "department" in base or "dept" in base:
        return "department"
    if any(word in base for word in ("description", "desc", "title", "comment", "note")):
        return "text"
    return None


def _column(table: dict[str, list[str]], lang: str) -> list[str]:
    # Languages without a column reuse the English column at the same index
    return table.get(lang) or table[DEFAULT_LANGUAGE]


def _pick(table: dict[str, list[str]], lang: str, seed: int) -> str:
    column = _column(table, lang)
    return column[seed % len(column)]


def _full_name(lang: str, seed: int) -> str:
    first = _pick(translations.FIRST_NAMES, lang, seed)
    last = _pick(translations.LAST_NAMES, lang, seed)
    separator = translations.FAMILY_NAME_FIRST.get(lang)
    if separator is not None:
        return f"{last}{separator}{first}"
    return f"{first} {last}"


def _text(
    base_name: str,
    lang: str,
    rng: RandomSource,
    english_value: str | None,
) -> str:
    if lang == DEFAULT_LANGUAGE:
        if english_value is not None:
            return english_value
        if "title" in base_name.lower():
            return " ".join(rng.faker.words(nb=rng.rand_int(2, 5))).capitalize()
        return rng.faker.sentence()
    if lang == "ar" and english_value:
        return translations.ARABIC_TRANSLATION_TEMPLATE.format(english=english_value)
    template = translations.TEXT_TEMPLATES.get(lang)
    if template is None:
        return english_value or rng.faker.sentence()
    return template.format(base=base_name)


def render_translated(
    base_name: str,
    lang: str,
    context: LanguageContext,
) -> str | None:
    """
    Render one member of a translated family.

    Args:
        base_name: Field name without its language suffix
        lang: Two-letter language code
        context: Per-document language state

    Returns:
        The rendered value, or None if the base name is not a translated
        family (the caller then falls back to the regular heuristics)
    """
    family = detect_family(base_name)
    if family is None:
        return None

    lang = lang.lower()
    english_value = context.english_values.get(base_name)

    if family == "text":
        return _text(base_name, lang, context.rng, english_value)

    if lang == DEFAULT_LANGUAGE and english_value is not None:
        return english_value

    seed = context.seed_for(base_name)

    if family == "first_name":
        return _pick(translations.FIRST_NAMES, lang, seed)
    if family == "last_name":
        return _pick(translations.LAST_NAMES, lang, seed)
    if family == "full_name":
        return _full_name(lang, seed)
    if family == "city":
        return _pick(translations.CITIES, lang, seed)
    if family == "status":
        return _pick(translations.STATUSES, lang, seed)
    if family == "department":
        return _pick(translations.DEPARTMENTS, lang, seed)

    prefix = translations.PRODUCT_PREFIXES.get(
        lang, translations.PRODUCT_PREFIXES[DEFAULT_LANGUAGE]
    )
    return f"{prefix} {seed % 900 + 100}"
