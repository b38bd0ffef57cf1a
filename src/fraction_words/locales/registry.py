"""Locale lookup."""
from __future__ import annotations

from types import MappingProxyType

from fraction_words.config import Settings
from fraction_words.locales.en import ENGLISH
from fraction_words.models.grammar import LocaleGrammar

LOCALES: MappingProxyType[str, LocaleGrammar] = MappingProxyType({
    ENGLISH.name: ENGLISH,
})


def available_locales() -> list[str]:
    return sorted(LOCALES)


def get_grammar(name: str | None = None, settings: Settings | None = None) -> LocaleGrammar:
    """Return the grammar for ``name``, or for the configured default locale."""
    if name is None:
        if settings is None:
            settings = Settings()
        name = settings.default_locale
    grammar = LOCALES.get(name.lower())
    if grammar is None:
        raise ValueError(f"Unknown locale: {name} (available: {', '.join(available_locales())})")
    return grammar
