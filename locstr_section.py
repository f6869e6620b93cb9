# -*- coding: utf-8 -*-
from collections import namedtuple
from enum import IntEnum


class Language(IntEnum):
    """Languages a locale_string.txt file can carry, in output order."""
    PL = 0
    EN = 1

    @property
    def tag(self):
        return self.name

    @classmethod
    def variant_count(cls):
        return len(cls)

    @classmethod
    def from_tag(cls, tag):
        try:
            return cls[tag]
        except KeyError:
            raise ValueError(f"Language tag '{tag}' is not one of {', '.join(lang.tag for lang in cls)}.") from None

    def __str__(self):
        return self.name


Translation = namedtuple("Translation", ["language", "text"])


class Section:
    """
    A single localizable string: a label plus one text per language.

    The translations dict is keyed by Language. Iterate it through
    iter_translations() to get Language order regardless of the order
    entries were inserted in.
    """

    def __init__(self, label="", translations=None):
        self.label = label
        self.translations = dict(translations) if translations else {}

    def translation_count(self):
        return len(self.translations)

    def is_complete(self):
        return self.translation_count() == Language.variant_count()

    def iter_translations(self):
        for language in sorted(self.translations):
            yield Translation(language, self.translations[language])

    def __eq__(self, other):
        if not isinstance(other, Section):
            return NotImplemented
        return self.label == other.label and self.translations == other.translations

    def __repr__(self):
        texts = ", ".join(f"{t.language!s}={t.text!r}" for t in self.iter_translations())
        return f"Section(label={self.label!r}, {texts})"
