# -*- coding: utf-8 -*-
import re
from collections import Counter

from locstr_parse import LocaleStringError
from locstr_section import Language

# printf style arguments a translation has to carry over unchanged
ARGUMENT_PLACEHOLDERS = ("%d", "%s", "%ld", "%%")

# Matches one placeholder, scanning left to right so '%%d' reads as '%%' then 'd'
reArgument = re.compile(r"%(?:%|ld|d|s)")


class ArgumentMismatchError(LocaleStringError):
    def __init__(self, label, counts):
        self.label = label
        self.counts = counts
        details = ", ".join(
            f"{language!s}: {format_argument_counts(language_counts)}" for language, language_counts in counts.items()
        )
        super().__init__(f"arguments differ between translations of '{label}' ({details})")


def format_argument_counts(counts):
    found = [f"{placeholder} x{counts[placeholder]}" for placeholder in ARGUMENT_PLACEHOLDERS if counts[placeholder]]
    return " ".join(found) if found else "none"


def count_arguments(text):
    counts = Counter({placeholder: 0 for placeholder in ARGUMENT_PLACEHOLDERS})
    counts.update(reArgument.findall(text))
    return counts


def _same_arguments(texts):
    counts = [count_arguments(text) for text in texts]
    return all(count == counts[0] for count in counts[1:])


def check_string_arguments(first_text, second_text):
    return _same_arguments([first_text, second_text])


def check_translations_arguments(section):
    """True when every translation of the section carries the same arguments."""
    return _same_arguments([translation.text for translation in section.iter_translations()])


def find_incomplete_sections(sections):
    """Labels of sections missing a translation for at least one language."""
    return [section.label for section in sections if section.translation_count() != Language.variant_count()]


def find_duplicate_labels(sections):
    seen = set()
    duplicates = []
    for section in sections:
        if section.label in seen and section.label not in duplicates:
            duplicates.append(section.label)
        seen.add(section.label)
    return duplicates


def find_argument_mismatches(sections):
    return [section.label for section in sections if not check_translations_arguments(section)]


def validate_arguments(sections):
    """
    Stop at the first section whose translations carry different arguments.

    Raises:
        ArgumentMismatchError: Names the label and the per-language counts.
    """
    for section in sections:
        if not check_translations_arguments(section):
            counts = {translation.language: count_arguments(translation.text) for translation in section.iter_translations()}
            raise ArgumentMismatchError(section.label, counts)


def is_undiversified(section):
    """
    A section whose translations are all byte-identical was most likely
    copied over and never translated.
    """
    texts = [translation.text for translation in section.iter_translations()]
    return len(texts) > 1 and all(text == texts[0] for text in texts[1:])


def find_undiversified_sections(sections):
    return [section.label for section in sections if is_undiversified(section)]


# Clientside checks -----------------------------------------------------------
def find_missing_labels(first_map, second_map):
    """
    Labels present in the first clientside map but not in the second.

    Args:
        first_map (dict): Reference label -> text map.
        second_map (dict): Map checked for missing labels.

    Returns:
        list[str]: Missing labels in the first map's order.
    """
    return [label for label in first_map if label not in second_map]


def find_identical_translations(first_map, second_map):
    return [label for label, text in first_map.items() if label in second_map and second_map[label] == text]


def find_clientside_argument_mismatches(first_map, second_map):
    mismatches = []
    for label, text in first_map.items():
        if label in second_map and not check_string_arguments(text, second_map[label]):
            mismatches.append(label)
    return mismatches
