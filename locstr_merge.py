# -*- coding: utf-8 -*-


def merge_sections(current_sections, newer_sections):
    """
    Overlay newer translations onto the current list of sections.

    Sections are matched by label. When a newer section matches a current
    one, each of its translations overwrites (or is added to) the current
    section in place; languages the newer section does not carry are left
    alone. Newer sections with no match are appended after all current
    sections, keeping their relative order.

    When the current list holds the same label more than once, only the
    first occurrence receives the newer translations.

    Args:
        current_sections (list[Section]): Sections from the current file.
        newer_sections (list[Section]): Sections from the newer file.

    Returns:
        list[Section]: Current sections in their original order followed by
        the unmatched newer sections.
    """
    merged = list(current_sections)

    label_index = {}
    for index, section in enumerate(merged):
        label_index.setdefault(section.label, index)

    for newer in newer_sections:
        index = label_index.get(newer.label)
        if index is None:
            merged.append(newer)
            continue

        # Newer translations always win
        matched = merged[index]
        for language, text in newer.translations.items():
            matched.translations[language] = text

    return merged
