# -*- coding: utf-8 -*-
"""
Interchange with translation platforms.

PO files carry one language pair: the label goes into msgctxt, the source
language text into msgid and the target language text into msgstr.
Weblate YAML files are monolingual label -> text maps.
"""
from datetime import datetime, timezone

import polib
import ruamel.yaml
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

from locstr_parse import check_text
from locstr_section import Section

ICU_LOCALE_MAP = {
    "PL": "pl_PL",
    "EN": "en_US",
}


def get_po_metadata(language):
    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M+0000")

    return {
        "PO-Revision-Date": now,
        "Language": ICU_LOCALE_MAP[language.tag],
        "MIME-Version": "1.0",
        "Content-Type": "text/plain; charset=UTF-8",
        "Content-Transfer-Encoding": "8bit",
        "X-Generator": "locstr",
    }


def po_from_sections(sections, source_language, target_language, metadata=None):
    """
    Build a PO file pairing two languages of every section.

    Sections without source language text are skipped, an empty msgid
    would be read back as the PO header.

    Args:
        sections (list[Section]): Parsed locale_string sections.
        source_language (Language): Language written to msgid.
        target_language (Language): Language written to msgstr.
        metadata (dict, optional): PO header, defaults to get_po_metadata().

    Returns:
        polib.POFile: The populated PO file, not yet saved.
    """
    po = polib.POFile()
    po.metadata = metadata if metadata is not None else get_po_metadata(target_language)

    for section in sections:
        msgid = section.translations.get(source_language)
        if not msgid:
            continue
        entry = polib.POEntry(
            msgctxt=section.label,
            msgid=msgid,
            msgstr=section.translations.get(target_language, "")
        )
        po.append(entry)

    return po


def sections_from_po(po, language):
    """
    Turn the translated entries of a PO file into single-language sections.

    Raises:
        UnsupportedTextError: A label or msgstr the tagged format would
            truncate or trim, named by its msgctxt.
    """
    sections = []
    for entry in po.translated_entries():
        if not entry.msgctxt:
            continue
        check_text(entry.msgctxt, entry.msgctxt)
        check_text(entry.msgctxt, entry.msgstr)
        sections.append(Section(entry.msgctxt, {language: entry.msgstr}))
    return sections


def weblate_data_from_sections(sections, language, component=None):
    translations = {}
    for section in sections:
        translations[section.label] = DoubleQuotedScalarString(section.translations.get(language, ""))

    if component:
        return {component: translations}
    return translations


def dump_weblate_yaml(data, stream):
    yaml = ruamel.yaml.YAML()
    yaml.preserve_quotes = True
    yaml.width = float("inf")
    yaml.dump(data, stream)
