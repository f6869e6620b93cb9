# -*- coding: utf-8 -*-
"""
Readers and writers for the locale_string text formats.

Tagged format (locale_string.txt):

    section
        TXT     "label"
        PL      "polski tekst"
        EN      "english text"
    end

Clientside format, one language per file:

    label<TAB>text

Legacy flat format (import only): alternating label and text lines, each
optionally wrapped in quotes and terminated by a semicolon.
"""
from collections import namedtuple

from locstr_section import Language, Section

ACTION_NEW_SECTION = "new_section"
ACTION_LABEL = "label"
ACTION_TRANSLATION = "translation"

KeywordAction = namedtuple("KeywordAction", ["kind", "language"])

# Checked in order, the first keyword the line starts with wins
KEYWORDS = [
    ("section", KeywordAction(ACTION_NEW_SECTION, None)),
    ("TXT", KeywordAction(ACTION_LABEL, None)),
    ("PL", KeywordAction(ACTION_TRANSLATION, Language.PL)),
    ("EN", KeywordAction(ACTION_TRANSLATION, Language.EN)),
]

LABEL_KEYWORD = "TXT"
SECTION_KEYWORD = "section"
END_KEYWORD = "end"
COMMENT_PREFIX = "#"

# Characters trimmed from both ends of a tagged payload
PAYLOAD_BOUNDS = '"\\'

# Characters trimmed from both ends of a legacy flat file line
LEGACY_BOUNDS = '";'


class LocaleStringError(ValueError):
    """Base class for every locale string failure reported to the user."""


class ParseError(LocaleStringError):
    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class EmptyLineError(ParseError):
    """A keyword line whose payload could not be extracted."""

    def __init__(self, line, line_number=None):
        self.line = line
        super().__init__(f"empty or invalid line near {line}", line_number)


class InvalidSyntaxError(ParseError):
    """A payload that has no open section to go into."""

    def __init__(self, keyword, payload, line_number=None):
        self.keyword = keyword
        self.payload = payload
        super().__init__(f"invalid syntax near {keyword}\t{payload}", line_number)


class LanguageDuplicateError(ParseError):
    def __init__(self, language, label, line_number=None):
        self.language = language
        self.label = label
        super().__init__(f"language {language!s} appears twice in section '{label}'", line_number)


class LabelDuplicateError(ParseError):
    def __init__(self, label, line_number=None):
        self.label = label
        super().__init__(f"label '{label}' appears more than once", line_number)


class MissingLabelError(ParseError):
    """A section that ended without a TXT label."""

    def __init__(self, line_number=None):
        super().__init__(f"section has no {LABEL_KEYWORD} label", line_number)


class UnsupportedTextError(LocaleStringError):
    """Text the tagged format cannot store without losing part of it."""

    def __init__(self, label, text, reason):
        self.label = label
        self.text = text
        self.reason = reason
        super().__init__(f"text of '{label}' {reason}: {text!r}")


class ConvertError(LocaleStringError):
    """Base class for legacy flat file import failures."""


class EmptyFileError(ConvertError):
    def __init__(self):
        super().__init__("file is empty")


class LineCountError(ConvertError):
    def __init__(self, count):
        self.count = count
        super().__init__(f"lines count {count} is not divisible by 2")


def extract_text(line):
    """
    Return the payload of a keyword line or None when there is none.

    The payload is the second tab separated field with any bounding quote
    and backslash characters removed.
    """
    elements = line.split("\t")
    if len(elements) < 2:
        return None
    return elements[1].strip(PAYLOAD_BOUNDS)


def _is_content_line(line):
    line = line.strip()
    return bool(line) and not line.startswith(COMMENT_PREFIX)


def check_text(label, text):
    """
    Raise UnsupportedTextError for text that would not read back unchanged
    from a tagged file: line breaks and tabs split the line, bounding quotes
    and backslashes are trimmed on read.
    """
    if "\n" in text or "\r" in text:
        raise UnsupportedTextError(label, text, "contains a line break")
    if "\t" in text:
        raise UnsupportedTextError(label, text, "contains a tab")
    if text and (text[0] in PAYLOAD_BOUNDS or text[-1] in PAYLOAD_BOUNDS):
        raise UnsupportedTextError(label, text, "starts or ends with a quote or backslash")


def _require_label(section, line_number):
    if section is not None and not section.label:
        raise MissingLabelError(line_number)


def parse_data(data):
    """
    Parse tagged locale_string text into a list of Section objects.

    Args:
        data (str): The whole file contents.

    Returns:
        list[Section]: Sections in the order they appear in the text.

    Raises:
        EmptyLineError: A TXT or language line has no extractable text.
        InvalidSyntaxError: Text appears before any section line.
        MissingLabelError: A section never receives a TXT label.
        LanguageDuplicateError: A language appears twice in one section.
    """
    sections = []
    section_line_number = None

    for line_number, line in enumerate(data.splitlines(), start=1):
        if not _is_content_line(line):
            continue
        line = line.strip()
        for keyword, action in KEYWORDS:
            if not line.startswith(keyword):
                continue

            if action.kind == ACTION_NEW_SECTION:
                _require_label(sections[-1] if sections else None, section_line_number)
                sections.append(Section())
                section_line_number = line_number
                break

            text = extract_text(line)
            if not text:
                raise EmptyLineError(line, line_number)
            if not sections:
                raise InvalidSyntaxError(keyword, text, line_number)

            current = sections[-1]
            if action.kind == ACTION_LABEL:
                current.label = text
            else:
                if action.language in current.translations:
                    raise LanguageDuplicateError(action.language, current.label, line_number)
                current.translations[action.language] = text
            break

    _require_label(sections[-1] if sections else None, section_line_number)
    return sections


def parse_clientside(data):
    """
    Parse a clientside file into a label -> text dict.

    Each line is split on its first tab before anything is stripped, so the
    text keeps its surrounding whitespace and may be empty. Labels keep the
    order they appear in the file.
    """
    labels = {}
    for line_number, line in enumerate(data.splitlines(), start=1):
        if not _is_content_line(line):
            continue
        label, _, text = line.partition("\t")
        label = label.strip()
        if label in labels:
            raise LabelDuplicateError(label, line_number)
        labels[label] = text
    return labels


def convert_data(data, language):
    """
    Import a legacy flat file holding alternating label and text lines.

    Args:
        data (str): The whole file contents.
        language (Language): The language the texts are written in.

    Returns:
        list[Section]: One single-language section per label/text pair.
    """
    lines = []
    for line in data.splitlines():
        line = line.strip().strip(LEGACY_BOUNDS)
        if line and not line.startswith(COMMENT_PREFIX):
            lines.append(line)

    if not lines:
        raise EmptyFileError()

    if len(lines) % 2 != 0:
        raise LineCountError(len(lines))

    sections = []
    for index in range(0, len(lines), 2):
        sections.append(Section(lines[index], {language: lines[index + 1]}))

    return sections


def generate(section):
    lines = [SECTION_KEYWORD, f'\t{LABEL_KEYWORD}\t"{section.label}"']
    for translation in section.iter_translations():
        lines.append(f'\t{translation.language.tag}\t"{translation.text}"')
    lines.append(END_KEYWORD)
    return "\n".join(lines)


def generate_document(sections):
    return "".join(f"{generate(section)}\n\n" for section in sections)
