"""Tests for locstr_parse: tagged parser, clientside parser, legacy import and generator."""

import pytest

from locstr_parse import (
    EmptyFileError,
    EmptyLineError,
    InvalidSyntaxError,
    LabelDuplicateError,
    LanguageDuplicateError,
    LineCountError,
    LocaleStringError,
    MissingLabelError,
    UnsupportedTextError,
    check_text,
    convert_data,
    extract_text,
    generate,
    generate_document,
    parse_clientside,
    parse_data,
)
from locstr_section import Language, Section

SAMPLE_FILE = """# locale strings
section
\tTXT\t"menu_start"
\tPL\t"Rozpocznij gre"
\tEN\t"Start game"
end

section
\tTXT\t"menu_points"
\tEN\t"You have %d points"
end
"""


# ===========================================================================
# Tagged format
# ===========================================================================


class TestExtractText:
    def test_strips_bounding_quotes(self):
        assert extract_text('TXT\t"label"') == "label"

    def test_strips_backslashes(self):
        assert extract_text('PL\t\\"tekst\\"') == "tekst"

    def test_no_tab(self):
        assert extract_text("TXT") is None

    def test_only_second_field_is_used(self):
        assert extract_text('EN\t"text"\t"ignored"') == "text"

    def test_keyword_with_tab_and_no_text(self):
        assert extract_text("PL\t") == ""


class TestParseData:
    def test_parses_sections_in_order(self):
        sections = parse_data(SAMPLE_FILE)
        assert sections == [
            Section("menu_start", {Language.PL: "Rozpocznij gre", Language.EN: "Start game"}),
            Section("menu_points", {Language.EN: "You have %d points"}),
        ]

    def test_empty_input(self):
        assert parse_data("") == []
        assert parse_data("# only a comment\n\n") == []

    def test_closing_marker_is_optional(self):
        text = 'section\nTXT\t"a"\nPL\t"x"\nsection\nTXT\t"b"\nEN\t"y"'
        sections = parse_data(text)
        assert [s.label for s in sections] == ["a", "b"]
        assert sections[1].translations == {Language.EN: "y"}

    def test_unknown_lines_are_ignored(self):
        text = 'section\nTXT\t"a"\nDE\t"Hallo"\nfoo bar\nPL\t"x"\nend'
        assert parse_data(text) == [Section("a", {Language.PL: "x"})]

    def test_label_line_overwrites_label(self):
        text = 'section\nTXT\t"first"\nTXT\t"second"\nPL\t"x"'
        assert parse_data(text)[0].label == "second"

    def test_translation_before_label(self):
        text = 'section\nPL\t"x"\nTXT\t"a"'
        assert parse_data(text) == [Section("a", {Language.PL: "x"})]

    def test_windows_line_endings(self):
        text = 'section\r\n\tTXT\t"a"\r\n\tPL\t"x"\r\nend\r\n'
        assert parse_data(text) == [Section("a", {Language.PL: "x"})]


class TestParseErrors:
    def test_translation_without_section(self):
        with pytest.raises(InvalidSyntaxError) as excinfo:
            parse_data('PL\t"x"')
        assert excinfo.value.keyword == "PL"
        assert excinfo.value.payload == "x"
        assert excinfo.value.line_number == 1

    def test_label_without_tab(self):
        with pytest.raises(EmptyLineError) as excinfo:
            parse_data("section\nTXT")
        assert excinfo.value.line == "TXT"
        assert excinfo.value.line_number == 2

    def test_empty_payload(self):
        with pytest.raises(EmptyLineError):
            parse_data('section\nTXT\t"a"\nEN\t""')

    def test_duplicate_language(self):
        text = 'section\nTXT\t"greeting"\nPL\t"czesc"\nPL\t"hej"\nend'
        with pytest.raises(LanguageDuplicateError) as excinfo:
            parse_data(text)
        assert excinfo.value.language is Language.PL
        assert excinfo.value.label == "greeting"
        assert "PL" in str(excinfo.value)
        assert "greeting" in str(excinfo.value)

    def test_section_without_label(self):
        with pytest.raises(MissingLabelError) as excinfo:
            parse_data('section\nPL\t"x"\nend\nsection\nTXT\t"b"')
        assert excinfo.value.line_number == 1

    def test_last_section_without_label(self):
        with pytest.raises(MissingLabelError) as excinfo:
            parse_data('section\nTXT\t"a"\nsection\n')
        assert excinfo.value.line_number == 3
        assert not isinstance(excinfo.value, InvalidSyntaxError)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_data('EN\t"x"')
        assert issubclass(LanguageDuplicateError, LocaleStringError)


class TestGenerate:
    def test_generates_languages_in_order(self):
        section = Section("a", {Language.EN: "y", Language.PL: "x"})
        assert generate(section) == 'section\n\tTXT\t"a"\n\tPL\t"x"\n\tEN\t"y"\nend'

    def test_generate_without_translations(self):
        assert generate(Section("a")) == 'section\n\tTXT\t"a"\nend'

    @pytest.mark.parametrize("translations", [
        {},
        {Language.PL: "Masz %d punktow"},
        {Language.EN: "You have %d points"},
        {Language.PL: "zazolc gesla jazn", Language.EN: "it's a 'test' = 100%"},
    ])
    def test_round_trip(self, translations):
        section = Section("some.label", translations)
        assert parse_data(generate(section)) == [section]

    def test_document_round_trip(self):
        sections = parse_data(SAMPLE_FILE)
        text = generate_document(sections)
        assert text.endswith("end\n\n")
        assert parse_data(text) == sections


# ===========================================================================
# Clientside format
# ===========================================================================


class TestParseClientside:
    def test_parses_labels(self):
        labels = parse_clientside("a\t1\n# comment\n\nb\t2\n")
        assert labels == {"a": "1", "b": "2"}
        assert list(labels) == ["a", "b"]

    def test_splits_on_first_tab(self):
        assert parse_clientside("a\tone\ttwo") == {"a": "one\ttwo"}

    def test_empty_value(self):
        assert parse_clientside("a\t\nb") == {"a": "", "b": ""}

    def test_duplicate_label(self):
        with pytest.raises(LabelDuplicateError) as excinfo:
            parse_clientside("a\t1\nb\t2\na\t3")
        assert excinfo.value.label == "a"
        assert excinfo.value.line_number == 3

    def test_text_keeps_surrounding_whitespace(self):
        assert parse_clientside("a\t  value  \n") == {"a": "  value  "}

    def test_label_is_stripped(self):
        assert parse_clientside("  a \tvalue") == {"a": "value"}

    def test_empty_label_is_not_shifted(self):
        assert parse_clientside("\tx") == {"": "x"}

    def test_indented_comment(self):
        assert parse_clientside("  # note\ta\n") == {}


# ===========================================================================
# Legacy flat format
# ===========================================================================


class TestConvertData:
    def test_pairs_lines(self):
        text = '# old file\n"label_one";\n"Tekst pierwszy";\n\nlabel_two\nTekst drugi\n'
        assert convert_data(text, Language.PL) == [
            Section("label_one", {Language.PL: "Tekst pierwszy"}),
            Section("label_two", {Language.PL: "Tekst drugi"}),
        ]

    def test_empty_file(self):
        with pytest.raises(EmptyFileError):
            convert_data("# nothing\n\n", Language.EN)

    def test_odd_line_count(self):
        with pytest.raises(LineCountError) as excinfo:
            convert_data("a\nb\nc\n", Language.EN)
        assert excinfo.value.count == 3


# ===========================================================================
# Storable text
# ===========================================================================


class TestCheckText:
    @pytest.mark.parametrize("text", ["Masz %d punktow", "it's 'quoted' inside", "Cytat \"w srodku\" tekstu"])
    def test_accepts_text_that_reads_back(self, text):
        check_text("label", text)
        section = Section("label", {Language.PL: text})
        assert parse_data(generate(section)) == [section]

    @pytest.mark.parametrize("text, reason", [
        ("Linia jeden\nLinia dwa", "line break"),
        ("Linia jeden\r\nLinia dwa", "line break"),
        ("kolumna\tdruga", "tab"),
        ('"Cytat"', "quote"),
        ("koniec\\", "backslash"),
    ])
    def test_rejects_text_that_would_be_cut(self, text, reason):
        with pytest.raises(UnsupportedTextError) as excinfo:
            check_text("menu_start", text)
        assert excinfo.value.label == "menu_start"
        assert reason in str(excinfo.value)
        assert isinstance(excinfo.value, LocaleStringError)
