"""Tests for locstr_merge."""

from locstr_merge import merge_sections
from locstr_parse import generate_document, parse_data
from locstr_section import Language, Section

PL = Language.PL
EN = Language.EN


class TestMergeSections:
    def test_overlays_matching_label(self):
        base = [Section("a", {PL: "x", EN: "y"})]
        incoming = [Section("a", {PL: "z"})]
        assert merge_sections(base, incoming) == [Section("a", {PL: "z", EN: "y"})]

    def test_appends_unmatched_label(self):
        base = [Section("a", {PL: "x"})]
        incoming = [Section("b", {PL: "y"})]
        assert merge_sections(base, incoming) == [Section("a", {PL: "x"}), Section("b", {PL: "y"})]

    def test_inserts_missing_language(self):
        base = [Section("a", {PL: "x"})]
        incoming = [Section("a", {EN: "y"})]
        assert merge_sections(base, incoming) == [Section("a", {PL: "x", EN: "y"})]

    def test_keeps_base_order_and_appends_in_incoming_order(self):
        base = [Section("a", {PL: "1"}), Section("b", {PL: "2"}), Section("c", {PL: "3"})]
        incoming = [Section("e", {EN: "5"}), Section("c", {EN: "three"}), Section("d", {EN: "4"})]

        merged = merge_sections(base, incoming)

        assert [s.label for s in merged] == ["a", "b", "c", "e", "d"]
        assert merged[2] == Section("c", {PL: "3", EN: "three"})

    def test_first_duplicate_base_label_wins(self):
        base = [Section("a", {PL: "first"}), Section("a", {PL: "second"})]
        incoming = [Section("a", {PL: "new"})]

        merged = merge_sections(base, incoming)

        assert merged == [Section("a", {PL: "new"}), Section("a", {PL: "second"})]

    def test_empty_inputs(self):
        base = [Section("a", {PL: "x"})]
        assert merge_sections(base, []) == base
        assert merge_sections([], base) == base
        assert merge_sections([], []) == []

    def test_does_not_grow_caller_list(self):
        base = [Section("a", {PL: "x"})]
        merge_sections(base, [Section("b", {PL: "y"})])
        assert len(base) == 1

    def test_merged_document_serializes_in_language_order(self):
        current = parse_data('section\n\tTXT\t"a"\n\tEN\t"old"\nend\n')
        newer = parse_data('section\n\tTXT\t"a"\n\tPL\t"nowy"\n\tEN\t"new"\nend\n')

        text = generate_document(merge_sections(current, newer))

        assert text == 'section\n\tTXT\t"a"\n\tPL\t"nowy"\n\tEN\t"new"\nend\n\n'
