# -*- coding: utf-8 -*-
import argparse
import sys
import inspect

import polib
from icu import Locale

from locstr_export import ICU_LOCALE_MAP, dump_weblate_yaml, po_from_sections, sections_from_po, weblate_data_from_sections
from locstr_find import (
    find_argument_mismatches,
    find_clientside_argument_mismatches,
    find_duplicate_labels,
    find_identical_translations,
    find_incomplete_sections,
    find_missing_labels,
    find_undiversified_sections,
    validate_arguments,
)
from locstr_io import generate_output_filename, read_file, write_file
from locstr_merge import merge_sections
from locstr_parse import convert_data, generate_document, parse_clientside, parse_data
from locstr_section import Language

DEFAULT_CURRENT_FILE = "locale_string.txt"
DEFAULT_NEWER_FILE = "locale_string2.txt"
DEFAULT_SAVE_FILE = "locale_string_new.txt"
DEFAULT_INCOMPLETE_FILE = "locale_string_incomplete.txt"

# List to hold information about callable functions
callable_functions = []


def mainFunction(func):
    """Decorator to mark functions as callable and add them to the list."""
    callable_functions.append(func)
    return func


def print_docstrings():
    print("Docstrings for callable functions:")
    for func in callable_functions:
        print("\nFunction: {}".format(func.__name__))
        docstring = inspect.getdoc(func)
        if docstring:
            print(docstring)
        else:
            print("No docstring available.")


def print_labels(title, labels):
    print(f"{title}: {len(labels)}")
    for label in labels:
        print(f"  {label}")


def load_sections(filename):
    sections = parse_data(read_file(filename))
    print(f"Processed {filename}: {len(sections)} sections")
    return sections


def main(argv=None):
    parser = argparse.ArgumentParser(description="Maintain locale_string translation files.")
    parser.add_argument("--help-functions", action="store_true", help="Print available functions and their docstrings.")
    parser.add_argument("--list-functions", action="store_true", help="List available functions without docstrings.")
    parser.add_argument("--usage", action="store_true", help="Display usage information.")
    parser.add_argument("function", nargs="?", help="The name of the function to execute.")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the function.")

    args = parser.parse_args(argv)

    if args.usage:
        print("Usage: locstr.py function [args [args ...]]")
        print("       locstr.py --help-functions, or help")
        print("       locstr.py --list-functions, or list")
    elif args.help_functions or args.function == "help":
        print_docstrings()
    elif args.list_functions or args.function == "list":
        print("Available functions:")
        for func in callable_functions:
            print(func.__name__)
    elif args.function:
        function_name = args.function
        for func in callable_functions:
            if func.__name__ == function_name:
                try:
                    func(*args.args)
                except (ValueError, OSError) as e:
                    print(f"Error: {e}. Aborting.")
                    sys.exit(1)
                break
        else:
            print("Unknown function: {}".format(function_name))
    else:
        print("No command provided.")


# Tagged files ----------------------------------------------------------------
@mainFunction
def merge_translations(current_file=DEFAULT_CURRENT_FILE, newer_file=DEFAULT_NEWER_FILE, save_file=DEFAULT_SAVE_FILE):
    """
    Merge a newer locale_string file into the current one.

    Sections are matched by their TXT label. Translations from the newer file
    replace the current ones; languages the newer file does not have are kept.
    Labels only found in the newer file are appended at the end.

    Args:
        current_file (str): File holding the current translations.
        newer_file (str): File holding the newer translations.
        save_file (str): File the merged translations are written to.
    """
    current_sections = load_sections(current_file)
    newer_sections = load_sections(newer_file)

    merged = merge_sections(current_sections, newer_sections)
    write_file(save_file, generate_document(merged))

    print(f"Merged {newer_file} into {current_file} → {save_file} ({len(merged)} sections)")


@mainFunction
def convert_old_file(old_file, lang_tag="PL", save_file=DEFAULT_SAVE_FILE):
    """
    Convert an old flat translation file to the tagged locale_string format.

    The old file holds alternating label and text lines, optionally quoted and
    terminated with ';'. Every text is stored under one language.

    Args:
        old_file (str): The old flat file.
        lang_tag (str): Language of the texts, PL or EN.
        save_file (str): File the converted sections are written to.
    """
    language = Language.from_tag(lang_tag)
    sections = convert_data(read_file(old_file), language)
    write_file(save_file, generate_document(sections))

    print(f"Converted {len(sections)} {language!s} entries from {old_file} → {save_file}")


@mainFunction
def find_incomplete(file=DEFAULT_CURRENT_FILE, save_file=DEFAULT_INCOMPLETE_FILE):
    """
    Write the labels of sections that are missing a translation, one per line.

    Args:
        file (str): The locale_string file to check.
        save_file (str): File the labels are written to.
    """
    labels = find_incomplete_sections(load_sections(file))
    write_file(save_file, "".join(f"{label}\n" for label in labels))

    print(f"Done. {len(labels)} incomplete sections written to {save_file}")


@mainFunction
def check_locale_string(file=DEFAULT_CURRENT_FILE):
    """
    Report every problem found in a locale_string file without writing anything.

    Checks:
        - labels used by more than one section
        - sections missing a translation
        - sections whose translations use different %d/%s/%ld/%% arguments
        - sections whose translations are identical (probably untranslated)
    """
    sections = load_sections(file)

    print_labels("Duplicate labels", find_duplicate_labels(sections))
    print_labels("Incomplete sections", find_incomplete_sections(sections))
    print_labels("Argument mismatches", find_argument_mismatches(sections))
    print_labels("Identical translations", find_undiversified_sections(sections))


@mainFunction
def validate_locale_string(file=DEFAULT_CURRENT_FILE):
    """
    Stop with an error at the first section whose translations use different
    arguments. Exits with status 1 on failure.
    """
    validate_arguments(load_sections(file))
    print(f"Done. Arguments in {file} are consistent.")


# Clientside files ------------------------------------------------------------
@mainFunction
def compare_clientside_files(first_file, second_file, save_file=None):
    """
    Compare two clientside files (label<TAB>text, one language per file).

    Reports labels missing from the second file, labels whose texts are
    identical in both files and labels whose arguments differ.

    Args:
        first_file (str): The reference clientside file.
        second_file (str): The clientside file to check.
        save_file (str, optional): File the missing labels are written to.
    """
    first_map = parse_clientside(read_file(first_file))
    print(f"Processed {first_file}: {len(first_map)} labels")
    second_map = parse_clientside(read_file(second_file))
    print(f"Processed {second_file}: {len(second_map)} labels")

    missing = find_missing_labels(first_map, second_map)
    print_labels(f"Missing from {second_file}", missing)
    print_labels("Identical translations", find_identical_translations(first_map, second_map))
    print_labels("Argument mismatches", find_clientside_argument_mismatches(first_map, second_map))

    if save_file:
        write_file(save_file, "".join(f"{label}\n" for label in missing))
        print(f"Missing labels written to {save_file}")


# Interchange -----------------------------------------------------------------
@mainFunction
def create_po_from_locale_string(file, source_tag="EN", target_tag="PL", output_file=None):
    """
    Export one language pair of a locale_string file to a .po file.

    Args:
        file (str): The locale_string file.
        source_tag (str): Language written to msgid.
        target_tag (str): Language written to msgstr.
        output_file (str, optional): Defaults to <file>_<target>.po.
    """
    source_language = Language.from_tag(source_tag)
    target_language = Language.from_tag(target_tag)
    if output_file is None:
        output_file = generate_output_filename(file, target_language.tag, file_extension="po")

    sections = load_sections(file)
    po = po_from_sections(sections, source_language, target_language)
    po.save(output_file)

    skipped = len(sections) - len(po)
    print(f"Done. Created .po file: {output_file} ({len(po)} entries, {skipped} without {source_language!s} text)")


@mainFunction
def import_po_into_locale_string(file, po_file, lang_tag="PL", save_file=DEFAULT_SAVE_FILE):
    """
    Merge the translated entries of a .po file into a locale_string file.

    Entries are matched on msgctxt. Fuzzy, obsolete and untranslated entries
    are ignored.

    Args:
        file (str): The current locale_string file.
        po_file (str): The translated .po file.
        lang_tag (str): Language the msgstr values are written in.
        save_file (str): File the merged translations are written to.
    """
    language = Language.from_tag(lang_tag)
    current_sections = load_sections(file)
    newer_sections = sections_from_po(polib.pofile(po_file), language)
    print(f"Processed {po_file}: {len(newer_sections)} translated entries")

    merged = merge_sections(current_sections, newer_sections)
    write_file(save_file, generate_document(merged))

    print(f"Merged {po_file} into {file} → {save_file}")


@mainFunction
def create_weblate_yaml(file, lang_tag="PL", component=None, output_file=None):
    """
    Write one language of a locale_string file as a monolingual Weblate YAML file.

    Args:
        file (str): The locale_string file.
        lang_tag (str): Language to export.
        component (str, optional): Top level key, the output is flat without it.
        output_file (str, optional): Defaults to <file>_<lang>.yaml.
    """
    language = Language.from_tag(lang_tag)
    if output_file is None:
        output_file = generate_output_filename(file, language.tag, file_extension="yaml")

    data = weblate_data_from_sections(load_sections(file), language, component)
    with open(output_file, "w", encoding="utf-8", newline='\n') as weblate_file:
        dump_weblate_yaml(data, weblate_file)

    print("Generated Weblate file: {}".format(output_file))


@mainFunction
def list_languages():
    """Print the supported language tags with their ICU locale names."""
    for language in Language:
        locale = Locale(ICU_LOCALE_MAP[language.tag])
        print(f"{language.tag}\t{locale.getName()}\t{locale.getDisplayName()}")


# To run the main function
if __name__ == "__main__":
    main()
