# -*- coding: utf-8 -*-
import os
import re

import chardet
import icu

UTF8_BOM = b'\xef\xbb\xbf'

# Matches the extension at the end of a filename, such as '.txt' or '.po'
reFileExtension = re.compile(r'\.[^.]+$')


def decode_text(raw_bytes):
    """
    Decode file contents to str.

    A UTF-8 BOM is dropped. Anything that is not valid UTF-8 is decoded
    with the encoding chardet detects, which covers older files saved as
    cp1250 or similar.
    """
    if raw_bytes.startswith(UTF8_BOM):
        return raw_bytes.decode('utf-8-sig')

    try:
        return raw_bytes.decode('utf-8')
    except UnicodeDecodeError:
        result = chardet.detect(raw_bytes)
        detected_encoding = result['encoding'] or 'utf-8'
        return raw_bytes.decode(detected_encoding, 'replace')


def read_file(filename):
    with open(filename, 'rb') as textIns:
        return decode_text(textIns.read())


def normalize_text(text):
    normalizer = icu.Normalizer2.getNFCInstance()
    return normalizer.normalize(text)


def write_file(filename, text):
    """Write text as NFC normalized UTF-8 with '\\n' line endings."""
    folder = os.path.dirname(filename)
    if folder:
        os.makedirs(folder, exist_ok=True)

    with open(filename, 'w', encoding="utf-8", newline='\n') as out:
        out.write(normalize_text(text))


def generate_output_filename(input_file, name_text, file_extension=None, output_folder=None):
    """
    Build an output filename next to the input, e.g. locale_string.txt ->
    locale_string_merged.txt.

    Args:
        input_file (str): The file the output is derived from.
        name_text (str): Tag appended to the base name.
        file_extension (str, optional): Extension to use instead of the input's.
        output_folder (str, optional): Folder to place the output in.
    """
    basename = os.path.basename(input_file)
    maExtension = reFileExtension.search(basename)
    base_name = basename[:maExtension.start()] if maExtension else basename

    if file_extension:
        extension = file_extension if file_extension.startswith('.') else f".{file_extension}"
    elif maExtension:
        extension = maExtension.group(0)
    else:
        extension = ".txt"

    name_part = name_text.strip().lower().replace(' ', '_').strip('_')
    file_name = f"{base_name}_{name_part}{extension}"

    if output_folder:
        return os.path.join(output_folder, file_name)
    return os.path.join(os.path.dirname(input_file), file_name)
