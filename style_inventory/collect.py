"""
Correlation of markup elements with stylesheet rules.

Walks the discovered documents once, keeping the first element seen for each
tag/class combination and parsing each linked stylesheet exactly once.
"""

import dataclasses
import pathlib

from style_inventory.css_rules import parse_css_classes_with_styles
from style_inventory.markup import extract_elements_and_classes, extract_linked_css
from style_inventory.models import DEFAULT_EXTENSIONS, element_key


def scan_directory_for_markup(directory, extensions=DEFAULT_EXTENSIONS):
    """Recursively find markup files under directory, sorted by path"""
    root = pathlib.Path(directory)
    files = set()
    for ext in extensions:
        files.update(str(path) for path in root.rglob(f"*.{ext.lstrip('.')}") if path.is_file())
    return sorted(files)


def read_document(path):
    """Return the full text of path; raises OSError when it cannot be read"""
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        return f.read()


def process_files_and_extract_styles(files, project_root, css_parser=None):
    """
    Build the element table and stylesheet cache for a list of documents.

    Returns (unique_elements, css_classes_map) where unique_elements maps
    "tag::class" to the first ElementRecord seen with that key and
    css_classes_map maps each resolved stylesheet path to its class rules.
    """
    if css_parser is None:
        css_parser = parse_css_classes_with_styles

    unique_elements = {}
    css_classes_map = {}

    for file_path in files:
        try:
            content = read_document(file_path)
        except OSError:
            print(f"Warning: Could not read file {file_path}")
            continue

        elements = extract_elements_and_classes(content)
        linked_css_files = extract_linked_css(content, project_root)

        for css_file in linked_css_files:
            if css_file not in css_classes_map:
                css_classes_map[css_file] = css_parser(css_file)

        for element in elements:
            element = dataclasses.replace(element, source_file=file_path)
            unique_key = element_key(element)
            if unique_key not in unique_elements:
                unique_elements[unique_key] = element

    return unique_elements, css_classes_map


def build_class_report(unique_elements, css_classes_map):
    """Expand the element table into per-class inline styles, stylesheet rules and files"""
    unique_classes = {}

    for element in unique_elements.values():
        for class_name in element.class_attr.split():
            entry = unique_classes.setdefault(class_name, {'inline_styles': [], 'files': []})
            if element.inline_style:
                entry['inline_styles'].append(element.inline_style)
            entry['files'].append(element.source_file)

    report = {}
    for class_name, data in unique_classes.items():
        report[class_name] = {
            'inline_styles': data['inline_styles'],
            'stylesheet_matches': [
                (css_file, classes_with_styles[class_name])
                for css_file, classes_with_styles in css_classes_map.items()
                if class_name in classes_with_styles
            ],
            'files': list(dict.fromkeys(data['files'])),
        }
    return report
