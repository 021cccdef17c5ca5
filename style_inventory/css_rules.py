"""
CSS class rule parsing
----------------------
Maps class selectors in a stylesheet to the raw text of their rule bodies.

Only the simple `.name { body }` shape is recognised. Known limitations:
- a nested `{...}` inside a body truncates it at the first `}`
- `.a.b { ... }` registers only `b`, and `div.x { ... }` registers `x`
"""

import logging
import os
import re

import cssutils

# Suppress cssutils parsing warnings
cssutils.log.setLevel(logging.CRITICAL)

CLASS_RULE_PATTERN = re.compile(r'\.([a-zA-Z0-9_-]+)\s*\{([^}]*)\}')


def parse_css_classes(css_content: str) -> dict[str, str]:
    """Return {class name: trimmed rule body}; a later rule for the same class wins"""
    classes_with_styles: dict[str, str] = {}
    for match in CLASS_RULE_PATTERN.finditer(css_content):
        classes_with_styles[match.group(1)] = match.group(2).strip()
    return classes_with_styles


def parse_css_classes_with_styles(css_file_path: str) -> dict[str, str]:
    """Parse a stylesheet file; a missing file defines no classes"""
    if not os.path.isfile(css_file_path):
        return {}

    with open(css_file_path, 'r', encoding='utf-8', errors='ignore') as f:
        css_content = f.read()
    return parse_css_classes(css_content)


def parse_declarations(style_text: str) -> list[str]:
    """Split a declaration block into unique "prop: value" strings, in order"""
    if not style_text or not style_text.strip():
        return []

    style = cssutils.parseStyle(style_text)
    declarations = []
    for prop in style.getProperties(all=True):
        declaration = f"{prop.name}: {prop.value}"
        if declaration not in declarations:
            declarations.append(declaration)
    return declarations
