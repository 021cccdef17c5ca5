"""
Markup extraction
-----------------
Pulls class-bearing elements and stylesheet links out of HTML/PHP content.

Parsing is lenient: warnings from the parser are swallowed and markup the
parser refuses outright is treated as having no elements at all.
"""

import os
import warnings

from bs4 import BeautifulSoup, ParserRejectedMarkup

from style_inventory.models import ElementRecord


def _parse_markup(content):
    """Parse content into a soup, or return None for blank/rejected markup"""
    if not content or not content.strip():
        return None

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            # Keep class and rel as the raw attribute strings
            return BeautifulSoup(content, 'html.parser', multi_valued_attributes=None)
        except ParserRejectedMarkup:
            return None


def extract_elements_and_classes(content):
    """Extract every element with a class attribute, in document order"""
    soup = _parse_markup(content)
    if soup is None:
        return []

    result = []
    for tag in soup.find_all(True):
        class_attr = tag.get('class')
        if class_attr is None:
            continue
        result.append(ElementRecord(
            tag=tag.name,
            class_attr=class_attr,
            inline_style=tag.get('style') or '',
        ))
    return result


def resolve_stylesheet_href(href: str, project_root: str):
    """Resolve an href against the project root; None when the target is missing"""
    if href.startswith('/'):
        href = href[1:]
    path = os.path.realpath(os.path.join(project_root, href))
    if not os.path.exists(path):
        return None
    return path


def extract_linked_css(content, project_root):
    """Extract resolved paths of <link rel="stylesheet"> targets that exist"""
    soup = _parse_markup(content)
    if soup is None:
        return []

    css_files = []
    for link in soup.find_all('link', rel='stylesheet'):
        href = link.get('href')
        if href is None:
            continue
        path = resolve_stylesheet_href(href, project_root)
        if path is not None:
            css_files.append(path)
    return css_files
