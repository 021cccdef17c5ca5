"""Tests for element and stylesheet link extraction."""

import os

from style_inventory.markup import (
    extract_elements_and_classes,
    extract_linked_css,
    resolve_stylesheet_href,
)
from style_inventory.models import ElementRecord


class TestExtractElements:
    def test_blank_content(self):
        assert extract_elements_and_classes("") == []
        assert extract_elements_and_classes("   \n\t ") == []

    def test_no_class_attributes(self):
        html = '<html><body><p id="a">Hi</p><div style="color: red">x</div></body></html>'
        assert extract_elements_and_classes(html) == []

    def test_document_order_and_fields(self):
        html = '<div class="box" style="color:red"><span class="box"></span></div>'
        assert extract_elements_and_classes(html) == [
            ElementRecord(tag="div", class_attr="box", inline_style="color:red"),
            ElementRecord(tag="span", class_attr="box", inline_style=""),
        ]

    def test_class_attribute_kept_raw(self):
        elements = extract_elements_and_classes('<p class="  a   b ">x</p>')
        assert elements[0].class_attr == "  a   b "

    def test_empty_class_attribute_is_selected(self):
        elements = extract_elements_and_classes('<p class="">x</p>')
        assert len(elements) == 1
        assert elements[0].class_attr == ""

    def test_source_file_left_blank(self):
        elements = extract_elements_and_classes('<p class="a">x</p>')
        assert elements[0].source_file == ""

    def test_tag_names_lowercased(self):
        elements = extract_elements_and_classes('<DIV CLASS="Panel">x</DIV>')
        assert elements[0].tag == "div"
        assert elements[0].class_attr == "Panel"

    def test_malformed_markup_is_tolerated(self):
        html = '<div class="outer"><p class="inner">unclosed <b class="bold">text'
        tags = [element.tag for element in extract_elements_and_classes(html)]
        assert tags == ["div", "p", "b"]

    def test_php_fragment(self):
        html = '<?php echo $title; ?>\n<section class="hero">\n<?php include "nav.php"; ?>\n</section>'
        elements = extract_elements_and_classes(html)
        assert [element.class_attr for element in elements] == ["hero"]

    def test_rejected_markup(self):
        assert extract_elements_and_classes('<![xx]><p class="a">x</p>') == []


class TestExtractLinkedCss:
    def test_resolves_against_project_root(self, project, site_css):
        html = '<link rel="stylesheet" href="/css/site.css">'
        assert extract_linked_css(html, str(project)) == [site_css]

    def test_relative_href(self, project, site_css):
        html = '<link rel="stylesheet" href="css/site.css">'
        assert extract_linked_css(html, str(project)) == [site_css]

    def test_missing_stylesheet_dropped(self, project):
        html = '<link rel="stylesheet" href="/css/missing.css">'
        assert extract_linked_css(html, str(project)) == []

    def test_other_link_types_ignored(self, project):
        html = ('<link rel="icon" href="/css/site.css">'
                '<link rel="preload" href="/css/site.css">')
        assert extract_linked_css(html, str(project)) == []

    def test_link_without_href_skipped(self, project):
        assert extract_linked_css('<link rel="stylesheet">', str(project)) == []

    def test_blank_content(self, project):
        assert extract_linked_css("  ", str(project)) == []

    def test_rejected_markup(self, project):
        html = '<![xx]><link rel="stylesheet" href="/css/site.css">'
        assert extract_linked_css(html, str(project)) == []

    def test_document_order(self, project, site_css):
        other = project / "css" / "other.css"
        other.write_text(".x { y: z; }", encoding='utf-8')
        html = ('<link rel="stylesheet" href="/css/other.css">'
                '<link rel="stylesheet" href="/css/site.css">')
        assert extract_linked_css(html, str(project)) == [os.path.realpath(other), site_css]


class TestResolveStylesheetHref:
    def test_strips_single_leading_separator(self, project, site_css):
        assert resolve_stylesheet_href("/css/site.css", str(project)) == site_css

    def test_canonicalises_path(self, project, site_css):
        assert resolve_stylesheet_href("/html/../css/site.css", str(project)) == site_css

    def test_missing_target(self, project):
        assert resolve_stylesheet_href("/nope.css", str(project)) is None
