"""
Style Inventory
---------------
Scans markup files for class attributes and correlates each class with the
inline styles and linked stylesheet rules that currently style it.
"""

from style_inventory.models import AuditConfig, ElementRecord, element_key
from style_inventory.markup import extract_elements_and_classes, extract_linked_css
from style_inventory.css_rules import parse_css_classes, parse_css_classes_with_styles
from style_inventory.collect import (
    build_class_report,
    process_files_and_extract_styles,
    scan_directory_for_markup,
)
from style_inventory.report import format_report, output_styles_to_change

__version__ = "0.1.0"

__all__ = [
    "AuditConfig",
    "ElementRecord",
    "element_key",
    "extract_elements_and_classes",
    "extract_linked_css",
    "parse_css_classes",
    "parse_css_classes_with_styles",
    "build_class_report",
    "process_files_and_extract_styles",
    "scan_directory_for_markup",
    "format_report",
    "output_styles_to_change",
]
