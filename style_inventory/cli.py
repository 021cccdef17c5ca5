#!/usr/bin/env python3
"""
Style Inventory CLI
-------------------
Scans a directory of HTML/PHP files, extracts unique elements and their
classes, and reports each class with its inline styles and the linked
stylesheet rules that define it.

Typical usage:
    style-inventory /var/www/your_project/html --project-root /var/www/your_project
    style-inventory site/ --ext html htm --output css-audit/output
"""

import argparse
import os
import sys

from style_inventory.collect import (
    build_class_report,
    process_files_and_extract_styles,
    scan_directory_for_markup,
)
from style_inventory.models import DEFAULT_EXTENSIONS, AuditConfig
from style_inventory.report import output_styles_to_change, write_csv_report, write_json_report


def parse_args(argv: list[str] | None = None) -> AuditConfig:
    parser = argparse.ArgumentParser(
        description='Inventory of CSS classes in markup files and where their styles come from')
    parser.add_argument('directory', help='Directory to scan for markup files')
    parser.add_argument('--project-root',
                        help='Base directory for resolving stylesheet hrefs (defaults to DIRECTORY)')
    parser.add_argument('--ext', nargs='+', default=list(DEFAULT_EXTENSIONS),
                        help='Markup file extensions to scan')
    parser.add_argument('--output', help='Directory for JSON/CSV exports')
    args = parser.parse_args(argv)

    return AuditConfig(
        directory=args.directory,
        project_root=args.project_root,
        extensions=tuple(args.ext),
        output=args.output,
    )


def run(config: AuditConfig) -> dict:
    html_files = scan_directory_for_markup(config.directory, config.extensions)
    unique_elements, css_classes_map = process_files_and_extract_styles(
        html_files, config.project_root)
    report = build_class_report(unique_elements, css_classes_map)

    output_styles_to_change(report)

    print(f"Scanned {len(html_files)} files")
    print(f"Found {len(report)} unique classes across {len(css_classes_map)} stylesheets")

    if config.output:
        json_file = write_json_report(report, config.output)
        csv_file = write_csv_report(report, config.output)
        print(f"Output saved to {json_file} and {csv_file}")

    return report


def main(argv: list[str] | None = None) -> None:
    config = parse_args(argv)
    if not os.path.isdir(config.directory):
        sys.exit(f"Not a directory: {config.directory}")
    run(config)


if __name__ == "__main__":
    main()
