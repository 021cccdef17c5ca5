"""
Report output for the class inventory: console text plus JSON/CSV exports.
"""

import json
import os

import pandas as pd

from style_inventory.css_rules import parse_declarations

SEPARATOR = "-------------------------"
JSON_FILENAME = "class-inventory.json"
CSV_FILENAME = "class-inventory.csv"


def format_report(report):
    """Render the class report as the human-readable text block"""
    lines = ["Unique Classes and Their Current Styles:", ""]

    for class_name, data in report.items():
        lines.append(f"Class: .{class_name}")
        for inline_style in data['inline_styles']:
            if inline_style:
                lines.append(f"  Inline Style: {inline_style}")
        for css_file, styles in data['stylesheet_matches']:
            lines.append(f"  Style in {css_file}: {styles}")
        lines.append(f"  Found in files: {', '.join(data['files'])}")
        lines.append(SEPARATOR)

    return "\n".join(lines) + "\n"


def output_styles_to_change(report):
    print(format_report(report), end="")


def collect_declarations(data):
    """All "prop: value" pairs styling a class, inline and from stylesheets"""
    declarations = set()
    for inline_style in data['inline_styles']:
        declarations.update(parse_declarations(inline_style))
    for _, styles in data['stylesheet_matches']:
        declarations.update(parse_declarations(styles))
    return sorted(declarations)


def write_json_report(report, output_dir):
    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(output_dir, JSON_FILENAME)

    serializable = {}
    for class_name, data in report.items():
        serializable[class_name] = {
            'inline_styles': data['inline_styles'],
            'stylesheet_matches': [
                {'stylesheet': css_file, 'styles': styles}
                for css_file, styles in data['stylesheet_matches']
            ],
            'files': data['files'],
            'declarations': collect_declarations(data),
        }

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(serializable, f, indent=2)
    return output_file


def write_csv_report(report, output_dir):
    """Write one row per class, most widely used classes first"""
    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(output_dir, CSV_FILENAME)

    csv_data = []
    for class_name, data in report.items():
        csv_data.append({
            'class': class_name,
            'inline_style_count': len(data['inline_styles']),
            'stylesheet_count': len(data['stylesheet_matches']),
            'file_count': len(data['files']),
            'files': ', '.join(data['files']),
            'stylesheets': ', '.join(css_file for css_file, _ in data['stylesheet_matches']),
        })

    columns = ['class', 'inline_style_count', 'stylesheet_count', 'file_count', 'files', 'stylesheets']
    df = pd.DataFrame(csv_data, columns=columns)
    df = df.sort_values('file_count', ascending=False, kind='stable')
    df.to_csv(output_file, index=False)
    return output_file
