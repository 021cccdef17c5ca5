"""Shared fixtures: small project trees with markup and stylesheets."""

import os

import pytest

BOX_PAGE = """<!DOCTYPE html>
<html>
<head><link rel="stylesheet" href="/css/site.css"></head>
<body>
<div class="box" style="color:red"><span class="box"></span></div>
</body>
</html>
"""


def write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return str(path)


@pytest.fixture
def project(tmp_path):
    """A project root holding css/site.css and an html/ directory of pages"""
    root = tmp_path / "project"
    write(root / "css" / "site.css", ".box { margin: 0; }\n#main { color: red; }\n")
    write(root / "html" / "index.html", BOX_PAGE)
    return root


@pytest.fixture
def site_css(project):
    return os.path.realpath(project / "css" / "site.css")
