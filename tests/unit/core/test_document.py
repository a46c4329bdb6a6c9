"""Unit tests for core/document.py"""

from mdpage.core.document import DEFAULT_LANG, assemble


def test_assemble_shell_structure():
    html = assemble("Post", "<p>hi</p>")
    assert html.startswith("<!DOCTYPE html>\n")
    assert html.endswith("</html>\n")
    assert html.count("<head>") == 1 and html.count("</head>") == 1
    assert html.count("<body>") == 1 and html.count("</body>") == 1
    assert html.index("</head>") < html.index("<body>")


def test_assemble_embeds_title_and_body():
    html = assemble("Post", "<p>hi</p>")
    assert "<title>Post</title>" in html
    assert "<body>\n    <p>hi</p>\n</body>" in html


def test_assemble_fixed_styling():
    html = assemble("Post", "")
    for rule in ("max-width: 800px", "border-bottom: 2px solid #ecf0f1", "color: #3498db", "margin-bottom: 8px"):
        assert rule in html


def test_assemble_lang():
    assert f'<html lang="{DEFAULT_LANG}">' in assemble("t", "")
    assert '<html lang="en">' in assemble("t", "", lang="en")


def test_assemble_does_not_escape():
    html = assemble("a <b> & c", "<em>x</em>")
    assert "<title>a <b> & c</title>" in html
    assert "<em>x</em>" in html


def test_assemble_is_deterministic():
    assert assemble("Post", "<p>hi</p>") == assemble("Post", "<p>hi</p>")
