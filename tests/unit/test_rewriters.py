# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for per-language text rewriters."""

import time

import pytest

from autorename import (
    CssRewriter,
    HtmlRewriter,
    JsRewriter,
    ReferenceRewriter,
    discover_class_names,
    rewriter_for,
)


def test_rw_001_discover_class_names_in_first_seen_order() -> None:
    css = ".b { color: red }\n.a, .b {margin: 0}\n.c{}"

    assert discover_class_names(css) == ["b", "a", "c"]


def test_rw_002_discover_ignores_declaration_values() -> None:
    css = "a { transition: opacity 0.5s, color 1s; }\n.real{}"

    assert discover_class_names(css) == ["real"]


def test_rw_003_discover_requires_brace_or_comma_after_name() -> None:
    css = ".outer .inner {}\n.btn:hover {}\n.x\n{}"

    assert discover_class_names(css) == ["inner", "x"]


def test_rw_004_discover_ignores_comments_before_selectors() -> None:
    css = "/* use 1.5, not 2; see .old { */ .x {}\n.y { /* .z, */ color: red }"

    assert discover_class_names(css) == ["x", "y"]


def test_rw_005_large_data_uri_is_processed_in_linear_time() -> None:
    payload = "A" * 250_000
    css = f".icon{{background:url(data:image/png;base64,{payload})}}\n.btn{{}}"

    started = time.monotonic()
    names = discover_class_names(css)
    result = CssRewriter().rewrite(css, {"icon": "Ic0n", "btn": "B7n"})
    elapsed = time.monotonic() - started

    assert names == ["icon", "btn"]
    assert result.text.startswith(".Ic0n{background:url(data:image/png;base64,AAA")
    assert result.text.endswith(")}\n.B7n{}")
    assert elapsed < 2.0


def test_rw_101_css_rewrites_selector_and_keeps_declarations() -> None:
    css = ".btn:hover, .btn{ background: url(img/x.btn) }"

    result = CssRewriter().rewrite(css, {"btn": "Qw3rtyU1"})

    assert result.text == ".Qw3rtyU1:hover, .Qw3rtyU1{ background: url(img/x.btn) }"
    assert result.replacements == 2


def test_rw_102_css_does_not_touch_longer_class_names() -> None:
    css = ".btn-primary{} .btn_x{} .btn{}"

    result = CssRewriter().rewrite(css, {"btn": "Zz"})

    assert result.text == ".btn-primary{} .btn_x{} .Zz{}"


def test_rw_103_css_substitution_is_not_chained() -> None:
    css = ".a{} .b{}"

    result = CssRewriter().rewrite(css, {"a": "b", "b": "c"})

    assert result.text == ".b{} .c{}"


def test_rw_104_css_rewrites_inside_media_blocks() -> None:
    css = "@media (max-width: 600px) {\n  .nav { display: none; }\n}"

    result = CssRewriter().rewrite(css, {"nav": "Nn"})

    assert ".Nn {" in result.text
    assert "(max-width: 600px)" in result.text


def test_rw_201_html_preserves_sibling_classes() -> None:
    html = '<div class="foo bar">foo</div>'

    result = HtmlRewriter().rewrite(html, {"foo": "zz1Abcde"})

    assert result.text == '<div class="zz1Abcde bar">foo</div>'
    assert result.replacements == 1


def test_rw_202_html_preserves_quote_style_and_spacing() -> None:
    html = "<span CLASS = 'a  foo\tb'></span>"

    result = HtmlRewriter().rewrite(html, {"foo": "Xy"})

    assert result.text == "<span CLASS = 'a  Xy\tb'></span>"


def test_rw_203_html_matches_whole_tokens_only() -> None:
    html = '<a class="btn-primary btn"></a><p data-class="btn"></p>'

    result = HtmlRewriter().rewrite(html, {"btn": "Bb"})

    assert result.text == '<a class="btn-primary Bb"></a><p data-class="btn"></p>'


def test_rw_301_js_rewrites_quoted_literals_only() -> None:
    js = "el.classList.add('foo');\nconst c = \"foo\";\nfoo();\nlet s = 'foo bar';"

    result = JsRewriter().rewrite(js, {"foo": "Rr"})

    assert result.text == (
        "el.classList.add('Rr');\nconst c = \"Rr\";\nfoo();\nlet s = 'foo bar';"
    )
    assert result.replacements == 2


def test_rw_302_js_requires_matching_quotes() -> None:
    js = "x('foo\");"

    result = JsRewriter().rewrite(js, {"foo": "Rr"})

    assert result.text == js
    assert result.replacements == 0


def test_rw_401_reference_rewrites_path_segments() -> None:
    text = (
        '<img src="img/logo.png">\n'
        "background: url(logo.png);\n"
        'load("logo.png?v=2"); see logo.png.'
    )

    result = ReferenceRewriter().rewrite(text, {"logo.png": "Ab12Cd34Ef.png"})

    assert "logo.png" not in result.text
    assert result.replacements == 4


def test_rw_402_reference_skips_longer_names() -> None:
    text = "mylogo.png logo.png.bak logo.pngx"

    result = ReferenceRewriter().rewrite(text, {"logo.png": "Ab12Cd34Ef.png"})

    assert result.text == text


def test_rw_501_empty_mapping_is_a_no_op() -> None:
    for rewriter in (CssRewriter(), HtmlRewriter(), JsRewriter(), ReferenceRewriter()):
        result = rewriter.rewrite(".a{}", {})
        assert result.text == ".a{}"
        assert result.replacements == 0


def test_rw_502_rewriter_lookup_by_extension() -> None:
    assert isinstance(rewriter_for("CSS"), CssRewriter)
    assert isinstance(rewriter_for("html"), HtmlRewriter)
    assert isinstance(rewriter_for("Js"), JsRewriter)
    with pytest.raises(KeyError):
        rewriter_for("txt")
