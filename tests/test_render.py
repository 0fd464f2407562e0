from kanpe.render import ERROR_STYLE, HEADER_STYLE, TITLE_STYLE, Renderer


def test_render_keeps_text() -> None:
    text = "# intro\n# ----\n# 1. A\n# ----\nx = 1\n\ny = 2"
    out = Renderer().render(text, "python")
    assert out.plain == text


def test_render_styles_marker_lines() -> None:
    out = Renderer().render("# ----\n# 1. A\n# ----\n# plain comment\nx = 1\n", "python")
    header_spans = [s for s in out.spans if s.style == HEADER_STYLE]
    assert len(header_spans) == 3
    assert out.plain[header_spans[1].start : header_spans[1].end] == "# 1. A\n"


def test_render_slash_markers() -> None:
    out = Renderer().render("// ----\n// 1. A\nlet x = 1;\n", "rust")
    assert len([s for s in out.spans if s.style == HEADER_STYLE]) == 2


def test_render_unknown_lexer() -> None:
    out = Renderer().render("a\nb", "no-such-lexer")
    assert out.plain == "a\nb"


def test_render_header() -> None:
    r = Renderer()
    assert r.render_header("0 - Basics", True).style == TITLE_STYLE
    assert r.render_header("├── 1. A").style == HEADER_STYLE


def test_render_error() -> None:
    t = Renderer().render_error("boom")
    assert t.plain == "Error: boom"
    assert t.style == ERROR_STYLE


def test_render_indented_divider_is_code() -> None:
    # パーサが区切り線と見なさない行は見出し扱いしない
    out = Renderer().render("  # ----\n# 1. A\nx = 1\n", "python")
    assert [s for s in out.spans if s.style == HEADER_STYLE] == []
    assert out.plain == "  # ----\n# 1. A\nx = 1\n"


def test_render_keeps_line_separator_inside_line() -> None:
    out = Renderer().render("# ----\n# 1. A\u2028# ----\nx\n", "text")
    header_spans = [s for s in out.spans if s.style == HEADER_STYLE]
    assert len(header_spans) == 2
    assert out.plain[header_spans[1].start : header_spans[1].end] == "# 1. A\u2028# ----\n"
