from kanpe.display import display_name, outline_lines, sheet_heading, tree_prefix


def test_display_name() -> None:
    assert display_name("basics") == "Basics"
    assert display_name("rust_async-io") == "Rust Async Io"
    assert display_name("NALGEBRA") == "Nalgebra"


def test_sheet_heading() -> None:
    assert sheet_heading(3, "rust_basics") == "3 - Rust Basics"


def test_tree_prefix_marks_last() -> None:
    assert tree_prefix(0, 2) == "├──"
    assert tree_prefix(1, 2) == "└──"


def test_outline_lines() -> None:
    assert outline_lines(["Intro", "Outro"]) == ["├── 1. Intro", "└── 2. Outro"]
    assert outline_lines(["Only"]) == ["└── 1. Only"]
    assert outline_lines([]) == []
