import pytest

from magi.config.theme import Theme
from magi.git.types import GitRef, ReferenceType
from magi.model import (
    CommitPopup,
    DiffLine,
    DiffLineType,
    EmptyLine,
    FileChange,
    FileStatus,
    HeadRef,
    InputMode,
    Line,
    Model,
    PushPopupState,
    RunningState,
    SectionHeader,
    SectionKind,
    SectionType,
    StagedFile,
    UiModel,
    UnstagedFile,
)


def unstaged_file(path):
    return SectionType(SectionKind.UNSTAGED_FILE, path=path)


def unstaged_hunk(path, index):
    return SectionType(SectionKind.UNSTAGED_HUNK, path=path, hunk_index=index)


def test_section_type_parent_section():
    assert SectionType(SectionKind.INFO).parent_section() is None
    assert SectionType(SectionKind.UNTRACKED_FILES).parent_section() is None
    assert SectionType(SectionKind.UNSTAGED_CHANGES).parent_section() is None

    assert unstaged_file("foo.rs").parent_section() == SectionType(SectionKind.UNSTAGED_CHANGES)
    assert unstaged_hunk("foo.rs", 0).parent_section() == unstaged_file("foo.rs")


def test_staged_parents():
    hunk = SectionType(SectionKind.STAGED_HUNK, path="a.txt", hunk_index=2)
    assert hunk.parent_section() == SectionType(SectionKind.STAGED_FILE, path="a.txt")
    assert hunk.parent_section().parent_section() == SectionType(SectionKind.STAGED_CHANGES)


def test_is_hidden_by_collapsed_parent():
    collapsed = set()
    file_section = unstaged_file("foo.rs")
    hunk_section = unstaged_hunk("foo.rs", 0)

    assert not file_section.is_hidden_by(collapsed)
    assert not hunk_section.is_hidden_by(collapsed)

    collapsed.add(SectionType(SectionKind.UNSTAGED_CHANGES))
    assert file_section.is_hidden_by(collapsed)
    assert hunk_section.is_hidden_by(collapsed)

    collapsed.clear()
    collapsed.add(unstaged_file("foo.rs"))
    assert not file_section.is_hidden_by(collapsed)
    assert hunk_section.is_hidden_by(collapsed)

    assert not unstaged_hunk("bar.rs", 0).is_hidden_by(collapsed)


def test_line_is_hidden():
    collapsed = {SectionType(SectionKind.UNSTAGED_CHANGES)}

    line = Line(
        UnstagedFile(FileChange("foo.rs", FileStatus.MODIFIED)),
        unstaged_file("foo.rs"),
    )
    assert line.is_hidden(collapsed)

    assert not Line(EmptyLine(), None).is_hidden(collapsed)

    header_line = Line(
        SectionHeader("Unstaged changes", 1), SectionType(SectionKind.UNSTAGED_CHANGES)
    )
    assert not header_line.is_hidden(collapsed)

    collapsed = {unstaged_file("foo.rs")}
    file_line = Line(
        UnstagedFile(FileChange("foo.rs", FileStatus.MODIFIED)),
        unstaged_file("foo.rs"),
    )
    assert not file_line.is_hidden(collapsed)


def test_non_header_line_hidden_by_own_collapsed_section():
    section = SectionType(SectionKind.UNTRACKED_FILES)
    line = Line(DiffLine("x", DiffLineType.CONTEXT), section)
    assert line.is_hidden({section})
    assert not line.is_hidden(set())


def test_collapsible_section():
    header_line = Line(
        SectionHeader("Untracked files", 2), SectionType(SectionKind.UNTRACKED_FILES)
    )
    assert header_line.collapsible_section() == SectionType(SectionKind.UNTRACKED_FILES)

    head_ref_line = Line(
        HeadRef(GitRef("main", "abc1234", "Initial commit", ReferenceType.LOCAL_BRANCH)),
        SectionType(SectionKind.INFO),
    )
    assert head_ref_line.collapsible_section() == SectionType(SectionKind.INFO)

    file_line = Line(
        UnstagedFile(FileChange("foo.rs", FileStatus.MODIFIED)), unstaged_file("foo.rs")
    )
    assert file_line.collapsible_section() == unstaged_file("foo.rs")

    diff_line = Line(DiffLine("+ added", DiffLineType.ADDITION), unstaged_hunk("foo.rs", 0))
    assert diff_line.collapsible_section() is None

    assert Line(EmptyLine(), None).collapsible_section() is None


def test_collapsible_section_staged_file():
    line = Line(StagedFile(FileChange("bar.rs", FileStatus.NEW)), None)
    assert line.collapsible_section() == SectionType(SectionKind.STAGED_FILE, path="bar.rs")


def test_file_path():
    assert unstaged_file("foo.rs").file_path() == "foo.rs"
    assert SectionType(SectionKind.STAGED_FILE, path="bar.rs").file_path() == "bar.rs"
    for kind in (
        SectionKind.INFO,
        SectionKind.UNTRACKED_FILES,
        SectionKind.UNSTAGED_CHANGES,
        SectionKind.STAGED_CHANGES,
    ):
        assert SectionType(kind).file_path() is None
    assert unstaged_hunk("foo.rs", 0).file_path() is None


@pytest.mark.parametrize(
    "section, expected",
    [
        (SectionType(SectionKind.STAGED_FILE, path="a"), True),
        (SectionType(SectionKind.UNSTAGED_FILE, path="a"), True),
        (SectionType(SectionKind.UNSTAGED_CHANGES), False),
        (SectionType(SectionKind.RECENT_COMMITS), False),
    ],
)
def test_default_collapsed(section, expected):
    assert section.default_collapsed() is expected


def test_is_visual_mode():
    ui_model = UiModel()
    assert not ui_model.is_visual_mode()
    ui_model.visual_mode_anchor = 5
    assert ui_model.is_visual_mode()
    ui_model.visual_mode_anchor = None
    assert not ui_model.is_visual_mode()


def test_visual_selection_range_none_when_not_active():
    assert UiModel().visual_selection_range() is None


def test_visual_selection_range_ordered():
    ui_model = UiModel(cursor_position=3, visual_mode_anchor=7)
    assert ui_model.visual_selection_range() == (3, 7)
    ui_model.cursor_position = 7
    ui_model.visual_mode_anchor = 3
    assert ui_model.visual_selection_range() == (3, 7)


def test_visual_selection_range_same_position():
    ui_model = UiModel(cursor_position=5, visual_mode_anchor=5)
    assert ui_model.visual_selection_range() == (5, 5)


def test_input_mode_display_names():
    assert InputMode.NORMAL.display_name() == "NORMAL"
    assert InputMode.VISUAL.display_name() == "VISUAL"
    assert InputMode.SEARCH.display_name() == "SEARCH"


def test_current_mode_defaults_to_normal():
    assert UiModel().current_mode() is InputMode.NORMAL


def test_current_mode_returns_visual_when_anchor_set():
    assert UiModel(visual_mode_anchor=5).current_mode() is InputMode.VISUAL


def test_current_mode_returns_search_when_search_active():
    assert UiModel(search_mode_active=True).current_mode() is InputMode.SEARCH


def test_search_mode_takes_priority_over_visual():
    ui_model = UiModel(visual_mode_anchor=5, search_mode_active=True)
    assert ui_model.current_mode() is InputMode.SEARCH


def test_model_defaults():
    sentinel = object()
    model = Model(git_info=sentinel)
    assert model.git_info is sentinel
    assert model.running_state is RunningState.RUNNING
    assert model.popup is None
    assert model.toast is None
    assert model.theme == Theme.default_theme()
    assert model.ui_model.current_mode() is InputMode.NORMAL


def test_popup_equality():
    assert CommitPopup() == CommitPopup()
    state = PushPopupState("main", None, "origin")
    assert state == PushPopupState("main", None, "origin", False, "")
    state.input_text = "feature"
    assert state != PushPopupState("main", None, "origin")