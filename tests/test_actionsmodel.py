from lingmoaddons.action import Action, set_default_shortcut
from lingmoaddons.actionsmodel import (
    MAX_LAST_USED,
    ActionGroup,
    CommandBarModel,
    CommandBarRole,
)


def _actions(*texts):
    return [Action(text) for text in texts]


def test_refresh_skips_disabled_and_duplicates():
    open_, save, quit_ = _actions("Open", "Save", "Quit")
    save.enabled = False
    model = CommandBarModel()
    model.refresh([ActionGroup("File", [open_, save, open_]), ActionGroup("App", [quit_, open_])])
    assert model.row_count() == 2
    assert [model.data(r, 0, CommandBarRole.ACTION) for r in range(2)] == [open_, quit_]


def test_scores_follow_recent_use():
    actions = _actions("Open", "Save", "Quit")
    model = CommandBarModel()
    model.last_used_actions = ["Save", "Open"]
    model.refresh([ActionGroup("File", actions)])
    scores = [model.data(r, 0, CommandBarRole.SCORE) for r in range(3)]
    assert scores[1] > scores[0] > scores[2]
    assert scores[2] == -1


def test_last_used_trimmed():
    names = [f"a{i}" for i in range(MAX_LAST_USED + 2)]
    model = CommandBarModel()
    model.last_used_actions = names
    assert model.last_used_actions == names[:MAX_LAST_USED]


def test_action_triggered_pushes_front_and_caps():
    model = CommandBarModel()
    names = [f"a{i}" for i in range(MAX_LAST_USED)]
    model.last_used_actions = names
    model.action_triggered("new")
    assert model.last_used_actions == ["new"] + names[:-1]


def test_display_text_strips_accelerators():
    action = Action("&Open")
    model = CommandBarModel()
    model.refresh([ActionGroup("&File", [action])])
    assert model.data(0, 0, CommandBarRole.DISPLAY) == "File: Open"
    assert model.data(0, 0, CommandBarRole.DISPLAY_NAME) == model.data(0, 0, CommandBarRole.DISPLAY)


def test_double_ampersand_kept():
    model = CommandBarModel()
    model.refresh([ActionGroup("G", [Action("Save && Exit")])])
    assert model.data(0, 0) == "G: Save & Exit"


def test_second_column_shows_shortcut():
    action = Action("Open", "document-open")
    set_default_shortcut(action, "Ctrl+O")
    model = CommandBarModel()
    model.refresh([ActionGroup("File", [action])])
    assert model.data(0, 1, CommandBarRole.DISPLAY) == "Ctrl+O"
    assert model.data(0, 0, CommandBarRole.SHORTCUT) == "Ctrl+O"
    assert model.data(0, 0, CommandBarRole.DECORATION) == "document-open"
    assert model.data(0, 1, CommandBarRole.DECORATION) is None


def test_alignment_per_column():
    model = CommandBarModel()
    model.refresh([ActionGroup("File", _actions("Open"))])
    assert model.data(0, 0, CommandBarRole.TEXT_ALIGNMENT) != model.data(0, 1, CommandBarRole.TEXT_ALIGNMENT)


def test_set_score():
    model = CommandBarModel()
    model.refresh([ActionGroup("File", _actions("Open"))])
    assert model.set_score(0, 42) is True
    assert model.data(0, 0, CommandBarRole.SCORE) == 42
    assert model.set_score(5, 1) is False


def test_out_of_range_and_counts():
    model = CommandBarModel()
    model.refresh([ActionGroup("File", _actions("Open"))])
    assert model.data(3, 0) is None
    assert model.data(0, 2) is None
    assert model.column_count() == 2


def test_role_names():
    names = CommandBarModel().role_names()
    assert names[CommandBarRole.ACTION] == "qaction"
    assert names[CommandBarRole.SCORE] == "score"
    assert names[CommandBarRole.SHORTCUT] == "shortcut"
    assert names[CommandBarRole.DISPLAY_NAME] == "displayName"