import pytest

from lingmoaddons.messagedialog import Config, MessageDialogHelper


def test_unknown_name_is_shown():
    helper = MessageDialogHelper()
    assert helper.should_be_shown_two_actions("ask") == {"show": True}
    assert helper.should_be_shown_continue("ask") is True


@pytest.mark.parametrize("result", [True, False])
def test_two_actions_round_trip(result):
    helper = MessageDialogHelper()
    helper.save_dont_show_again_two_actions("ask", result)
    assert helper.should_be_shown_two_actions("ask") == {"result": result, "show": False}


@pytest.mark.parametrize(
    "stored, expected",
    [("Yes", True), ("TRUE", True), ("no", False), ("False", False)],
)
def test_two_actions_reads_textual_answers(stored, expected):
    config = Config()
    config.group("Notification Messages").write_entry("ask", stored)
    helper = MessageDialogHelper(config)
    assert helper.should_be_shown_two_actions("ask") == {"result": expected, "show": False}


def test_two_actions_unrecognised_value_is_shown():
    config = Config()
    config.group("Notification Messages").write_entry("ask", "maybe")
    assert MessageDialogHelper(config).should_be_shown_two_actions("ask") == {"show": True}


def test_continue_round_trip():
    helper = MessageDialogHelper()
    helper.save_dont_show_again_continue("cont")
    assert helper.should_be_shown_continue("cont") is False


def test_colon_prefix_marks_entry_global():
    helper = MessageDialogHelper()
    helper.save_dont_show_again_continue(":shared")
    helper.save_dont_show_again_two_actions("local", True)
    assert ("Notification Messages", ":shared") in helper.config.global_keys
    assert ("Notification Messages", "local") not in helper.config.global_keys


def test_empty_name_is_rejected():
    helper = MessageDialogHelper()
    with pytest.raises(ValueError):
        helper.save_dont_show_again_continue("")


def test_answers_persist_to_file(tmp_path):
    path = tmp_path / "apprc"
    helper = MessageDialogHelper(Config(path))
    helper.save_dont_show_again_two_actions("ask", False)
    assert "[Notification Messages]" in path.read_text(encoding="utf-8")
    reloaded = MessageDialogHelper(Config(path))
    assert reloaded.should_be_shown_two_actions("ask") == {"result": False, "show": False}


def test_config_group_entries(tmp_path):
    config = Config(tmp_path / "rc")
    group = config.group("General")
    assert group.exists() is False
    group.write_entry("count", 5)
    group.write_entry("text", "two\nlines")
    group.sync()
    again = Config(tmp_path / "rc").group("General")
    assert again.read_entry("count", 0) == 5
    assert again.read_entry("text", "") == "two\nlines"
    again.delete_entry("count")
    assert again.read_entry("count", 7) == 7
    assert again.exists() is True