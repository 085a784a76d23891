# lingmoaddons

View models and helpers for applications that keep their logic apart from
their user interface. Each model exposes its rows and roles through plain
Python methods, so any front end can render it. The package uses only the
standard library.

## Modules

- `lingmoaddons.messagedialog` covers "don't show again" answers.
  - `Config` is a grouped key/value store. If it is given a path, it loads
    that INI-style file and `sync()` writes it back.
  - `Config.group(name)` returns a `ConfigGroup`. `read_entry` converts the
    stored value to the type of the default. The group also has
    `write_entry`, `delete_entry`, `exists` and `sync`.
  - `MessageDialogHelper` keeps its answers in the `Notification Messages`
    group.
  - `should_be_shown_two_actions` returns `{"show": True}`. When an answer is
    remembered, it returns `{"result": ..., "show": False}` instead.
  - `should_be_shown_continue` returns a bool.
  - `save_dont_show_again_two_actions` and `save_dont_show_again_continue`
    store an answer. An empty name raises `ValueError`.
- `lingmoaddons.yearmodel`: `YearModel(year=None)` lists the short month
  names of a year. The year defaults to the current one. It has
  `row_count()`, `data(row)` and `month_names()`.
- `lingmoaddons.soundspicker`: `SoundsPickerModel(data_dirs=None)`.
  - It lists the files under `<data dir>/sounds/<theme>/stereo`, using the
    `ringtone` or `notification` subdirectory when there is one.
  - The data directories default to the XDG ones, and the theme defaults to
    `lingmo-mobile`.
  - Names put in `default_audio` are moved to the front.
  - `data(row, SoundRole.NAME)` gives the file name without its extension.
    `SoundRole.URL` gives the path.
- `lingmoaddons.books` holds example book models.
  - `Book` is a dataclass.
  - `BookListModel` gives one role per field (`BookListRole`).
  - `BookTableModel` gives four columns (`BookColumn`) with `header_data`
    for `Orientation.HORIZONTAL`.
  - `sample_books()` returns a fixed catalogue of 14 books.
  - `sorted_by_year` sorts by year and keeps ties in their order.
- `lingmoaddons.albummodel`: `ExampleAlbumModel` builds three `AlbumItem`s
  from its `test_image` and `test_video` properties. The roles are
  `AlbumRole` and the item types are `ItemType`.
- `lingmoaddons.action` defines actions and their shortcuts.
  - `Action` has text, an icon name, an object name and a list of shortcuts.
    `trigger()` and `hover()` run callbacks.
  - `set_default_shortcut(s)` and `default_shortcut(s)` set and read the
    default shortcuts.
  - `set_shortcuts_configurable` and `is_shortcuts_configurable` set and read
    whether the user may change them.
  - `shortcuts_to_string` joins shortcuts with `"; "`.
    `shortcuts_from_string` parses them back; `"none"` means no shortcut.
- `lingmoaddons.actioncollection`: `ActionCollection` holds actions under
  unique names.
  - `add_action`, `new_action` and `add_actions` register actions.
  - `action(name)` and `action_at(index)` look them up.
  - `take_action`, `remove_action` and `clear` remove them.
  - `actions_without_group` and `action_groups` sort them by group.
  - The collection has inserted and changed callbacks, and forwards the
    triggered and hovered callbacks of its actions.
  - An optional `authorizer` can disable and hide actions by name.
  - `ActionCollection.all_collections()` lists the open collections.
- `lingmoaddons.collectionsettings`: `read_settings(collection, group=None)`
  applies stored shortcuts. `write_settings(collection, group=None,
  write_all=False, one_action=None)` stores the shortcuts that differ from
  their defaults and removes entries equal to the default. Both use the
  collection's `config` and its `config_group`, which is `Shortcuts` by
  default.
- `lingmoaddons.actionsmodel` is the command bar model.
  - `CommandBarModel.refresh([ActionGroup(...)])` lists each enabled action
    once.
  - Column 0 shows `"group: text"` and column 1 shows the shortcut.
  - `last_used_actions` holds at most six action texts. The most recent one
    gets the highest `CommandBarRole.SCORE`.
- `lingmoaddons.shortcutsmodel`: `ShortcutsModel` lists the configurable
  actions of some collections.
  - `update_shortcut` sets, appends or removes one shortcut.
  - `reset` and `reset_all` restore the defaults.
  - `save` writes every collection's settings.
  - `alternate_shortcuts(action)` returns all shortcuts but the first.

## Examples

```python
from lingmoaddons.books import BookTableModel, sample_books, sorted_by_year

model = BookTableModel(sorted_by_year(sample_books()))
model.row_count()      # 14
model.column_count()   # 4
model.data(0, 0)       # "Pride and Prejudice"
```

```python
from lingmoaddons.action import set_default_shortcut
from lingmoaddons.actioncollection import ActionCollection
from lingmoaddons.actionsmodel import ActionGroup, CommandBarModel
from lingmoaddons.shortcutsmodel import ShortcutsModel

collection = ActionCollection("editor")
save = collection.new_action("file_save", lambda: print("saved"))
save.text = "Save"
set_default_shortcut(save, "Ctrl+S")

shortcuts = ShortcutsModel()
shortcuts.refresh([collection])
shortcuts.update_shortcut(0, 1, "Ctrl+Shift+S")   # ["Ctrl+Shift+S"]

bar = CommandBarModel()
bar.refresh([ActionGroup("File", collection.actions)])
bar.data(0, 0)                                   # "File: Save"
```

## What it does not do

The package draws nothing: it has no widgets, dialogs or windows, and no
command to run. It has no helpers for avatar initials or colours. The only
calendar model is the list of a year's months. There is no month grid and no
scrolling calendar pages. There is also no application object that creates
the standard actions for you. You build your own `ActionCollection` and fill
it.

## Running the tests

```
pip install -e ".[test]"
pytest
```