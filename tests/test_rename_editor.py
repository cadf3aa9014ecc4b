from timeline_lanes.interaction.rename import InlineRenameEditor
from timeline_lanes.timeline.service import TimelineService

ITEMS = [
    {"id": 1, "start": "2021-01-01", "end": "2021-01-05", "name": "First item"},
    {"id": 2, "start": "2021-01-06", "end": "2021-01-08", "name": "Second item"},
]


def test_enter_commits_buffer() -> None:
    service = TimelineService(ITEMS)
    session = service.begin_rename(1)
    assert session.buffer == "First item"

    service.update_rename_buffer("Kickoff")
    assert service.get_item(1).name == "First item"

    renamed = service.handle_rename_key("Enter")
    assert renamed is not None
    assert renamed.name == "Kickoff"
    assert service.edit_session is None


def test_escape_discards_buffer() -> None:
    service = TimelineService(ITEMS)
    service.begin_rename(1)
    service.update_rename_buffer("Discarded")
    assert service.handle_rename_key("Escape") is None
    assert service.get_item(1).name == "First item"
    assert service.edit_session is None


def test_other_keys_keep_session_open() -> None:
    service = TimelineService(ITEMS)
    service.begin_rename(2)
    assert service.handle_rename_key("a") is None
    assert service.edit_session is not None


def test_commit_on_focus_loss_without_session_is_noop() -> None:
    service = TimelineService(ITEMS)
    assert service.commit_rename() is None


def test_starting_second_edit_cancels_first() -> None:
    service = TimelineService(ITEMS)
    service.begin_rename(1)
    service.update_rename_buffer("Never saved")
    service.begin_rename(2)
    service.update_rename_buffer("Saved")
    service.commit_rename()
    assert service.get_item(1).name == "First item"
    assert service.get_item(2).name == "Saved"


def test_rename_item_is_a_one_shot_commit() -> None:
    service = TimelineService(ITEMS)
    assert service.rename_item(2, "").name == ""
    assert service.edit_session is None


def test_editor_update_without_session_is_ignored() -> None:
    editor = InlineRenameEditor()
    editor.update("text")
    assert editor.session is None
    assert editor.editing_item_id() is None
    assert editor.cancel() is None
