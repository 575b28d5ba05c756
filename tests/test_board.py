"""Tests for the kanban board client state."""
import json

import pytest
import pytest_asyncio

from mission_control.client.board import COLUMNS, KanbanBoard, array_move
from mission_control.client.notifications import NotificationCenter
from tests.fakes import FakeMissionControlAPI


@pytest.fixture
def api():
    fake = FakeMissionControlAPI()
    fake.add("Gamma", status="Done", priority="Low")
    fake.add("Beta", status="Planning", priority="High", desc="second")
    fake.add("Alpha", status="Planning")
    return fake


@pytest_asyncio.fixture
async def board(api):
    client = api.client()
    kanban = KanbanBoard(client, notifications=NotificationCenter())
    await kanban.refresh()
    yield kanban
    await client.aclose()


def _ids(tasks):
    return [t["title"] for t in tasks]


def test_array_move():
    assert array_move(["a", "b", "c"], 0, 2) == ["b", "c", "a"]
    assert array_move(["a", "b", "c"], 2, 0) == ["c", "a", "b"]


@pytest.mark.asyncio
async def test_columns_group_by_status(board):
    columns = board.columns()
    assert list(columns) == list(COLUMNS)
    assert _ids(columns["Planning"]) == ["Alpha", "Beta"]
    assert columns["In Progress"] == []
    assert _ids(columns["Done"]) == ["Gamma"]


@pytest.mark.asyncio
async def test_drag_over_column_reassigns_locally_without_request(board, api):
    alpha = board.find(board.column("Planning")[0]["id"])
    board.drag_start(alpha["id"])
    board.drag_over(alpha["id"], "In Progress")

    assert alpha["status"] == "In Progress"
    assert api.calls("PATCH") == []
    assert api.get(alpha["id"])["status"] == "Planning"


@pytest.mark.asyncio
async def test_drag_over_task_in_same_column_reorders(board, api):
    alpha, beta = board.column("Planning")
    board.drag_start(alpha["id"])
    board.drag_over(alpha["id"], beta["id"])

    assert _ids(board.column("Planning")) == ["Beta", "Alpha"]
    assert api.calls("PATCH") == []


@pytest.mark.asyncio
async def test_drag_over_task_in_other_column_is_ignored(board):
    alpha = board.column("Planning")[0]
    gamma = board.column("Done")[0]
    before = _ids(board.tasks)
    board.drag_over(alpha["id"], gamma["id"])
    assert _ids(board.tasks) == before
    assert alpha["status"] == "Planning"


@pytest.mark.asyncio
async def test_drop_sends_single_patch_with_current_status(board, api):
    alpha = board.column("Planning")[0]
    board.drag_start(alpha["id"])
    board.drag_over(alpha["id"], "In Progress")
    board.drag_over(alpha["id"], "Done")

    assert await board.drag_end(alpha["id"], "Done") is True

    patches = api.calls("PATCH")
    assert len(patches) == 1
    assert json.loads(patches[0].content) == {"status": "Done"}
    assert api.get(alpha["id"])["status"] == "Done"
    assert board.find(alpha["id"])["status"] == "Done"


@pytest.mark.asyncio
async def test_planning_straight_to_done_is_allowed(board, api):
    alpha = board.column("Planning")[0]
    assert await board.move(alpha["id"], "Done") is True
    assert api.get(alpha["id"])["status"] == "Done"


@pytest.mark.asyncio
async def test_failed_patch_rolls_back_by_refetch(board, api):
    alpha = board.column("Planning")[0]
    api.fail["PATCH"] = 500

    board.drag_start(alpha["id"])
    board.drag_over(alpha["id"], "Done")
    assert board.find(alpha["id"])["status"] == "Done"

    assert await board.drag_end(alpha["id"], "Done") is False
    assert board.find(alpha["id"])["status"] == "Planning"
    assert len(api.calls("GET")) == 2  # initial load + rollback


@pytest.mark.asyncio
async def test_network_error_on_drop_rolls_back(board, api):
    alpha = board.column("Planning")[0]
    board.drag_start(alpha["id"])
    board.drag_over(alpha["id"], "Done")

    api.offline = True
    assert await board.drag_end(alpha["id"], "Done") is False
    # Refetch failed too: board keeps what it had
    assert board.find(alpha["id"])["status"] == "Done"

    api.offline = False
    assert await board.refresh() is True
    assert board.find(alpha["id"])["status"] == "Planning"


@pytest.mark.asyncio
async def test_drop_outside_board_undoes_hover(board, api):
    alpha = board.column("Planning")[0]
    board.drag_start(alpha["id"])
    board.drag_over(alpha["id"], "Done")

    assert await board.drag_end(alpha["id"], None) is False
    assert api.calls("PATCH") == []
    assert board.find(alpha["id"])["status"] == "Planning"


@pytest.mark.asyncio
async def test_reorder_is_lost_on_refresh(board):
    alpha, beta = board.column("Planning")
    board.drag_over(alpha["id"], beta["id"])
    assert _ids(board.column("Planning")) == ["Beta", "Alpha"]

    await board.refresh()
    assert _ids(board.column("Planning")) == ["Alpha", "Beta"]


@pytest.mark.asyncio
async def test_filtered(board):
    assert _ids(board.filtered(search="SECOND")) == ["Beta"]
    assert _ids(board.filtered(priority="Low")) == ["Gamma"]
    assert _ids(board.filtered(status="Planning")) == ["Alpha", "Beta"]
    assert _ids(board.filtered(search="a", priority="High", status="Planning")) == ["Beta"]


@pytest.mark.asyncio
async def test_add_and_delete_task(board, api):
    created = await board.add_task("Delta", priority="High", assigned_to="ETHN")
    assert created["assignedTo"] == "ETHN"
    assert board.find(created["id"]) is not None

    assert await board.add_task("") is None

    assert await board.delete_task(created["id"]) is True
    assert board.find(created["id"]) is None


@pytest.mark.asyncio
async def test_duplicate_task_notifies(board, api):
    beta = board.filtered(search="Beta")[0]
    copy = await board.duplicate_task(beta["id"])
    assert copy["title"] == "Beta (Copy)"
    assert copy["status"] == "Planning"
    assert copy["desc"] == "second"
    assert board.notifications.items[0].type == "success"


@pytest.mark.asyncio
async def test_bulk_operations(board, api):
    ids = [t["id"] for t in board.column("Planning")]

    assert await board.bulk_complete(ids) == 2
    assert all(api.get(i)["status"] == "Done" for i in ids)

    assert await board.bulk_duplicate(ids) == 2
    assert len(board.column("Planning")) == 2

    assert await board.bulk_delete(ids) == 2
    assert all(api.get(i) is None for i in ids)


@pytest.mark.asyncio
async def test_bulk_delete_skips_failures(board, api):
    ids = [t["id"] for t in board.tasks] + ["missing-id"]
    assert await board.bulk_delete(ids) == 3
    assert board.tasks == []


@pytest.mark.asyncio
async def test_export_then_import(board, api):
    exported = board.export_json()
    api.tasks.clear()
    await board.refresh()

    assert await board.import_json(exported) == 3
    assert sorted(_ids(board.tasks)) == ["Alpha", "Beta", "Gamma"]
    assert board.filtered(search="Gamma")[0]["status"] == "Done"


@pytest.mark.asyncio
async def test_import_rejects_malformed_json(board):
    with pytest.raises(ValueError):
        await board.import_json("{not json")
    with pytest.raises(ValueError):
        await board.import_json('{"title": "x"}')


@pytest.mark.asyncio
async def test_import_rejects_entries_that_are_not_objects(board, api):
    for raw in ('["just a string"]', '[{"title": "ok"}, 42]'):
        with pytest.raises(ValueError):
            await board.import_json(raw)
    assert api.calls("POST") == []
    assert len(api.tasks) == 3
