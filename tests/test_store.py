"""Tests for the JSON task store."""

import json
from pathlib import Path

import pytest

from todo_cli.errors import StorageError
from todo_cli.tasks.models import Task
from todo_cli.tasks.store import TaskStore, atomic_write_json


class TestLoad:
    """Tests for TaskStore.load."""

    def test_missing_file_is_empty(self, store: TaskStore):
        assert store.load() == []

    def test_missing_file_creates_nothing(self, store: TaskStore, tasks_file: Path):
        store.load()
        assert not tasks_file.exists()
        assert not tasks_file.parent.exists()

    def test_reads_records_in_order(self, store: TaskStore, tasks_file: Path):
        tasks_file.parent.mkdir(parents=True)
        tasks_file.write_text(
            json.dumps(
                [
                    {"id": 1, "description": "Buy groceries", "done": False},
                    {"id": 2, "description": "Write README", "done": True},
                ]
            )
        )

        tasks = store.load()

        assert tasks == [
            Task(id=1, description="Buy groceries", done=False),
            Task(id=2, description="Write README", done=True),
        ]

    def test_invalid_json(self, store: TaskStore, tasks_file: Path):
        tasks_file.parent.mkdir(parents=True)
        tasks_file.write_text("[{not json")

        with pytest.raises(StorageError, match="Cannot parse") as exc_info:
            store.load()
        assert exc_info.value.path == tasks_file

    def test_top_level_must_be_list(self, store: TaskStore, tasks_file: Path):
        tasks_file.parent.mkdir(parents=True)
        tasks_file.write_text('{"items": []}')

        with pytest.raises(StorageError, match="expected a list"):
            store.load()

    def test_malformed_record(self, store: TaskStore, tasks_file: Path):
        tasks_file.parent.mkdir(parents=True)
        tasks_file.write_text('[{"id": 1, "description": "missing done"}]')

        with pytest.raises(StorageError, match="missing 'done'"):
            store.load()

    def test_duplicate_ids(self, store: TaskStore, tasks_file: Path):
        tasks_file.parent.mkdir(parents=True)
        tasks_file.write_text(
            '[{"id": 1, "description": "a", "done": false},'
            ' {"id": 1, "description": "b", "done": false}]'
        )

        with pytest.raises(StorageError, match="duplicate task id 1"):
            store.load()

    def test_lone_surrogate_description(self, store: TaskStore, tasks_file: Path):
        tasks_file.parent.mkdir(parents=True)
        tasks_file.write_text('[{"id": 1, "description": "\\ud83d", "done": false}]')

        with pytest.raises(StorageError, match="not valid UTF-8"):
            store.load()

    def test_unreadable_path(self, tmp_path: Path):
        # A directory where the file should be cannot be opened for reading
        path = tmp_path / "tasks.json"
        path.mkdir()

        with pytest.raises(StorageError, match="Cannot read"):
            TaskStore(path).load()


class TestSave:
    """Tests for TaskStore.save."""

    def test_creates_directory(self, store: TaskStore, tasks_file: Path):
        store.save([Task(id=1, description="Buy milk")])
        assert tasks_file.exists()

    def test_writes_pretty_json_array(self, store: TaskStore, tasks_file: Path):
        store.save([Task(id=1, description="Buy milk")])

        text = tasks_file.read_text(encoding="utf-8")
        assert "\n  " in text
        assert json.loads(text) == [{"id": 1, "description": "Buy milk", "done": False}]

    def test_keeps_unicode_readable(self, store: TaskStore, tasks_file: Path):
        store.save([Task(id=1, description="Café ☕")])
        assert "Café ☕" in tasks_file.read_text(encoding="utf-8")

    def test_overwrites_in_full(self, store: TaskStore):
        store.save([Task(id=1, description="a"), Task(id=2, description="b")])
        store.save([Task(id=2, description="b")])
        assert store.load() == [Task(id=2, description="b")]

    def test_leaves_no_temp_file(self, store: TaskStore, tasks_file: Path):
        store.save([Task(id=1, description="a")])
        assert list(tasks_file.parent.iterdir()) == [tasks_file]

    def test_write_failure_raises_storage_error(self, tmp_path: Path):
        # Parent "directory" is a regular file, so mkdir fails
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = TaskStore(blocker / "tasks.json")

        with pytest.raises(StorageError, match="Cannot write"):
            store.save([Task(id=1, description="a")])

    def test_unencodable_description_raises_storage_error(self, store: TaskStore, tasks_file: Path):
        store.save([Task(id=1, description="original")])

        with pytest.raises(StorageError, match="Cannot write"):
            store.save([Task(id=1, description="caf\udce9")])

        assert store.load() == [Task(id=1, description="original")]
        assert not tasks_file.with_suffix(".json.tmp").exists()

    def test_failed_replace_keeps_previous_contents(self, store: TaskStore, tasks_file: Path, monkeypatch):
        store.save([Task(id=1, description="original")])

        def fail_replace(self, target):
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", fail_replace)
        with pytest.raises(StorageError, match="disk full"):
            store.save([])
        monkeypatch.undo()

        assert store.load() == [Task(id=1, description="original")]
        assert not tasks_file.with_suffix(".json.tmp").exists()


class TestRoundTrip:
    """save followed by load yields the same collection."""

    @pytest.mark.parametrize(
        "tasks",
        [
            [],
            [Task(id=1, description="Buy milk")],
            [
                Task(id=4, description="later id first", done=True),
                Task(id=2, description="with \"quotes\" and \\ slashes"),
                Task(id=9, description="  padded  "),
            ],
        ],
    )
    def test_roundtrip(self, store: TaskStore, tasks: list[Task]):
        store.save(tasks)
        assert store.load() == tasks


def test_atomic_write_json(tmp_path: Path):
    path = tmp_path / "nested" / "out.json"
    atomic_write_json(path, {"a": 1})
    assert json.loads(path.read_text()) == {"a": 1}
    assert not path.with_suffix(".json.tmp").exists()
