# tests/test_codec.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskmenu.codec import (
    TaskFileCodec,
    TaskFileError,
    decode_task,
    decode_tasks,
    encode_task,
    encode_tasks,
)
from taskmenu.schema import Task, TaskFileConfig


def test_encode_plain_rows_without_trailing_newline(tasks) -> None:
    assert encode_tasks(tasks) == "A,d1,2\nB,d2,1"


def test_encode_empty_list_is_empty_text() -> None:
    assert encode_tasks([]) == ""


def test_encode_appends_creation_timestamp_when_present() -> None:
    task = Task(name="A", description="d1", priority=2, date_of_creation=1643651148)
    assert encode_task(task) == "A,d1,2,1643651148"


def test_decode_example_keeps_order(tasks) -> None:
    assert decode_tasks("A,d1,2\nB,d2,1") == tasks


def test_round_trip_preserves_fields_and_order() -> None:
    original = [
        Task(name="Write report", description="quarterly numbers", priority=3),
        Task(name="", description="no name", priority=-1),
        Task(name="Call", description="", priority=0, date_of_creation=1643651150),
        Task(name="Write report", description="duplicate name", priority=3),
    ]
    assert decode_tasks(encode_tasks(original)) == original


def test_decode_drops_blank_lines() -> None:
    decoded = decode_tasks("A,d1,2\n\nB,d2,1\n   \n")
    assert [t.name for t in decoded] == ["A", "B"]


def test_decode_strips_labels_and_whitespace() -> None:
    text = "name: Task1,  description: Description1,  priority: 2\nname:Task2, description:Description2, priority:1"
    assert decode_tasks(text) == [
        Task(name="Task1", description="Description1", priority=2),
        Task(name="Task2", description="Description2", priority=1),
    ]


def test_decode_invalid_priority_defaults_to_zero(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="taskmenu"):
        task = decode_task("A,d1,high", line_no=1)
    assert task == Task(name="A", description="d1", priority=0)
    assert "invalid priority" in caplog.text


def test_decode_skips_four_field_row_with_bad_timestamp(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="taskmenu"):
        assert decode_task("A,d1,2,yesterday", line_no=4) is None
    assert "Skipping line 4" in caplog.text


def test_decode_skips_row_split_by_embedded_comma(caplog) -> None:
    text = encode_tasks([Task(name="A", description="one, two", priority=1)])
    assert text == "A,one, two,1"

    with caplog.at_level(logging.WARNING, logger="taskmenu"):
        assert decode_tasks(text) == []
    assert "not both integers" in caplog.text


def test_decode_keeps_label_like_text_in_plain_rows() -> None:
    original = [
        Task(name="name: x", description="d", priority=1),
        Task(name="A", description="description: kept", priority=2),
    ]
    assert decode_tasks(encode_tasks(original)) == original


def test_decode_strips_labels_only_when_every_field_is_labeled() -> None:
    assert decode_task("name: A, d1, 2") == Task(name="name: A", description="d1", priority=2)


def test_decode_blank_fields_yield_empty_task() -> None:
    assert decode_task(",") == Task(name="", description="", priority=0)
    assert decode_task(" , , ") == Task(name="", description="", priority=0)


def test_decode_skips_rows_with_wrong_field_count(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="taskmenu"):
        decoded = decode_tasks("A,d1,2\nbroken row\nB,with,too,many,commas\nC,d3,5")
    assert [t.name for t in decoded] == ["A", "C"]
    assert "Skipping line 2" in caplog.text
    assert "Skipping line 3" in caplog.text


def test_read_missing_file_returns_empty_list(tmp_path: Path, caplog) -> None:
    codec = TaskFileCodec(TaskFileConfig(path=str(tmp_path / "absent.csv")))
    with caplog.at_level(logging.WARNING, logger="taskmenu"):
        assert codec.read() == []
    assert "Error reading tasks" in caplog.text


def test_write_overwrites_whole_file(config: TaskFileConfig, tasks) -> None:
    codec = TaskFileCodec(config)
    Path(config.path).write_text("old,row,9\nanother,row,8\nthird,row,7")

    codec.write(tasks)

    assert Path(config.path).read_text() == "A,d1,2\nB,d2,1"
    assert codec.read() == tasks


def test_write_failure_raises_task_file_error(tmp_path: Path, tasks) -> None:
    codec = TaskFileCodec(TaskFileConfig(path=str(tmp_path / "missing" / "tasks.csv")))
    with pytest.raises(TaskFileError):
        codec.write(tasks)


def test_default_config_points_at_tasks_csv() -> None:
    assert TaskFileCodec().path == Path("tasks.csv")


def test_read_non_utf8_file_returns_empty_list(config: TaskFileConfig, caplog) -> None:
    Path(config.path).write_bytes(b"A,\xff\xfe,2")
    codec = TaskFileCodec(config)

    with caplog.at_level(logging.WARNING, logger="taskmenu"):
        assert codec.read() == []
    assert "Error reading tasks" in caplog.text


def test_read_and_write_utf8_text(config: TaskFileConfig) -> None:
    tasks = [Task(name="Café", description="naïve ☕", priority=1)]
    codec = TaskFileCodec(config)

    codec.write(tasks)

    assert Path(config.path).read_bytes() == "Café,naïve ☕,1".encode("utf-8")
    assert codec.read() == tasks


def test_write_unencodable_text_raises_task_file_error(config: TaskFileConfig) -> None:
    # Lone surrogates cannot be encoded as UTF-8.
    task = Task.model_construct(name="\ud800", description="d", priority=1, date_of_creation=None)
    with pytest.raises(TaskFileError):
        TaskFileCodec(config).write([task])
