"""Tests for the click CLI."""

import json

import pytest
from click.testing import CliRunner

from tasky.cli import main


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "tasks.txt"


@pytest.fixture
def invoke(data_file, monkeypatch, tmp_path):
    monkeypatch.setattr("tasky.config.CONFIG_FILE", tmp_path / "missing.conf")
    monkeypatch.delenv("TASKY_DATA_FILE", raising=False)
    runner = CliRunner()

    def _invoke(*args, input=None):
        return runner.invoke(main, ["--data-file", str(data_file), *args], input=input)

    return _invoke


class TestChat:
    def test_conversation_until_bye(self, invoke, data_file):
        result = invoke("chat", input="todo buy milk\nlist\nbye\n")

        assert result.exit_code == 0
        assert "Hello! I'm Tasky" in result.output
        assert "Got it. I've added this task:" in result.output
        assert "1.[T][ ] buy milk" in result.output
        assert "Bye. Hope to see you again soon!" in result.output
        assert data_file.read_text() == "T | 0 | buy milk\n"

    def test_chat_is_default_command(self, invoke):
        result = invoke(input="bye\n")
        assert result.exit_code == 0
        assert "Bye. Hope to see you again soon!" in result.output

    def test_errors_do_not_end_chat(self, invoke):
        result = invoke("chat", input="nonsense\ntodo\nlist\nbye\n")

        assert result.exit_code == 0
        assert "don't know what that means" in result.output
        assert "The description of a todo cannot be empty." in result.output
        assert "Your list is empty" in result.output

    def test_end_of_input_without_bye(self, invoke, data_file):
        result = invoke("chat", input="todo read book\n")

        assert result.exit_code == 0
        assert "Bye." not in result.output
        assert data_file.read_text() == "T | 0 | read book\n"


class TestRun:
    def test_single_command(self, invoke, data_file):
        result = invoke("run", "deadline submit report /by Friday")

        assert result.exit_code == 0
        assert "[D][ ] submit report (by: Friday)" in result.output
        assert data_file.read_text() == "D | 0 | submit report | Friday\n"

    def test_failed_command_exits_nonzero(self, invoke, data_file):
        result = invoke("run", "mark 3")

        assert result.exit_code == 1
        assert "not in the list" in result.output
        assert not data_file.exists()


class TestList:
    def test_text(self, invoke):
        invoke("run", "todo read book")
        result = invoke("list")
        assert "1.[T][ ] read book" in result.output

    def test_json(self, invoke):
        invoke("run", "todo read book")
        invoke("run", "event meeting /from 2pm /to 4pm")
        invoke("run", "mark 1")

        result = invoke("list", "--json")

        assert json.loads(result.output) == [
            {"index": 1, "kind": "todo", "done": True, "description": "read book"},
            {
                "index": 2,
                "kind": "event",
                "done": False,
                "description": "meeting",
                "from": "2pm",
                "to": "4pm",
            },
        ]
