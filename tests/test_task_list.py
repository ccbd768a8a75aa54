"""Tests for TaskList."""

import pytest

from tasky.core.task_list import TaskList
from tasky.core.tasks import Task


@pytest.fixture
def task_list(sample_tasks):
    return TaskList(sample_tasks)


class TestTaskList:
    def test_empty_by_default(self):
        assert TaskList().get_size() == 0

    def test_add_appends_and_chains(self):
        tasks = TaskList()
        first, second = Task.todo("a"), Task.todo("b")
        assert tasks.add(first).add(second) is tasks
        assert list(tasks) == [first, second]
        assert tasks.get_size() == 2

    def test_get_task(self, task_list, sample_tasks):
        assert task_list.get_task(2) is sample_tasks[2]

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_get_task_out_of_range(self, task_list, index):
        with pytest.raises(IndexError):
            task_list.get_task(index)

    def test_delete_keeps_order_contiguous(self, task_list, sample_tasks):
        removed = task_list.delete(1)

        assert removed is sample_tasks[1]
        assert list(task_list) == [sample_tasks[0], sample_tasks[2]]
        assert task_list.get_task(1) is sample_tasks[2]
        assert len(task_list) == 2

    @pytest.mark.parametrize("index", [-1, 3])
    def test_delete_out_of_range_leaves_list(self, task_list, index):
        with pytest.raises(IndexError):
            task_list.delete(index)
        assert task_list.get_size() == 3


class TestFind:
    def test_substring_match_in_order(self):
        tasks = TaskList([
            Task.todo("read book"),
            Task.todo("buy milk"),
            Task.deadline("return book", "Friday"),
        ])
        matches = tasks.find("book")
        assert [t.description for t in matches] == ["read book", "return book"]

    def test_case_sensitive(self, task_list):
        assert task_list.find("Milk") == []
        assert len(task_list.find("milk")) == 1

    def test_only_description_is_searched(self, task_list):
        assert task_list.find("Friday") == []

    def test_empty_keyword_matches_everything(self, task_list, sample_tasks):
        assert task_list.find("") == sample_tasks

    def test_returns_new_list(self, task_list):
        matches = task_list.find("")
        matches.clear()
        assert task_list.get_size() == 3
