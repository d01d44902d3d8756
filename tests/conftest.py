"""Shared fixtures for the table tests."""

from __future__ import annotations

import pytest

from pi.table.arena import ScratchArena

from .helpers import Task, make_tasks


@pytest.fixture
def arena() -> ScratchArena:
    return ScratchArena()


@pytest.fixture
def tasks() -> list[Task]:
    return make_tasks(10)
