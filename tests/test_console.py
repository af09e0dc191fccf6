from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.console import ConsoleError, TodoConsole


@pytest.fixture
def console(client: TestClient) -> TodoConsole:
    return TodoConsole(client)


def test_add_and_list(console: TodoConsole) -> None:
    output = console.handle("/add buy milk")

    assert output == "  1. [ ] buy milk"
    assert console.handle("/list") == "  1. [ ] buy milk"


def test_row_commands(console: TodoConsole) -> None:
    console.handle("/add a")
    console.handle("/add b")

    assert console.handle("/toggle 1") == "  1. [x] a\n  2. [ ] b"
    assert console.handle("/edit 2 b2") == "  1. [x] a\n  2. [ ] b2"
    assert console.handle("/list active") == "  1. [ ] b2"
    assert console.handle("/rm 1") == "  （空）"
    assert console.handle("/list all") == "  1. [x] a"


def test_bulk_commands(console: TodoConsole) -> None:
    console.handle("/add a")
    console.handle("/add b")

    assert console.handle("/toggle_all") == "  1. [x] a\n  2. [x] b"
    assert console.handle("/clear") == "  （空）"


@pytest.mark.parametrize("line", ["/toggle 1", "/rm x", "/edit 1", "/add", "/unknown"])
def test_bad_commands_raise(console: TodoConsole, line: str) -> None:
    with pytest.raises(ConsoleError):
        console.handle(line)
