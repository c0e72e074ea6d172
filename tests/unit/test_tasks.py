from __future__ import annotations

import asyncio

import pytest

from endpointer.tasks import _background_tasks, spawn


async def answer() -> int:
    return 42


###########################
#     Tests for spawn     #
###########################


@pytest.mark.asyncio
async def test_spawn() -> None:
    """Test that the coroutine runs as a task."""
    task = spawn(answer())
    assert isinstance(task, asyncio.Task)
    assert await task == 42


@pytest.mark.asyncio
async def test_spawn_keeps_reference_until_done() -> None:
    """Test that pending tasks are referenced and released when done."""
    task = spawn(answer())
    assert task in _background_tasks
    await task
    await asyncio.sleep(0)
    assert task not in _background_tasks


def test_spawn_without_loop() -> None:
    """Test that spawning outside an event loop raises and closes the
    coroutine."""
    coro = answer()
    with pytest.raises(RuntimeError):
        spawn(coro)
    assert coro.cr_frame is None
