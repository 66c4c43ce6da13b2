from __future__ import annotations

import asyncio

import pytest

from core.services.debounce import Debouncer, SearchState


def test_debouncer_fires_once_with_last_arguments():
    calls: list[str] = []

    async def scenario():
        debounced = Debouncer(calls.append, 0.02)
        debounced("c")
        debounced("ch")
        debounced("chi")
        assert debounced.pending
        await asyncio.sleep(0.1)
        assert not debounced.pending

    asyncio.run(scenario())
    assert calls == ["chi"]


def test_debouncer_separate_bursts_fire_separately():
    calls: list[str] = []

    async def scenario():
        debounced = Debouncer(calls.append, 0.01)
        debounced("a")
        await asyncio.sleep(0.05)
        debounced("b")
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert calls == ["a", "b"]


def test_debouncer_cancel_and_flush():
    calls: list[str] = []

    async def scenario():
        debounced = Debouncer(calls.append, 10)
        debounced("dropped")
        debounced.cancel()
        assert not debounced.pending
        debounced("kept")
        debounced.flush()
        assert not debounced.pending
        debounced.flush()

    asyncio.run(scenario())
    assert calls == ["kept"]


def test_debouncer_rejects_negative_wait():
    with pytest.raises(ValueError):
        Debouncer(print, -1)


def test_search_state_notifies_only_on_change():
    changes: list[str] = []

    async def scenario():
        state = SearchState(wait_seconds=0.01, on_change=changes.append)
        state.update("spa")
        await asyncio.sleep(0.05)
        state.update("spa")
        await asyncio.sleep(0.05)
        state.update("spain")
        state.flush()
        return state.query

    assert asyncio.run(scenario()) == "spain"
    assert changes == ["spa", "spain"]
