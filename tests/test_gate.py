import asyncio
import threading

import pytest

from app.shared.gate import WriteGate

def test_sync_gate_releases_on_error():
    gate = WriteGate()
    with pytest.raises(RuntimeError):
        with gate:
            assert gate.locked()
            raise RuntimeError("boom")
    assert not gate.locked()

def test_async_gate_excludes_sync_holder():
    gate = WriteGate()
    order = []

    async def writer():
        async with gate:
            order.append("async")

    with gate:
        t = threading.Thread(target=lambda: asyncio.run(writer()))
        t.start()
        t.join(timeout=0.2)
        order.append("sync")
    t.join()
    assert order == ["sync", "async"]
    assert not gate.locked()

def test_async_gate_releases_on_error():
    gate = WriteGate()

    async def failing():
        async with gate:
            raise ValueError("bad")

    with pytest.raises(ValueError):
        asyncio.run(failing())
    assert not gate.locked()
