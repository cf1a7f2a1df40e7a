import threading

import anyio
from fastapi import Request

class WriteGate:
    """
    One lock shared by every writer of the store.

    Sync callers use `with gate:`; request handlers use `async with gate:`,
    which waits for the lock in a worker thread so the event loop stays free.
    """

    def __init__(self):
        self._lock = threading.Lock()

    def locked(self) -> bool:
        return self._lock.locked()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, *exc):
        self._lock.release()
        return False

    async def __aenter__(self):
        # own limiter: waiters must not use up the pool the holder writes with
        await anyio.to_thread.run_sync(self._lock.acquire, limiter=anyio.CapacityLimiter(1))
        return self

    async def __aexit__(self, *exc):
        self._lock.release()
        return False

# FastAPI dep
def get_write_gate(request: Request) -> WriteGate:
    return request.app.state.write_gate
