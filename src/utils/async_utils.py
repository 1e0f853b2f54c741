"""Helpers for driving coroutines from synchronous Streamlit code."""
import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar("T")


def run_async(factory: Callable[[], Coroutine[Any, Any, T]]) -> T:
    """
    Execute a coroutine to completion and return its result.

    Streamlit script threads have no running loop, so asyncio.run is used
    directly. If a loop is already running in this thread, the coroutine
    runs on a fresh loop in a worker thread instead. Exceptions propagate
    unchanged.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(factory())

    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(lambda: asyncio.run(factory())).result()
