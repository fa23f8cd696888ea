import time
from contextlib import contextmanager


@contextmanager
def timer():
    start = time.perf_counter()
    # elapsed milliseconds, read at any point inside or after the block
    yield lambda: int((time.perf_counter() - start) * 1000)
