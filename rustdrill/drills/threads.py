"""Thread drills: joining, shared state and channels."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_DONE = object()


def run_timed_jobs(count: int = 10, delay: float = 0.25) -> list[float]:
    """Run count sleeping jobs in threads; return each one's time in ms."""

    def job(index: int) -> float:
        start = time.perf_counter()
        time.sleep(delay)
        print(f"thread {index} is complete")
        return (time.perf_counter() - start) * 1000.0

    if count <= 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        results = list(pool.map(job, range(count)))
    if len(results) != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return results


@dataclass
class JobStatus:
    """Number of finished jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def count_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run count jobs that each record completion on a shared status."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        status.complete()

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Values to send, split in two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel: SimpleQueue, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves on channel from two threads.

    Each thread puts an end marker after its values.
    """

    def sender(values: list[int]) -> None:
        for value in values:
            print(f"sending {value!r}")
            channel.put(value)
            time.sleep(delay)
        channel.put(_DONE)

    threads = [
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue | None = None, delay: float = 1.0) -> list[int]:
    """Send the queue's values from two threads and collect all of them."""
    queue = queue if queue is not None else Queue()
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    received: list[int] = []
    remaining = len(senders)
    while remaining:
        item = channel.get()
        if item is _DONE:
            remaining -= 1
        else:
            print(f"Got: {item}")
            received.append(item)
    for thread in senders:
        thread.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(f"expected {queue.length} numbers, got {len(received)}")
    return received