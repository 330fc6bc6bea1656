import pytest

from rustdrill.drills.threads import (
    JobStatus,
    Queue,
    count_jobs,
    receive_all,
    run_timed_jobs,
)


def test_run_timed_jobs_collects_every_result():
    delay = 0.02
    results = run_timed_jobs(10, delay)
    assert len(results) == 10
    assert all(ms >= delay * 1000 * 0.9 for ms in results)


def test_run_timed_jobs_none():
    assert run_timed_jobs(0, 0.0) == []


def test_count_jobs_counts_every_job():
    status = count_jobs(10, 0.01)
    assert status.jobs_completed == 10


def test_job_status_complete():
    status = JobStatus()
    status.complete()
    status.complete()
    assert status.jobs_completed == 2


def test_queue_defaults():
    queue = Queue()
    assert queue.length == len(queue.first_half) + len(queue.second_half)
    assert queue.first_half + queue.second_half == list(range(1, 11))


def test_receive_all_gets_everything():
    queue = Queue()
    received = receive_all(queue, 0.0)
    assert len(received) == queue.length
    assert sorted(received) == queue.first_half + queue.second_half


def test_receive_all_keeps_order_within_halves():
    queue = Queue()
    received = receive_all(queue, 0.0)
    assert [v for v in received if v in queue.first_half] == queue.first_half
    assert [v for v in received if v in queue.second_half] == queue.second_half


def test_receive_all_wrong_length():
    with pytest.raises(RuntimeError):
        receive_all(Queue(length=3), 0.0)