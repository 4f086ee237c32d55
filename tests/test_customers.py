import pytest

from structkit.customers import Customer, CustomerQueue, main
from structkit.queues import QueueEmptyError, QueueFullError


@pytest.fixture
def customers():
    return [Customer(1, "Ann", 4), Customer(2, "Bob", 6), Customer(3, "Cy", 2)]


def test_fifo_order(customers):
    q = CustomerQueue(5)
    for c in customers:
        q.enqueue(c)
    assert list(q) == customers
    assert q.dequeue() == customers[0]
    assert len(q) == 2


def test_waiting_time(customers):
    q = CustomerQueue(5)
    for c in customers:
        q.enqueue(c)
    assert q.waiting_time(1) == 0
    assert q.waiting_time(2) == customers[0].service_time
    assert q.waiting_time(3) == customers[0].service_time + customers[1].service_time


def test_waiting_time_after_dequeue(customers):
    q = CustomerQueue(5)
    for c in customers:
        q.enqueue(c)
    q.dequeue()
    assert q.waiting_time(2) == 0


def test_unknown_customer(customers):
    q = CustomerQueue(5)
    q.enqueue(customers[0])
    with pytest.raises(KeyError):
        q.waiting_time(99)


def test_full_and_empty(customers):
    q = CustomerQueue(2)
    q.enqueue(customers[0])
    q.enqueue(customers[1])
    with pytest.raises(QueueFullError):
        q.enqueue(customers[2])
    q.dequeue()
    q.enqueue(customers[2])
    assert [c.number for c in q] == [2, 3]
    q.dequeue()
    q.dequeue()
    with pytest.raises(QueueEmptyError):
        q.dequeue()


def test_negative_service_time():
    with pytest.raises(ValueError):
        Customer(1, "Ann", -1)


def test_main_reports_waiting_times(capsys):
    assert main(["1:Ann:4", "2:Bob:6", "--wait", "2", "--wait", "9"]) == 0
    out = capsys.readouterr().out
    assert "customer name=Bob" in out
    assert "waiting time=4" in out
    assert "cust no 9 not found" in out


def test_main_overflow_and_empty(capsys):
    main(["--capacity", "1", "1:Ann:4", "2:Bob:6"])
    out = capsys.readouterr().out
    assert "queue full" in out
    assert "customer name=Bob" not in out
    main([])
    assert "EMPTY" in capsys.readouterr().out