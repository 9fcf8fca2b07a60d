import pytest

from vacinafila.bounded_queue import (
    BoundedQueue,
    Person,
    QueueEmptyError,
    QueueFullError,
    format_person,
)


def make(name):
    return Person(name=name, cpf="000", address="Rua X", age=40)


def test_fifo_order():
    q = BoundedQueue(3)
    for name in ["a", "b", "c"]:
        q.append(name)
    assert [q.serve(), q.serve(), q.serve()] == ["a", "b", "c"]
    assert q.empty()


def test_default_capacity_is_two():
    q = BoundedQueue()
    q.append(1)
    q.append(2)
    assert q.full()
    with pytest.raises(QueueFullError):
        q.append(3)


def test_serve_empty_raises():
    with pytest.raises(QueueEmptyError):
        BoundedQueue().serve()


def test_front_and_rear_empty_raise():
    q = BoundedQueue()
    with pytest.raises(QueueEmptyError):
        q.front()
    with pytest.raises(QueueEmptyError):
        q.rear()


def test_front_and_rear():
    q = BoundedQueue(3)
    q.append("x")
    q.append("y")
    assert q.front() == "x"
    assert q.rear() == "y"
    assert q.size() == 2


def test_wraparound_keeps_order():
    q = BoundedQueue(2)
    q.append(1)
    q.append(2)
    assert q.serve() == 1
    q.append(3)
    assert list(q) == [2, 3]
    assert q.front() == 2
    assert q.rear() == 3


def test_clear_and_len():
    q = BoundedQueue(2)
    q.append(1)
    q.append(2)
    q.clear()
    assert len(q) == 0
    assert q.empty()
    assert not q.full()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(0)


def test_format_person_fields():
    text = format_person(Person("Ana", "123", "Rua A", 30))
    lines = text.splitlines()
    assert lines[0] == "Nome: Ana"
    assert lines[1] == "CPF: 123"
    assert lines[2] == "Endereço: Rua A"
    assert lines[3] == "idade: 30"
    assert lines[4] == "--------------------------------------------"


def test_describe_lists_front_first():
    q = BoundedQueue(2)
    q.append(make("first"))
    q.append(make("second"))
    text = q.describe()
    assert text == format_person(make("first")) + format_person(make("second"))
    assert text.index("first") < text.index("second")


def test_describe_empty_is_blank():
    assert BoundedQueue().describe() == ""