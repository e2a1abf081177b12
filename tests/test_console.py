from boogaloo.console import CONSOLE_BUFFER_COLS, Row, RowRing


def test_row_copy_truncates():
    row = Row()
    row.copy_from("a" * (CONSOLE_BUFFER_COLS + 44))
    assert row.text() == "a" * CONSOLE_BUFFER_COLS
    row.copy_from("hello")
    assert row.text() == "hello"


def test_row_append_stops_at_capacity():
    row = Row(capacity=8)
    row.append("abcde")
    row.append("fghij")
    assert row.text() == "abcdefgh"
    row.append("z")
    assert row.text() == "abcdefgh"


def test_row_clear():
    row = Row()
    row.append("text")
    row.clear()
    assert row.text() == ""
    assert len(row) == 0


def test_ring_newest_first():
    ring = RowRing()
    ring.push_line("first")
    ring.push_line("second")
    assert ring.get(0) == "second"
    assert ring.get(1) == "first"
    assert len(ring) == 2


def test_ring_unused_slots_are_empty():
    ring = RowRing(capacity=4)
    ring.push_line("only")
    assert ring.get(2) == ""
    assert ring.get(4) == "only"


def test_ring_drops_oldest_when_full():
    ring = RowRing(capacity=3)
    for line in ["a", "b", "c", "d"]:
        ring.push_line(line)
    assert len(ring) == 3
    assert [ring.get(i) for i in range(3)] == ["d", "c", "b"]


def test_ring_truncates_lines():
    ring = RowRing(capacity=2, cols=3)
    ring.push_line("abcdef")
    assert ring.get(0) == "abc"