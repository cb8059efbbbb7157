import io

from hypothesis import given, strategies as st

from dvakit.serial_io import MAX_INPUT, read_int, read_string, send_int, write_text


def test_write_text_passes_data_through():
    stream = io.StringIO()
    write_text(stream, "hello world")
    assert stream.getvalue() == "hello world"


def test_read_string_stops_at_carriage_return():
    stream = io.StringIO("hello\rworld")
    assert read_string(stream) == "hello"
    assert stream.read() == "world"


def test_read_string_truncates_and_drops_overflow_char():
    text = "a" * (MAX_INPUT - 1) + "b" + "cdef"
    stream = io.StringIO(text)
    assert read_string(stream) == "a" * (MAX_INPUT - 1)
    assert stream.read() == "cdef"


def test_read_string_stops_at_end_of_stream():
    stream = io.StringIO("abc")
    assert read_string(stream) == "abc"
    assert read_string(stream) == ""


def test_read_string_successive_lines():
    stream = io.StringIO("one\rtwo\r")
    assert [read_string(stream), read_string(stream)] == ["one", "two"]


def test_read_int_parses_leading_number():
    assert read_int(io.StringIO("  -17xyz\r")) == -17


def test_read_int_without_digits_is_zero():
    assert read_int(io.StringIO("abc\r")) == 0


def test_send_int_writes_decimal():
    stream = io.StringIO()
    send_int(stream, 42)
    send_int(stream, -7)
    assert stream.getvalue() == "42-7"


@given(st.integers(min_value=-(10**15), max_value=10**15))
def test_send_then_read_round_trip(value):
    stream = io.StringIO()
    send_int(stream, value)
    stream.write("\r")
    stream.seek(0)
    assert read_int(stream) == value