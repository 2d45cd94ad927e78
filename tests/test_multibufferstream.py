from wiegandac.multibufferstream import MultiBufferStream


def read_to_string(stream, limit=128):
    chars = []
    for _ in range(limit):
        if not stream.available():
            break
        chars.append(chr(stream.read()))
    return "".join(chars)


def test_no_buffer():
    stream = MultiBufferStream([])
    assert stream.available() == 0
    assert read_to_string(stream) == ""
    assert stream.available() == 0
    assert read_to_string(stream) == ""
    assert stream.available() == 0


def test_one_buffer_but_empty():
    stream = MultiBufferStream([b""])
    assert stream.available() == 0
    assert read_to_string(stream) == ""
    assert stream.available() == 0
    assert read_to_string(stream) == ""
    assert stream.available() == 0


def test_one_buffer_single_char():
    stream = MultiBufferStream([b"A"])
    assert stream.available() == 1
    assert read_to_string(stream) == "A"
    assert stream.available() == 0
    assert read_to_string(stream) == ""
    assert stream.available() == 0


def test_multi_buffers():
    stream = MultiBufferStream([b"This", b" is", b"just A TestCase!"])
    assert read_to_string(stream) == "This isjust A TestCase!"
    assert stream.available() == 0
    assert read_to_string(stream) == ""
    assert stream.available() == 0


def test_partial_buffer_read_reset():
    buff_a = b"Just a Question: "
    buff_b = b"How do you know if a C++ developer is qualified? I mean, really!"
    buff_c = b"Thats the Answer!"
    buff_d = b"Really! You look at their CV."

    stream = MultiBufferStream(
        [
            buff_a[7:8],
            buff_a[15:17],
            buff_b[:48],
            buff_a[16:17],
            buff_a[16:17],
            buff_c[10:11],
            buff_a[15:17],
            buff_d[8:29],
        ]
    )

    expected = "Q: How do you know if a C++ developer is qualified?  A: You look at their CV."
    assert read_to_string(stream) == expected
    assert stream.available() == 0

    assert read_to_string(stream) == ""
    assert stream.available() == 0

    stream.reset()
    assert read_to_string(stream) == expected
    assert stream.available() == 0


def test_read_after_end():
    stream = MultiBufferStream([b"just some data", b"... and some more"])
    assert read_to_string(stream) == "just some data... and some more"
    assert stream.available() == 0
    assert stream.read() == -1
    assert stream.available() == 0


def test_size_is_total_length():
    stream = MultiBufferStream([b"This", b" is", b"just A TestCase!"])
    assert stream.size() == len("This isjust A TestCase!")
    read_to_string(stream)
    assert stream.size() == len("This isjust A TestCase!")


def test_peek_does_not_advance():
    stream = MultiBufferStream([b"A", b"B"])
    assert stream.peek() == ord("A")
    assert stream.peek() == ord("A")
    assert stream.read() == ord("A")
    assert stream.peek() == ord("B")
    assert stream.read() == ord("B")
    assert stream.peek() == -1


def test_empty_buffer_in_middle_is_skipped():
    stream = MultiBufferStream([b"ab", b"", b"cd"])
    assert stream.available() == 4
    assert read_to_string(stream) == "abcd"


def test_str_buffers_accepted():
    stream = MultiBufferStream(["just", " text"])
    assert read_to_string(stream) == "just text"