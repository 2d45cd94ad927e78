# wiegandac

Building blocks for a Wiegand keypad door controller. The package buffers
key presses, checks the entered code and logs what happens. It also has a
small string key-value store and an HTTP server with a few fixed pages.
It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and call pytest:

```
pip install .[test]
pytest
```

## Running the controller

```
wiegandac 49 50 51 52 13
```

The `wiegandac` command feeds decimal key codes to a `Controller`, one
after another, and logs each one to standard output. With no codes on the
command line it reads whitespace-separated codes from standard input until
the input ends. A code that is not an integer ends the command with a usage
error.

Options:

- `--serve` also starts the web server for as long as the codes are being
  processed, and stops it afterwards.
- `--host HOST` sets the address the server listens on (default `0.0.0.0`).
- `--port PORT` sets its port (default `80`).

With the codes above the input is `1234` followed by Enter, so the log
shows `HIT`.

## Components

### `wiegandac.ringbuffer.RingBuffer`

A fixed-capacity character buffer, with a capacity from 1 to 255. When the
buffer is full, each new character overwrites the oldest one.

```python
from wiegandac.ringbuffer import RingBuffer

buffer = RingBuffer(3)
for char in "ABCXY":
    buffer.put(char)

buffer.capacity()   # 3
len(buffer)         # 3
buffer.read(0)      # 'C'
"".join(buffer)     # 'CXY'
str(buffer)         # 'CXY'
buffer == "CXY"     # True
buffer == "CX"      # False
buffer.reset()
len(buffer)         # 0
```

`put` takes exactly one character and raises `ValueError` otherwise.
`read(pos)` counts from the oldest character and raises `IndexError` for a
position outside the current content. A buffer compares equal to a string
or to another buffer with the same content.

### `wiegandac.multibufferstream.MultiBufferStream`

Reads several separate buffers as one continuous stream of bytes. The
buffers may be `bytes`, `bytearray`, `memoryview` or `str` (encoded as
UTF-8).

- `available()` returns the number of bytes not yet read.
- `read()` returns the next byte as an int and advances the stream. When
  the stream is exhausted it returns `-1`.
- `peek()` returns the next byte without advancing, or `-1` at the end.
- `size()` returns the total length of all buffers.
- `reset()` moves back to the start.

```python
from wiegandac.multibufferstream import MultiBufferStream

stream = MultiBufferStream([b"This", " is"])
stream.size()       # 7
stream.read()       # 84  (ord("T"))
stream.available()  # 6
```

### `wiegandac.logger`

`Logger(stream=None, enabled=True)` writes values back to back, with no
separators, to `stream` (standard output when none is given).
`print(*args)` writes its arguments one after another; `println(*args)`
does the same and adds a newline. `hr1()` and `hr2()` write a heavy and a
light horizontal rule. Booleans are written as `1` and `0`, floats with two
decimals. Set the `enabled` attribute to `False` to silence the output.

To print a number in upper-case hexadecimal, wrap it with
`hex_value(value)`, which returns a `HexValue`; negative numbers are shown
as their 32-bit two's complement.

### `wiegandac.accesscontrol.AccessControl`

Collects keypad input in a 36-character ring buffer.

- `add_input(value)` accepts a single character, or an integer key number,
  which is stored as the character that many places after `'0'` (so 0–9
  become the digits).
- `check()` returns whether the collected input is the access code, `1234`.
- `data()` returns the input collected so far.
- `reset_input()` clears the collected input.

The `on_success` callable given to the constructor is kept as an attribute;
`AccessControl` does not call it itself.

### `wiegandac.datastore.DataStore`

A string key-value store. `DataStore(path)` keeps its values in a JSON file
at `path`, written atomically on every change; `DataStore()` keeps them in
memory only.

- `store(key, value)` saves a value; a value that is not a string raises
  `TypeError`.
- `load(key)` returns the value, or `None` if the key is absent.
- `remove(key)` deletes the key and returns whether it existed.

Every method raises `ValueError` for a key that is not a non-empty string.

### `wiegandac.webserver`

`Webserver(host="0.0.0.0", port=80, logger=None)` serves these pages:

| Path         | Methods | Content                                      |
|--------------|---------|----------------------------------------------|
| `/`          | any     | main page with `%TMPL_SIDEBAR%` and `%TMPL_MAIN%` placeholders |
| `/style.css` | any     | an empty stylesheet                          |
| `/sidebar`   | any     | navigation links                             |
| `/content`   | any     | content page                                 |
| `/heap`      | GET     | free physical memory in bytes, as plain text (0 where it cannot be read) |

Anything else gets a 404 response, and a line in the log.

- `handle(method, path)` returns a `Response` (`status`, `content_type`,
  `body`) without network traffic, which is useful for testing.
- `run()` starts serving in a background thread; calling it again does
  nothing. `stop()` shuts the server down. The server can also be used as a
  context manager. `port` gives the bound port once running, so port `0`
  picks a free one.

`process_template(var, rng=None)` returns the text for a template variable:
a number from 10 to 19 for `TMPL_SIDEBAR`, from 0 to 49 for `TMPL_MAIN`,
and an empty string for anything else. The server itself sends the main
page with the placeholders left in.

### `wiegandac.controller`

`Controller(access_control=None, logger=None, clock=None, mode_pin=None)`
connects keypad codes to access control. `clock` returns milliseconds and
`mode_pin` returns the level of the modify-mode pin.

- `handle_code(code)` logs the code and handles it: Escape (27) clears the
  input, Enter (13) checks the collected input, logs `HIT` or `MISS` (with
  the input) and then clears it, and any other code is added to the input.
  It returns a `KeyResult`: `BUFFERED`, `RESET`, `GRANTED` or `DENIED`.
- `mode_pin_changed()` schedules a read of the mode pin 50 ms later.
- `check_mode_pin()` reads the pin once that time has passed, updates
  `allow_modify`, logs a change and returns whether the mode changed.

`main(argv=None)` is the `wiegandac` command described above.

## What the package does not do

The package does not talk to hardware: it does not read a Wiegand reader,
watch GPIO pins or switch a door relay, and it does not set up a network
connection. Key codes reach the controller only through `handle_code` or
the `wiegandac` command, and the mode pin only through the `mode_pin`
callable. A granted code is logged and reported as `KeyResult.GRANTED`;
nothing is opened. The access code is fixed, and `DataStore` is not used by
the controller or the web server.