# sigtalk

Send short text messages from one process to another using nothing but
POSIX signals. Each byte travels as eight signals, least significant bit
first: `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. The
receiving process rebuilds each byte from those bits and writes it out as
soon as it is complete.

Requires a POSIX system (Linux, macOS) and Python 3.10 or later.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until interrupted with Ctrl-C:

```
$ sigtalk-server
SERVER PID=12345
```

In another terminal, send a message to that process id:

```
$ sigtalk-client 12345 "hello there"
```

The text appears in the server's terminal. The client takes exactly two
arguments, the server's PID and the message, and exits with status 1
otherwise. It also exits with status 1, printing the reason to standard
error, when the PID is not a positive number or a signal cannot be
delivered. The message is sent as bytes (UTF-8 on most systems), with a
pause of 100 microseconds after each signal so that the receiver can keep
up. Nothing is sent back: the client gets no acknowledgement that the
message arrived.

## Using it from Python

The bit encoding is available without sending any signals:

```python
from sigtalk.protocol import CharDecoder, encode_message

decoder = CharDecoder()
received = [decoder.feed(sig) for sig in encode_message("hi")]
print(bytes(b for b in received if b is not None).decode())  # hi
```

- `sigtalk.protocol.encode_char(c)` returns the eight `Signal` values for
  one byte; `encode_message(text)` yields them for a whole string or bytes
  object. `CharDecoder.feed(signal)` returns the completed byte value, or
  `None` while a byte is still partial.
- `sigtalk.client.send_message(pid, message, delay)` sends a message to a
  running server and returns the number of signals sent.
- `sigtalk.server.Server(stream)` decodes signals and writes each byte to a
  binary stream (standard output by default). `install()` sets it as the
  handler of both signals and `serve_forever()` waits for them.

The package also includes small helpers that the programs are built on:

- `sigtalk.textutils`: C-style string and byte functions such as `atoi`,
  `split`, `strtrim`, `strnstr`, `strlcpy` and `memcmp`.
- `sigtalk.chartypes`: ASCII classification and case conversion.
- `sigtalk.output`: writing characters, strings and 32-bit integers to a
  stream.
- `sigtalk.printf`: `render` and `printf` for `%c %s %p %d %i %u %x %X %%`.
- `sigtalk.linereader`: `LineReader`, which returns a stream's lines through
  a fixed-size read buffer, and `get_next_line(fd)` for file descriptors.

## Running the tests

```
pip install .[test]
pytest
```