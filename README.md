# minitalk

A small messaging pair for POSIX systems that uses only two signals. A server
process prints its PID and then waits. A client sends it text: `SIGUSR1`
carries a 1 bit and `SIGUSR2` carries a 0 bit, and each byte is sent most
significant bit first. The server puts the bytes back together, decodes them
as UTF-8, replacing invalid sequences, and writes the text to standard output.
When a zero byte arrives, the server writes a newline.

## Installation

```
pip install .
```

## Command-line use

Start the server in one terminal:

```
minitalk-server
```

The first line it prints is its PID, for example `4242`. It keeps receiving
until it is interrupted with Ctrl-C. From another terminal, send it a message:

```
minitalk-client 4242 "hello there"
```

The client takes exactly two arguments: the server PID and the text. With any
other number of arguments it exits with status 1. It reads the PID the way
`minitalk.convert.atoi` does, so it skips leading whitespace and stops at the
first character that is not a digit. The client sends the bytes of the text
with a pause of 1 ms after each signal and an extra pause after each byte.

## Library use

- `minitalk.protocol.encode_byte(value)` returns the eight bits of a byte,
  most significant first. `minitalk.protocol.encode_text(data)` yields the bits
  of a `str`, encoded as UTF-8, or of a `bytes` value.
- `minitalk.protocol.BitDecoder` rebuilds bytes. `feed(bit)` and
  `feed_signal(signum)` return the finished byte after the eighth bit and
  `None` before that. `feed_signal` counts `SIGUSR1` as 1 and any other signal
  as 0.
- `minitalk.client.send_text(pid, data, delay=0.001, kill=None)` signals every
  bit of `data` to `pid`. Pass a `kill(pid, signum)` callable in place of
  `os.kill` to capture the signals, for example in tests.
- `minitalk.server.Server(stream=None)` decodes signals passed to
  `handle(signum, frame)` and writes the characters to `stream`, or to standard
  output when no stream is given. `install()` registers `handle` for `SIGUSR1`
  and `SIGUSR2`.

The package also includes these helper modules:

- `minitalk.chars`: ASCII classes (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`) and `to_lower` / `to_upper`. Each accepts a
  one-character string or an integer code.
- `minitalk.convert`: `atoi`, `itoa`, `strmapi` and `striteri`.
- `minitalk.strings`: `split`, `strchr`, `strrchr`, `strjoin`, `strlcpy`,
  `strlcat`, `strncmp`, `strnstr`, `strtrim` and `substr`. The search functions
  return an index or `None`. `strlcpy` and `strlcat` return the new text along
  with the length they tried to create.
- `minitalk.memory`: `bzero`, `calloc`, `memset`, `memchr`, `memcmp`, `memcpy`
  and `memmove`, which work on `bytearray` buffers.
- `minitalk.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each
  writes to a text stream, or to standard output when no stream is given.
- `minitalk.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `for_each`, `map` and `clear`.

## What it does not do

- Delivery is not confirmed. The server sends nothing back, and the client
  depends on its timing alone. Signals that arrive too quickly can be merged or
  lost, and then the text is garbled.
- The client does not add a zero byte at the end of a message, so a newline
  appears only if the data itself contains a zero byte.
- The server keeps a single decoder, so messages from two clients at the same
  time get mixed together.

## Running the tests

```
pip install ".[test]"
pytest
```