# mysyslog

A small logging library that appends one entry per call to a log file.
A *driver* decides how the entry looks:

- **text**: `timestamp LEVEL process message`
- **JSON**: `{"timestamp":...,"log_level":"...","process":"...","message":"..."}`

Each entry holds the current Unix timestamp in whole seconds, the level name,
and the name of the running process. The process name is the first line of
`/proc/self/comm`, up to 255 characters. It is `unknown` if that file cannot
be read or is empty.

## Installation

```
pip install .
```

## Usage

```python
from mysyslog.core import Driver, Format, mysyslog
from mysyslog.levels import LogLevel

mysyslog("service started", LogLevel.INFO, Driver.TEXT, Format.TEXT, "app.log")
# app.log: 1439482969 INFO python service started

mysyslog("this is an error", LogLevel.ERROR, Driver.JSON, Format.JSON, "app.json")
# app.json: {"timestamp":1439482969,"log_level":"ERROR","process":"python","message":"this is an error"}
```

`mysyslog` returns the line it appended, including the newline.

There are five log levels: `DEBUG`, `INFO`, `WARN`, `ERROR` and `CRITICAL`,
with the values 0 to 4. You can pass a `LogLevel` member or its plain integer.
The `format` argument is accepted for compatibility only. It does not change
the output, because the driver alone decides how the entry looks.

`mysyslog.levels.get_level_name(level)` returns the name of a level, or
`"UNKNOWN"` for a value outside 0 to 4. `validate_level(level)` returns the
matching `LogLevel`.

`mysyslog.core.load_driver(driver)` returns the write function for a `Driver`
member or its integer value.

## Errors

All failures raise `mysyslog.levels.MySyslogError`:

- the message or the path is `None`
- the level is invalid
- the driver is unknown
- the log file cannot be opened or written

## Drivers

You can also call the drivers directly:

```python
from mysyslog import json_driver, text_driver

text_driver.driver_write("hello", 1, "plain.log")
json_driver.driver_write('quote " and newline\n', 3, "structured.log")
```

Each `driver_write` returns the line it appended.

`text_driver.format_entry(timestamp, level, process, msg)` and
`json_driver.format_entry(timestamp, level, process, msg)` build a single line
without writing it. Use them when you want to supply your own timestamp and
process name.

How each driver treats the message:

- **Text driver**: writes the message as it is, cut at the first NUL
  character.
- **JSON driver**: escapes `"`, `\`, newline, carriage return and tab with
  `json_driver.escape_json_string(text, output_size=2048)`. The escaped result
  holds at most `output_size - 2` characters, so 2046 by default. If a
  two-character escape would not fit at the end, it is dropped. Input stops at
  the first NUL character. The process name is written into the JSON without
  escaping.

## What it does not do

The two drivers, text and JSON, are built in. There is no mechanism for
loading other drivers. The package has no command-line tool. It only appends
to files and does not rotate them or send entries to a system log daemon.

## Running the tests

```
pip install .[test]
pytest
```