# chwire

Building blocks for a client of the ClickHouse native protocol. The package
needs nothing outside the standard library.

## Installation

```
pip install chwire
```

## What it provides

### Query settings (`chwire.query_settings`)

`QUERY_SETTINGS` is the tuple of server settings the package knows. Each one is
a `QuerySetting` with a `name` and a `type` (a `SettingType`: `UINT`, `INT`,
`BOOL` or `TIME`).

`QuerySettings.from_query(query)` picks the known settings out of connection
parameters. `query` is either a query string such as
`"max_threads=4&extremes=true"` or a mapping of names to a value or a list of
values, as `urllib.parse.parse_qs` returns. Unknown names and blank values are
skipped. For a list, only the first value is used. Numeric settings (including
`INT` and `TIME`) must be unsigned decimal integers below 2**64. Boolean
settings are stored as 1 or 0. A value that does not parse raises `ValueError`.

```python
from chwire.query_settings import QuerySettings

settings = QuerySettings.from_query("max_threads=4&extremes=true")
settings.is_empty()     # False
settings.values         # {'max_threads': 4, 'extremes': 1}
str(settings)           # 'max_threads=4&extremes=true'
payload = settings.serialize()
```

`serialize()` writes each setting as its name, prefixed by its length, and
then its value as an unsigned varint. The encoders are also available on
their own:

- `encode_uvarint(value)` writes a little-endian base-128 varint. It raises
  `ValueError` outside 0 to 2**64 - 1.
- `encode_string(value)` writes the varint byte length followed by the UTF-8
  bytes. It accepts `str` or `bytes`.
- `parse_bool(text)` accepts `1`, `t`, `T`, `TRUE`, `true`, `True` and the
  matching false spellings `0`, `f`, `F`, `FALSE`, `false`, `False`. Anything
  else raises `ValueError`.

### Keyword matching (`chwire.word_matcher`)

`WordMatcher(needle)` is a small automaton that ignores case. Feed it one
character at a time with `match(char)`, and it returns `True` at the moment
the whole word has been seen. A mismatch resets it to the start of the word.
`contains_word(haystack, needle)` runs a fresh matcher over a string:

```python
from chwire.word_matcher import contains_word

contains_word("select * from test", "sElEct")  # True
contains_word("select * from test", "zelect")  # False
```

### Value types (`chwire.types`)

- `truncate_date(value)` returns midnight UTC of the same calendar day.
- `truncate_datetime(value)` keeps the wall-clock fields down to the second,
  drops any time zone and sets UTC.
- `uuid_to_bytes(text)` converts a dashed UUID string into 16 bytes. Malformed
  input raises `InvalidUUIDFormatError`, which is a `ValueError`.
- `uuid_from_bytes(data)` formats 16 bytes as a lower-case dashed UUID. It also
  accepts a 16-byte string. Any other length raises `ValueError`.

### Results (`chwire.result`)

`Result` stands for the outcome of a statement that returns no rows. The server
reports neither an insert id nor an affected row count, so `last_insert_id()`
and `rows_affected()` both raise `NotSupportedError`.

### TLS configuration registry (`chwire.tls_config`)

This is a thread-safe, process-wide registry of named configuration objects:

```python
import ssl
from chwire.tls_config import register_tls_config, get_tls_config, deregister_tls_config

register_tls_config("custom", ssl.create_default_context())
ctx = get_tls_config("custom")
deregister_tls_config("custom")
```

`get_tls_config` returns a shallow copy of the registered object, or `None` if
nothing is registered under that key. Objects that cannot be copied, such as
`ssl.SSLContext`, are returned as they are.

## What it does not do

The package does not open connections, send queries or read result data. It
provides the pieces listed above for a client to use.

## Running the tests

```
pip install -e .[test]
pytest
```