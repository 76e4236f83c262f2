# typedheaders

Strongly typed HTTP headers. Each header is a Python class that decodes
itself from the raw values found in a message and encodes itself back to
raw values. Raw values are `bytes`; wherever a raw value is accepted, `str`
(encoded as UTF-8), `bytes` and `int` are taken too.

## Installation

```
pip install typedheaders
```

The package has no dependencies outside the standard library.

## Headers

Ready-made headers, each a subclass of `typedheaders.core.Header` with a
`decode(values)` class method and an `encode()` method:

- `typedheaders.strict_transport_security.StrictTransportSecurity` —
  `Strict-Transport-Security` (`including_subdomains(max_age)`,
  `excluding_subdomains(max_age)`, `parse(s)`; `max_age` is whole seconds,
  `max_age_delta` the same as a `timedelta`)
- `typedheaders.headers.Te` — `TE` (`Te.trailers()`)
- `typedheaders.headers.TransferEncoding` — `Transfer-Encoding`
  (`chunked()`, `is_chunked()` which checks the last coding)
- `typedheaders.headers.Upgrade` — `Upgrade` (`websocket()`)
- `typedheaders.headers.UserAgent` — `User-Agent` (`parse(src)`,
  `as_str()`; `parse` raises `InvalidUserAgent` on an illegal value)
- `typedheaders.headers.Vary` — `Vary` (`any()`, `is_any()`, `iter_strs()`)
- `typedheaders.prefer.Prefer` and `typedheaders.prefer.PreferenceApplied`,
  built from `typedheaders.prefer.Preference` items
  (`Preference.RESPOND_ASYNC`, `RETURN_REPRESENTATION`, `RETURN_MINIMAL`,
  `HANDLING_STRICT`, `HANDLING_LENIENT`, `Preference.wait(secs)`, or any
  name, value and parameters). `PreferenceApplied` leaves parameters out
  when written.
- `typedheaders.warning.WarningHeader` — `Warning` (code, agent, text and an
  optional `HttpDate`)

## Value types

- `typedheaders.http_date.HttpDate` — a whole-second UTC timestamp. `parse`
  accepts IMF-fixdate, RFC 850 and asctime; `str()` is always IMF-fixdate.
  Also `from_timestamp`, `from_datetime`, `to_datetime`, `to_value`.
- `typedheaders.entity.EntityTag` — `"tag"` or `W/"tag"`, with `tag()`,
  `is_weak()`, `strong_eq`, `weak_eq`, `strong_ne`, `weak_ne`.
- `typedheaders.entity.EntityTagRange` — `*` or a list of tags, with
  `matches_strong` and `matches_weak`.
- `typedheaders.quality.QualityValue` and `Quality`, with `q(value)` taking
  thousandths (`int`) or a fraction (`float`). `QualityValue.parse` reads
  `item; q=0.5`; ordering compares quality only.
- `typedheaders.charset.Charset` — an enum of registered charsets, looked up
  with `Charset.parse` ignoring ASCII case.
- `typedheaders.encoding.Encoding` — coding names such as `Encoding.GZIP`;
  any other name is kept as an extension.
- `typedheaders.flat_csv.FlatCsv` — one value holding a separated list,
  split outside double quotes.
- `typedheaders.value_string.HeaderValueString` — a value that is also text.
- `typedheaders.seconds` — `seconds_from_value`, `seconds_from_values` and
  `seconds_to_value` for whole-second counts.
- `typedheaders.csv_util` — `from_comma_delimited(values, parse)` and
  `fmt_comma_delimited(items)`.

## Using a header map

`typedheaders.header_map.HeaderMap` maps case-insensitive header names to
ordered lists of values, with typed access. `len()` counts values, not
names.

```python
from typedheaders.header_map import HeaderMap
from typedheaders.headers import TransferEncoding, UserAgent
from typedheaders.strict_transport_security import StrictTransportSecurity

headers = HeaderMap()
headers.typed_insert(TransferEncoding.chunked())
headers.typed_insert(StrictTransportSecurity.including_subdomains(31_536_000))

te = headers.typed_get(TransferEncoding)
assert te.is_chunked()

headers.append("User-Agent", "curl/8.0")
ua = headers.typed_get(UserAgent)
assert ua.as_str() == "curl/8.0"
```

`typed_insert` replaces any earlier values of that header. `typed_get`
returns `None` when the header is missing or malformed; `typed_try_get`
returns `None` only when it is missing and raises
`typedheaders.core.InvalidHeader` when it cannot be decoded. The map also
has `append`, `insert`, `get_all`, `remove` and `in`.

## Decoding and encoding directly

```python
from typedheaders.headers import Vary
from typedheaders.strict_transport_security import StrictTransportSecurity

sts = StrictTransportSecurity.decode(["max-age=15768000 ; includeSubDomains"])
assert sts.encode() == [b"max-age=15768000; includeSubdomains"]

vary = Vary.decode(["accept-encoding, accept-language"])
assert list(vary.iter_strs()) == ["accept-encoding", "accept-language"]
```

```python
from typedheaders.http_date import HttpDate

date = HttpDate.parse("Sunday, 06-Nov-94 08:49:37 GMT")
assert str(date) == "Sun, 06 Nov 1994 08:49:37 GMT"
```

Decoding errors raise `InvalidHeader`, a subclass of `ValueError`.

## Custom headers

Subclass `typedheaders.core.Header`, set the class attribute `name` to the
header name, and implement the `decode` class method and the `encode`
method returning a list of raw values. Raise `InvalidHeader` from `decode`
when the values cannot be understood. `typedheaders.core` also offers
`header_value` (validate a raw value), `value_to_str` (visible-ASCII text of
a value) and `just_one` (the single item of an iterable, or `None`).

## What this package does not do

It only models header values. It does not send or receive HTTP messages,
has no client or server, and covers only the headers listed above.