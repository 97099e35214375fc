# oracompat

Pure-Python implementations of familiar Oracle PL/SQL utility packages,
for code that has to behave the way those packages do.

## What is included

| Module | Provides |
| --- | --- |
| `oracompat.plvstr` | `substr`, `substrb`, `instr`, `normalize`, `is_prefix`, `is_prefix_int`, `rvrs`, `lpart`, `rpart`, `lstrip`, `rstrip`, `left`, `right`, `swap`, `betwn`, `betwn_str`, and `InvalidParameterError` |
| `oracompat.plvchr` | `nth`, `first`, `last`, `is_kind`, `char_name` |
| `oracompat.plvsubst` | `Substitutor`, for filling `%s` placeholders in templates, and `TemplateError` |
| `oracompat.plvdate` | `BusinessCalendar`, `easter_sunday`, `days_inmonth`, `isleapyear`, `version`, and `CalendarError` |
| `oracompat.pipe_registry` | `PipeRegistry`, a shared store of named message pipes, with `PipeInfo` and `PipeError` |
| `oracompat.dbms_output` | `DbmsOutput`, a line buffer with an optional sink, and `BufferOverflowError` |
| `oracompat.dbms_random` | `DbmsRandom`, for random numbers, strings and normal variates, and `ltqnorm` |
| `oracompat.plunit` | `assert_true`, `assert_false`, `assert_null`, `assert_not_null`, `assert_equals`, `assert_equals_range`, `assert_not_equals`, `assert_not_equals_range`, `fail`, and `PlunitAssertionError` |
| `oracompat.empty_strings` | `replace_empty_strings` / `replace_null_strings` for row dictionaries |

## Installation

```
pip install oracompat
```

## Examples

String helpers. Positions are 1-based, and negative positions count from the end:

```python
from oracompat import plvstr, plvchr

plvstr.substr("abcdef", -3, 2)            # 'de'
plvstr.instr("a.b.c", ".", 1, 2)           # 4
plvstr.normalize("  hello \t  world ")    # 'hello world'
plvchr.char_name(" ")                      # 'SP'
```

Template substitution:

```python
from oracompat.plvsubst import Substitutor

s = Substitutor()
s.string("Hello %s, you are %s", ["Ann", 30])   # 'Hello Ann, you are 30'
s.string_from_text("%s-%s", "a,b")             # 'a-b'
```

Business days:

```python
import datetime
from oracompat.plvdate import BusinessCalendar

cal = BusinessCalendar()
cal.default_holidays("Czech")
cal.add_bizdays(datetime.date(2024, 12, 23), 1)   # date(2024, 12, 27)
```

Named pipes in a registry shared by several callers. A message is any Python
object; the caller states the size it counts towards the pipe's total:

```python
from oracompat.pipe_registry import PipeRegistry

registry = PipeRegistry(30)
registry.create_pipe("jobs", limit=10)
registry.send("jobs", "hello", 5)
registry.list_pipes()        # [PipeInfo(name='jobs', items=1, size=5, limit=10, ...)]
registry.receive("jobs")     # 'hello'
```

Buffered output:

```python
from oracompat.dbms_output import DbmsOutput

out = DbmsOutput(None)       # completed lines go to print() when server output is on
out.enable(20000)
out.put_line("first")
out.put_line("second")
out.get_lines(10)   # (['first', 'second'], 2)
```

Random values:

```python
from oracompat.dbms_random import DbmsRandom

rng = DbmsRandom(42)
rng.value()           # a float in [0, 1)
rng.value(10, 20)     # a float in [10, 20)
rng.string("u", 8)    # eight upper-case letters
```

Assertions raise `PlunitAssertionError` with the given message or a default one:

```python
from oracompat import plunit

plunit.assert_equals_range(1.0, 1.05, 0.1)
plunit.assert_equals(1, 2, "values differ")   # raises PlunitAssertionError
```

Rows as dictionaries:

```python
from oracompat.empty_strings import replace_empty_strings

replace_empty_strings({"a": "", "b": 1}, ["a"])   # {'a': None, 'b': 1}
```

## What it does not do

- `PipeRegistry` only stores and hands out messages. There is no
  per-session packing of typed items (text, dates, numbers, bytes, records)
  into a message, no unpacking of them, and no sending or receiving that
  waits with a timeout; `send` and `receive` return at once.
- Nothing here is installed into a database server: these are plain Python
  functions and classes, and the row filters work on dictionaries rather
  than on table triggers.

## Running the tests

```
pip install oracompat[test]
pytest
```