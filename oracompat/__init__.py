"""Oracle-style PL/SQL utility packages: strings, dates, a pipe registry, output, random values and assertions."""

__version__ = "0.1.0"

__all__ = [
    "plvstr",
    "plvchr",
    "plvsubst",
    "plvdate",
    "pipe_registry",
    "dbms_output",
    "dbms_random",
    "plunit",
    "empty_strings",
]