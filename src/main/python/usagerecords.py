"""Read usage records (one row per OS version) from an analytics CSV export."""

from collections import namedtuple
import csv
import re

from osversion import UsageError, ParseError, parse_version

UsageRecord = namedtuple('UsageRecord', ('version', 'users', 'new_users',
                                         'engaged_sessions', 'event_count'))

# CSV column name for each UsageRecord counter
counter_columns = [
    ('users', 'Users'),
    ('new_users', 'New users'),
    ('engaged_sessions', 'Engaged sessions'),
    ('event_count', 'Event count'),
]
version_column = 'OS version'
columns = [version_column] + [column for field, column in counter_columns]

# Counters are signed 64-bit in the exporting system
max_count = 2 ** 63 - 1
max_digits = len(str(max_count))

intre = re.compile(r'-?[0-9]+$')


class RowError(UsageError):
    def __init__(self, message, cause=None):
        UsageError.__init__(self, message)
        self.cause = cause


def intconvert(column, s):
    s = s.strip()
    if intre.match(s) is None:
        raise RowError("column %r: could not interpret %r as an integer" % (column, s[:40]))
    if len(s.lstrip('-').lstrip('0')) > max_digits:
        raise RowError("column %r: count %s... is out of range" % (column, s[:20]))

    value = int(s)
    if value < 0:
        raise RowError("column %r: negative count %i" % (column, value))
    if value > max_count:
        raise RowError("column %r: count %i is out of range" % (column, value))
    return value


def record_from_row(row):
    """
    Build a UsageRecord from a mapping of CSV column name to cell text.

    Raises RowError if a column is missing or a cell can't be parsed.
    """
    for column in columns:
        if row.get(column) is None or row[column].strip() == '':
            raise RowError("missing value for column %r" % (column,))

    try:
        version = parse_version(row[version_column])
    except ParseError as e:
        raise RowError("column %r: %s" % (version_column, e), cause=e)

    counts = dict((field, intconvert(column, row[column]))
                  for field, column in counter_columns)
    return UsageRecord(version, **counts)


def read_records(fd):
    """
    Yield a UsageRecord for every data row of the CSV stream `fd`.

    The first line must be a header naming at least the required columns. A
    leading byte order mark is skipped.
    """
    r = csv.DictReader(fd)
    try:
        header = r.fieldnames or []
        if header and header[0].startswith('\ufeff'):
            header[0] = header[0][1:]
            r.fieldnames = header
        for column in columns:
            if column not in header:
                raise RowError("header is missing column %r" % (column,))

        for rownum, row in enumerate(r, 1):
            try:
                yield record_from_row(row)
            except RowError as e:
                raise RowError("row %i: %s" % (rownum, e), cause=e.cause)
    except UnicodeDecodeError as e:
        raise RowError("input is not valid UTF-8: %s" % (e,))
