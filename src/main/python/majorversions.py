"""Merge usage records into one bucket per major OS version."""

from osversion import UsageError
from usagerecords import counter_columns, max_count

counter_fields = [field for field, column in counter_columns]


class CounterOverflowError(UsageError):
    pass


class Bucket(object):
    def __init__(self, version, users=0, new_users=0, engaged_sessions=0,
                 event_count=0):
        self.version = version
        self.users = users
        self.new_users = new_users
        self.engaged_sessions = engaged_sessions
        self.event_count = event_count
        self.fraction = 0.0

    def add(self, record):
        for field in counter_fields:
            total = getattr(self, field) + getattr(record, field)
            if total > max_count:
                raise CounterOverflowError("%s for version %s overflowed (%i)"
                                           % (field, self.version, total))
            setattr(self, field, total)

    def counts(self):
        return tuple(getattr(self, field) for field in counter_fields)

    def __repr__(self):
        return "<Bucket %s users=%i new_users=%i engaged_sessions=%i event_count=%i>" % (
            (self.version,) + self.counts())


def fold(buckets, record):
    """
    Add `record` to the bucket for its major version in the dict `buckets`,
    creating the bucket on first sight.
    """
    key = record.version.major_version()
    bucket = buckets.get(key)
    if bucket is None:
        buckets[key] = Bucket(key, *(getattr(record, field) for field in counter_fields))
    else:
        bucket.add(record)


def aggregate(records, min_major=None):
    """
    Fold an iterable of UsageRecords into a new {Version: Bucket} dict.

    Records with a major version below `min_major` are left out.
    """
    buckets = {}
    for record in records:
        if min_major is not None and record.version.major < min_major:
            continue
        fold(buckets, record)
    return buckets
