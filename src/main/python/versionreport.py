"""
Sort major-version buckets, work out each one's share of users, and print
them as a fixed-width table.
"""

import sys

from osversion import UsageError

headerformat = "%-9s %-7s %4s   %-9s %-9s"
rowformat = "%-9s %-7i %4.1f%%  %-9i %-9i"


class EmptyInputError(UsageError):
    pass


def summarize(buckets):
    """
    Return the buckets of the {Version: Bucket} dict sorted by version, newest
    first, with `fraction` set on each.
    """
    collected = sorted(buckets.values(), key=lambda b: b.version, reverse=True)

    total = sum(b.users for b in collected)
    if total == 0:
        raise EmptyInputError("no users in input (%i versions)" % len(collected))

    for b in collected:
        b.fraction = float(b.users) / total

    return collected


def format_table(collected):
    lines = [headerformat % ("Version", "Users", "Pct.", "New users", "Sessions")]
    for b in collected:
        lines.append(rowformat % (b.version, b.users, b.fraction * 100,
                                  b.new_users, b.engaged_sessions))
    return lines


def write_table(collected, fd=None):
    if fd is None:
        fd = sys.stdout
    for line in format_table(collected):
        print(line, file=fd)
