"""Lenient parsing of OS version strings from analytics exports.

Exports contain things like "14", "14.2", "14.2.1", "10.0.19045.3803" or
"17.0-beta". Missing components are 0, anything after the numeric part is
ignored.
"""

from collections import namedtuple
import re


class UsageError(ValueError):
    """Base class for every error that aborts a summary run."""


class ParseError(UsageError):
    pass


versionre = re.compile(r'([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?')

max_component = 2 ** 64 - 1
max_component_digits = len(str(max_component))


class Version(namedtuple('Version', ('major', 'minor', 'patch'))):
    __slots__ = ()

    def major_version(self):
        return Version(self.major, 0, 0)

    def __str__(self):
        return "%i.%i.%i" % self


def parse_version(s):
    m = versionre.match(s.strip())
    if m is None:
        raise ParseError("could not interpret %r as a version" % (s[:40],))

    parts = [g or '0' for g in m.groups()]
    # Components are unsigned 64-bit
    if any(len(g.lstrip('0')) > max_component_digits for g in parts):
        raise ParseError("version %r... is out of range" % (s.strip()[:20],))

    version = Version(*(int(g) for g in parts))
    if max(version) > max_component:
        raise ParseError("version %r is out of range" % (s.strip()[:40],))
    return version
