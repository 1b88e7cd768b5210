"""Library for adding 'version' options to optparse."""

from optparse import Option, OptionValueError
from copy import copy

from osversion import ParseError, parse_version


def check_version(option, opt, value):
    try:
        return parse_version(value)
    except ParseError:
        raise OptionValueError("option %s: could not interpret %r as a version" % (opt, value))


class OptionWithVersion(Option):
    TYPES = Option.TYPES + ('version',)
    TYPE_CHECKER = copy(Option.TYPE_CHECKER)
    TYPE_CHECKER['version'] = check_version
