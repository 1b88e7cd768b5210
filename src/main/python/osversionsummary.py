"""
Summarize an analytics export of users per OS version by major version.

Reads CSV with the columns "OS version", "Users", "New users",
"Engaged sessions" and "Event count" on stdin and prints a table of users,
share of users, new users and sessions for each major version.
"""

from optparse import OptionParser
import csv
import io
import sys

import versionoption
from osversion import UsageError
from usagerecords import read_records
from majorversions import aggregate
from versionreport import summarize, write_table


def parse_args(argv):
    p = OptionParser(usage='usage: %prog [options] < export.csv',
                     option_class=versionoption.OptionWithVersion)
    p.add_option('-m', '--min-version', dest='minversion', type='version',
                 help='Leave out major versions older than this', default=None)
    p.add_option('-g', '--graph', action='store_true', dest='graph',
                 help='Produce SVG graph instead of table', default=False)
    p.add_option('-v', '--verbose', action='store_true', dest='verbose',
                 help='Print record counts to stderr', default=False)

    opts, args = p.parse_args(argv)
    if len(args) != 0:
        p.error("No arguments expected")
    return opts


def run(opts, infd, outfd, errfd):
    minmajor = opts.minversion.major if opts.minversion is not None else None

    nrecords = 0

    def counted(records):
        nonlocal nrecords
        for record in records:
            nrecords += 1
            yield record

    buckets = aggregate(counted(read_records(infd)), min_major=minmajor)
    if opts.verbose:
        print("Read %i records in %i major versions" % (nrecords, len(buckets)),
              file=errfd)

    collected = summarize(buckets)

    if opts.graph:
        import usage_graph
        usage_graph.produce_graph(collected, "Users by major OS version", outfd)
    else:
        write_table(collected, outfd)


def main(argv=None, infd=None, outfd=None, errfd=None):
    opts = parse_args(argv)
    if infd is None:
        infd = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', newline='')
    if outfd is None:
        outfd = sys.stdout
    if errfd is None:
        errfd = sys.stderr

    try:
        run(opts, infd, outfd, errfd)
    except (UsageError, csv.Error) as e:
        print("Error handling CSV: %s" % (e,), file=outfd)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
