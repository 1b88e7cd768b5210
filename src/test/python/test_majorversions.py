import itertools
import unittest

from osversion import Version
from usagerecords import UsageRecord
from majorversions import Bucket, CounterOverflowError, aggregate, fold

r1 = UsageRecord(Version(14, 2, 1), 100, 10, 80, 500)
r2 = UsageRecord(Version(14, 5, 0), 50, 5, 40, 300)
r3 = UsageRecord(Version(13, 0, 0), 30, 3, 20, 150)


def sums(buckets):
    return dict((key, b.counts()) for key, b in buckets.items())


class TestFold(unittest.TestCase):
    def test_new_bucket(self):
        buckets = {}
        fold(buckets, r1)
        self.assertEqual(list(buckets.keys()), [Version(14, 0, 0)])
        b = buckets[Version(14, 0, 0)]
        self.assertEqual(b.version, Version(14, 0, 0))
        self.assertEqual(b.counts(), (100, 10, 80, 500))
        self.assertEqual(b.fraction, 0.0)

    def test_merge_sums_each_counter(self):
        buckets = {}
        fold(buckets, r1)
        fold(buckets, r2)
        self.assertEqual(len(buckets), 1)
        self.assertEqual(buckets[Version(14, 0, 0)].counts(), (150, 15, 120, 800))

    def test_merge_is_independent_per_counter(self):
        buckets = {}
        fold(buckets, UsageRecord(Version(9, 0, 0), 1, 0, 0, 0))
        fold(buckets, UsageRecord(Version(9, 1, 0), 0, 0, 0, 7))
        self.assertEqual(buckets[Version(9, 0, 0)].counts(), (1, 0, 0, 7))

    def test_order_independent(self):
        expected = sums(aggregate([r1, r2, r3]))
        self.assertEqual(expected, {
            Version(14, 0, 0): (150, 15, 120, 800),
            Version(13, 0, 0): (30, 3, 20, 150),
        })
        for ordering in itertools.permutations([r1, r2, r3]):
            self.assertEqual(sums(aggregate(ordering)), expected)

    def test_records_not_modified(self):
        buckets = {}
        fold(buckets, r1)
        fold(buckets, r2)
        self.assertEqual(r1, UsageRecord(Version(14, 2, 1), 100, 10, 80, 500))

    def test_overflow(self):
        big = UsageRecord(Version(1, 0, 0), 2 ** 63 - 1, 0, 0, 0)
        buckets = {}
        fold(buckets, big)
        self.assertRaises(CounterOverflowError, fold, buckets,
                          UsageRecord(Version(1, 2, 0), 1, 0, 0, 0))

    def test_bucket_add(self):
        b = Bucket(Version(3, 0, 0))
        b.add(r3)
        b.add(r3)
        self.assertEqual(b.counts(), (60, 6, 40, 300))


class TestAggregate(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(aggregate([]), {})

    def test_min_major(self):
        buckets = aggregate([r1, r2, r3], min_major=14)
        self.assertEqual(list(buckets.keys()), [Version(14, 0, 0)])

    def test_min_major_excludes_everything(self):
        self.assertEqual(aggregate([r1, r3], min_major=15), {})

    def test_accepts_generator(self):
        buckets = aggregate(r for r in [r1, r2, r3])
        self.assertEqual(len(buckets), 2)


if __name__ == '__main__':
    unittest.main()
