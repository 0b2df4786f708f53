import random
import unittest

from dicesim.games import InvalidConfiguration
from dicesim.rng import RangeSource, SequenceSource


class TestRangeSource(unittest.TestCase):

    def test_init(self):
        with self.assertRaisesRegex(InvalidConfiguration, "low 9 is greater than high 6"):
            RangeSource(9, 6)

        s = RangeSource(6, 9)
        self.assertEqual((s.low, s.high), (6, 9))
        self.assertIn(7, s)
        self.assertNotIn(10, s)

    def test_next_in_range(self):
        cases = [
            {'name': 'one through ten', 'low': 1, 'high': 10},
            {'name': 'knockout numbers', 'low': 6, 'high': 9},
            {'name': 'single value', 'low': 4, 'high': 4},
        ]

        for c in cases:
            with self.subTest(name=c['name']):
                s = RangeSource(c['low'], c['high'], random.Random(42))
                seen = set(s.next() for _ in range(300))
                self.assertEqual(seen, set(range(c['low'], c['high'] + 1)))

    def test_seeded_sources_repeat(self):
        a = RangeSource(1, 10, random.Random('knock out'))
        b = RangeSource(1, 10, random.Random('knock out'))
        self.assertEqual([a.next() for _ in range(50)], [b.next() for _ in range(50)])


class TestSequenceSource(unittest.TestCase):

    def test_next(self):
        cases = [
            {
                'name': 'cycles',
                'values': [1, 2, 3],
                'count': 7,
                'expect': [1, 2, 3, 1, 2, 3, 1],
            },
            {
                'name': 'no cycle, within length',
                'values': [4, 5],
                'cycle': False,
                'count': 2,
                'expect': [4, 5],
            },
            {
                'name': 'no cycle, exhausted',
                'values': [4, 5],
                'cycle': False,
                'count': 3,
                'expect_exception': {'type': ValueError, 'msg': "exhausted after 2 values"},
            },
        ]

        for c in cases:
            name = c.get('name', '<none>')
            cycle = c.get('cycle', True)
            expect_exception = c.get('expect_exception', None)

            with self.subTest(name=name):
                s = SequenceSource(c['values'], cycle=cycle)
                if expect_exception is not None:
                    with self.assertRaisesRegex(expect_exception['type'], expect_exception['msg']):
                        for _ in range(c['count']):
                            s.next()
                else:
                    actual = [s.next() for _ in range(c['count'])]
                    self.assertEqual(actual, c['expect'])

    def test_range(self):
        s = SequenceSource([8, 6, 9])
        self.assertEqual((s.low, s.high), (6, 9))

    def test_empty(self):
        with self.assertRaisesRegex(InvalidConfiguration, "at least one value"):
            SequenceSource([])
