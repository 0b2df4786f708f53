import random
import unittest

from dicesim.die import Die
from dicesim.games import InvalidConfiguration
from dicesim.rng import RangeSource, SequenceSource


class TestDie(unittest.TestCase):

    def test_init(self):
        cases = [
            {
                'name': 'zero faces',
                'faces': 0,
                'expect_exception': {'type': InvalidConfiguration, 'msg': "at least 1 face, got 0"},
            },
            {
                'name': 'negative faces',
                'faces': -6,
                'expect_exception': {'type': InvalidConfiguration, 'msg': "at least 1 face, got -6"},
            },
            {
                'name': 'one face',
                'faces': 1,
            },
            {
                'name': 'standard d6',
                'faces': 6,
            },
        ]

        for c in cases:
            name = c.get('name', '<none>')
            faces = c.get('faces', 6)
            expect_exception = c.get('expect_exception', None)

            with self.subTest(name=name):
                src = SequenceSource([1])
                if expect_exception is not None:
                    with self.assertRaisesRegex(expect_exception['type'], expect_exception['msg']):
                        Die(faces, src)
                else:
                    d = Die(faces, src)
                    self.assertEqual(d.face_count, faces)
                    self.assertIs(d.source, src)

    def test_roll(self):
        cases = [
            {
                'name': 'one through ten on d6',
                'faces': 6,
                'source': list(range(1, 11)),
                'expect': [2, 3, 4, 5, 6, 1, 2, 3, 4, 5],
            },
            {
                'name': 'exact multiple wraps evenly',
                'faces': 5,
                'source': list(range(1, 11)),
                'expect': [2, 3, 4, 5, 1, 2, 3, 4, 5, 1],
            },
            {
                'name': 'single face always 1',
                'faces': 1,
                'source': [1, 7, 10],
                'expect': [1, 1, 1],
            },
            {
                'name': 'source value equal to face count',
                'faces': 6,
                'source': [6, 12, 0],
                'expect': [1, 1, 1],
            },
        ]

        for c in cases:
            with self.subTest(name=c['name']):
                d = Die(c['faces'], SequenceSource(c['source'], cycle=False))
                actual = [d.roll() for _ in c['expect']]
                self.assertEqual(actual, c['expect'])

    def test_roll_always_in_range(self):
        for faces in range(1, 13):
            with self.subTest(faces=faces):
                d = Die(faces, RangeSource(1, 10, random.Random(faces)))
                for r in d.roll_n(500):
                    self.assertGreaterEqual(r, 1)
                    self.assertLessEqual(r, faces)

    def test_roll_n(self):
        d = Die(6, SequenceSource([2, 3]))
        self.assertEqual(d.roll_n(4), [3, 4, 3, 4])

        with self.assertRaisesRegex(ValueError, "at least 1"):
            d.roll_n(0)
