import unittest
import random
import numpy as np
from ringdeque import BoundedDeque, CallbackModel
from ringdeque.collections.compare import SequenceComparison


class _Opaque(object):
    '''A handle with no ordering of its own'''
    def __init__(self, v):
        self.v = v

    def __repr__(self):
        return f'<{self.v}>'


class TestLexicographic(unittest.TestCase):
    NUM_TEST = 100

    def test_matches_list_ordering(self, n=NUM_TEST):
        for _ in range(n):
            a = [int(x) for x in np.random.randint(0, 3, random.randint(0, 4))]
            b = [int(x) for x in np.random.randint(0, 3, random.randint(0, 4))]
            da, db = BoundedDeque(a), BoundedDeque(b, maxlen=10)
            msg = f'a: {a} b: {b}'
            self.assertEqual(da == db, a == b, msg)
            self.assertEqual(da != db, a != b, msg)
            self.assertEqual(da < db, a < b, msg)
            self.assertEqual(da <= db, a <= b, msg)
            self.assertEqual(da > db, a > b, msg)
            self.assertEqual(da >= db, a >= b, msg)

    def test_prefix(self):
        self.assertTrue(BoundedDeque([1, 2]) < BoundedDeque([1, 2, 3]))
        self.assertTrue(BoundedDeque([1, 2, 3]) < BoundedDeque([1, 3]))
        self.assertFalse(BoundedDeque([1, 3]) <= BoundedDeque([1, 2, 3]))

    def test_identity(self):
        d = BoundedDeque([float('nan')])
        self.assertTrue(d == d)
        self.assertTrue(d <= d)
        self.assertTrue(d >= d)
        self.assertFalse(d < d)
        self.assertFalse(d > d)

    def test_not_comparable(self):
        d = BoundedDeque([1, 2])
        self.assertIs(d.__eq__([1, 2]), NotImplemented)
        self.assertIs(d.__lt__((1, 2)), NotImplemented)
        self.assertFalse(d == [1, 2])
        self.assertTrue(d != [1, 2])
        self.assertRaises(TypeError, lambda: d < [1, 2])

    def test_hook_error_propagates(self):
        self.assertRaises(TypeError, lambda: BoundedDeque([1]) < BoundedDeque(['a']))

    def test_host_model(self):
        model = CallbackModel(
            eq=lambda a, b: a.v == b.v,
            lt=lambda a, b: a.v < b.v,
            repr=lambda x: f'#{x.v}',
        )
        a = BoundedDeque([_Opaque(1), _Opaque(2)], model=model)
        b = BoundedDeque([_Opaque(1), _Opaque(3)], model=model)
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertFalse(a >= b)
        self.assertTrue(b > a)
        self.assertNotEqual(a, b)
        self.assertEqual(a, a.copy())
        self.assertIs(a.copy().model, model)
        self.assertEqual(a.count(_Opaque(2)), 1)
        self.assertEqual(a.index(_Opaque(2)), 1)
        self.assertIn(_Opaque(1), a)
        a.remove(_Opaque(1))
        self.assertEqual(repr(a), 'BoundedDeque([#2])')

    def test_comparison_snapshot(self):
        d = BoundedDeque([1, 2])
        calls = []

        class Mutating(object):
            def __eq__(self, other):
                calls.append(other)
                d.clear()
                return True

        d.append(Mutating())
        o = BoundedDeque([1, 2, 0])
        self.assertTrue(d == o)
        self.assertEqual(len(d), 0)
        self.assertEqual(len(calls), 1)

    def test_partial_order(self):
        model = CallbackModel(lt=lambda a, b: a < b)
        pairs = [
            ([frozenset({1})], [frozenset({2})]),
            ([frozenset({1})], [frozenset({1, 2})]),
            ([frozenset({1, 2}), frozenset({3})], [frozenset({1, 2}), frozenset({4})]),
            ([frozenset({1})], [frozenset({1}), frozenset()]),
        ]
        for a, b in pairs:
            da, db = BoundedDeque(a, model=model), BoundedDeque(b, model=model)
            msg = f'a: {a} b: {b}'
            self.assertEqual(da < db, a < b, msg)
            self.assertEqual(da <= db, a <= b, msg)
            self.assertEqual(da > db, a > b, msg)
            self.assertEqual(da >= db, a >= b, msg)

    def test_unknown_order(self):
        cmp = SequenceComparison([1], [2], BoundedDeque().model)
        self.assertRaises(ValueError, cmp.compare, 'ne')

    def test_sort_key(self):
        values = [BoundedDeque(np.random.randint(0, 3, random.randint(0, 4)).tolist()) for _ in range(30)]
        ordered = sorted(values)
        for x, y in zip(ordered, ordered[1:]):
            self.assertLessEqual(x, y)
        self.assertEqual(
            [list(x) for x in ordered],
            sorted([list(x) for x in values]),
        )
