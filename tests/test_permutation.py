"""Tests for schreiersims.permutation."""
import unittest

import pytest

from schreiersims import Permutation, permute, parse_perm, cycle_perm


class TestPermutationGroupElement(unittest.TestCase):

    def test_identity(self):
        self.assertFalse(Permutation({0: 1, 1: 0}).is_identity())
        self.assertTrue(Permutation({0: 0, 1: 1}).is_identity())
        self.assertTrue(Permutation({}).is_identity())

    def test_multiplication_is_from_left_to_right(self):
        first = Permutation({0: 1, 1: 0, 2: 2})
        second = Permutation({0: 0, 1: 2, 2: 1})

        product = first.times(second)

        self.assertEqual(product, Permutation({0: 2, 1: 0, 2: 1}))

    def test_product_acts_like_consecutive_actions(self):
        a = permute(0, 1, 1, 2, 2, 0, 3, 3)
        b = permute(0, 3, 1, 1, 2, 2, 3, 0)
        for p in range(4):
            self.assertEqual(a.times(b).act_on(p), b.act_on(a.act_on(p)))

    def test_inverse_multiplies_to_identity(self):
        first = Permutation({0: 1, 1: 2, 2: 0})
        self.assertTrue(first.times(first.inverse()).is_identity())
        self.assertTrue(first.inverse().times(first).is_identity())

    def test_associativity(self):
        g = permute(0, 1, 1, 0, 2, 2, 3, 3)
        h = permute(0, 1, 1, 2, 2, 3, 3, 0)
        k = permute(0, 2, 1, 1, 2, 0, 3, 3)
        self.assertEqual(g.times(h).times(k), g.times(h.times(k)))

    def test_product_of_different_sizes(self):
        """Missing points are fixed, the product spans the larger size."""
        small = Permutation({0: 1, 1: 0})
        large = Permutation({0: 0, 1: 2, 2: 1})

        self.assertEqual(small.times(large), Permutation({0: 2, 1: 0, 2: 1}))
        self.assertEqual(small.times(large).n, 3)

    def test_acts_upon_integers(self):
        p = Permutation({0: 1, 1: 2, 2: 0})
        self.assertEqual(p.act_on(0), 1)
        self.assertEqual(p.act_on(1), 2)
        self.assertEqual(p.act_on(2), 0)

    def test_points_outside_mapping_are_fixed(self):
        p = Permutation({0: 1, 1: 0})
        self.assertEqual(p.act_on(7), 7)


class TestPermutationEquality(unittest.TestCase):

    def test_equal_mappings_are_equal(self):
        a = permute(0, 1, 1, 0)
        b = Permutation({1: 0, 0: 1})
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_equality_compares_explicit_mappings(self):
        short = permute(0, 1, 1, 0)
        padded = permute(0, 1, 1, 0, 2, 2)

        self.assertNotEqual(short, padded)
        for p in range(3):
            self.assertEqual(short.act_on(p), padded.act_on(p))

    def test_usable_as_dict_key(self):
        table = {permute(0, 1, 1, 0): 'swap'}
        self.assertEqual(table[Permutation({0: 1, 1: 0})], 'swap')


class TestPermutationFormatting(unittest.TestCase):

    def test_cycles_in_order_of_first_point(self):
        p = Permutation({0: 1, 1: 2, 2: 0, 3: 4, 4: 3})
        self.assertEqual(p.cycles(), [(0, 1, 2), (3, 4)])

    def test_display(self):
        identity = Permutation({0: 0, 1: 1})
        p = Permutation({0: 1, 1: 2, 2: 0, 3: 4, 4: 3})

        self.assertEqual(str(identity), 'Id')
        self.assertEqual(str(p), '(0 1 2)(3 4)')

    def test_fixed_points_are_not_shown(self):
        p = permute(0, 0, 1, 3, 2, 2, 3, 1)
        self.assertEqual(str(p), '(1 3)')


class TestBuilders(unittest.TestCase):

    def test_permute_pairs(self):
        self.assertEqual(permute(0, 1, 1, 0, 2, 2), Permutation({0: 1, 1: 0, 2: 2}))

    def test_permute_odd_arguments(self):
        with pytest.raises(ValueError):
            permute(0, 1, 1)

    def test_parse_perm(self):
        p = parse_perm('(0 1 2)(3 4)')
        self.assertEqual(p, Permutation({0: 1, 1: 2, 2: 0, 3: 4, 4: 3}))

    def test_parse_perm_round_trip_of_display(self):
        p = permute(0, 2, 1, 0, 2, 1, 3, 5, 4, 4, 5, 3)
        self.assertEqual(parse_perm(str(p)), p)

    def test_parse_perm_pads_to_n(self):
        p = parse_perm('(0 1)', 4)
        self.assertEqual(p, Permutation({0: 1, 1: 0, 2: 2, 3: 3}))

    def test_parse_perm_multiplies_left_to_right(self):
        p = parse_perm('(0 1)(1 2)')
        self.assertEqual(p, cycle_perm(3, [0, 1]).times(cycle_perm(3, [1, 2])))

    def test_parse_identity(self):
        self.assertTrue(parse_perm('Id').is_identity())
        self.assertTrue(parse_perm('()').is_identity())

    def test_parse_perm_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_perm('(0 1')
        with pytest.raises(ValueError):
            parse_perm('(0 1 0)')
