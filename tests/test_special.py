"""Tests for schreiersims.special."""
import unittest

import pytest

from schreiersims import (
    SLPPermutation, Permutation, Identity, Generator, Product, morphism, Word,
    SLPFactory, Group, permute,
)


class TestSLPPermutation(unittest.TestCase):

    def test_identity_follows_permutation(self):
        not_identity = SLPPermutation(Generator(1), Permutation({0: 1, 1: 0}))
        self.assertFalse(not_identity.is_identity())

        identity = SLPPermutation(Identity(), Permutation({0: 0, 1: 1}))
        self.assertTrue(identity.is_identity())

    def test_multiplication_is_from_left_to_right(self):
        first = SLPPermutation(Generator(1), Permutation({0: 1, 1: 0, 2: 2}))
        second = SLPPermutation(Generator(2), Permutation({0: 0, 1: 2, 2: 1}))

        product = first.times(second)

        expected = SLPPermutation(
            Product(Generator(1), Generator(2)),
            Permutation({0: 2, 1: 0, 2: 1}))
        self.assertEqual(product, expected)

    def test_inverse_multiplies_to_identity(self):
        first = SLPPermutation(Generator(1), Permutation({0: 1, 1: 2, 2: 0}))
        self.assertTrue(first.times(first.inverse()).is_identity())

    def test_acts_upon_integers(self):
        p = SLPPermutation(Generator(1), Permutation({0: 1, 1: 2, 2: 0}))
        self.assertEqual(p.act_on(0), 1)
        self.assertEqual(p.act_on(1), 2)
        self.assertEqual(p.act_on(2), 0)

    def test_equality_includes_slp(self):
        p = Permutation({0: 1, 1: 0})
        self.assertNotEqual(
            SLPPermutation(Generator(0), p), SLPPermutation(Generator(1), p))
        self.assertEqual(
            SLPPermutation(Generator(0), p), SLPPermutation(Generator(0), p))

    def test_transform(self):
        p = SLPPermutation(Generator(0), Permutation({0: 1, 1: 0}))
        q = SLPPermutation(Generator(1), Permutation({0: 0, 1: 1}))
        w = p.times(q.inverse()).transform(morphism(0, 't', 1, 'r'))
        self.assertEqual(w, Word([('t', 1), ('r', -1)]))

    def test_element_pair(self):
        p = Permutation({0: 1, 1: 0})
        self.assertEqual(SLPPermutation(Generator(0), p).element, (Generator(0), p))

    def test_rejects_non_slp(self):
        with pytest.raises(TypeError):
            SLPPermutation('G_0', Permutation({}))

    def test_pairs_with_factory_expressions(self):
        factory = SLPFactory()
        t = permute(0, 1, 1, 0, 2, 2)
        r = permute(0, 1, 1, 2, 2, 0)
        first = SLPPermutation(factory.generator(t), t)
        second = SLPPermutation(factory.generator(r), r)

        product = first.times(second.inverse())

        self.assertEqual(product.permutation, t.times(r.inverse()))
        self.assertEqual(
            product.transform(morphism(0, 't', 1, 'r')),
            Word([('t', 1), ('r', -1)]))
        self.assertEqual(product.slp.evaluate(), product.permutation)

    def test_group_of_expression_pairs(self):
        factory = SLPFactory()
        t = permute(0, 1, 1, 0, 2, 2)
        r = permute(0, 1, 1, 2, 2, 0)
        group = Group(range(3), [
            SLPPermutation(factory.generator(t), t),
            SLPPermutation(factory.generator(r), r)])

        stripped = group.strip(
            SLPPermutation(factory.identity(), permute(0, 2, 1, 1, 2, 0)))

        self.assertEqual(group.size(), 6)
        self.assertTrue(stripped.is_identity())
