"""
Computing with permutation groups given by a few generators.

The Schreier-Sims algorithm builds a stabilizer chain for the group, which
gives its order and a membership test. Elements can be straight-line
programs, so that a membership test also yields a word in the original
generators that certifies the result.
"""

from .config import Config, Stats
from .element import GroupElement, GroupAction, identity_of, mult_all, power
from .permutation import Permutation, permute, parse_perm, cycle_perm
from .free import Word, normalize
from .slp import (
    SLP, Identity, Generator, Product, Inverse,
    Morphism, MissingImage, morphism,
)
from .special import SLPPermutation
from .calculation import SLPFactory, Expression
from .chain import (
    Group, BaseStrongGeneratorLevel, NotInOrbit, NoMovedPoint,
    find_base, transversal_for,
)

__all__ = [
    'Config', 'Stats',
    'GroupElement', 'GroupAction', 'identity_of', 'mult_all', 'power',
    'Permutation', 'permute', 'parse_perm', 'cycle_perm',
    'Word', 'normalize',
    'SLP', 'Identity', 'Generator', 'Product', 'Inverse',
    'Morphism', 'MissingImage', 'morphism',
    'SLPPermutation',
    'SLPFactory', 'Expression',
    'Group', 'BaseStrongGeneratorLevel', 'NotInOrbit', 'NoMovedPoint',
    'find_base', 'transversal_for',
]
