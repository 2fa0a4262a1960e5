"""
Home for special groups.
"""

from .element import GroupElement


class SLPPermutation:
    """A permutation that remembers how it was calculated.

    The permutation part drives the action and the identity test, the SLP
    part records the product of generators that led to it, so that it can
    later be expanded into a word. The SLP part can be an `SLP` tree or an
    `Expression` of an `SLPFactory`.
    """
    __slots__ = ('slp', 'permutation')

    def __init__(self, slp, permutation):
        if not (isinstance(slp, GroupElement) and hasattr(slp, 'transform')):
            raise TypeError(f'expected an SLP or an expression, got {slp!r}')
        self.slp = slp
        self.permutation = permutation

    @property
    def element(self):
        return (self.slp, self.permutation)

    def transform(self, morphism):
        """Map the SLP part into another group according to morphism.
        """
        return self.slp.transform(morphism)

    def is_identity(self):
        return self.permutation.is_identity()

    def times(self, other):
        return SLPPermutation(
            self.slp.times(other.slp),
            self.permutation.times(other.permutation))

    def inverse(self):
        return SLPPermutation(self.slp.inverse(), self.permutation.inverse())

    def act_on(self, point):
        return self.permutation.act_on(point)

    def __eq__(self, other):
        if not isinstance(other, SLPPermutation):
            return NotImplemented
        return self.permutation == other.permutation and self.slp == other.slp

    def __hash__(self):
        return hash((self.slp, self.permutation))

    def __repr__(self):
        return f'SLPPermutation({self.slp!r}, {self.permutation!r})'

    def __str__(self):
        return f'{self.slp} -> {self.permutation}'
