"""
Stabilizer chains built with the Schreier-Sims algorithm.

A group is given by a set of points and a few generators acting on them. The
chain is built level by level: pick a base point moved by the current
generators, explore its orbit breadth first while recording a Schreier
vector, and collect the Schreier generators of the base point stabilizer.
Those generators become the generators of the next level, until no
non-trivial ones are left.

The order of the group is the product of the orbit lengths, and sifting an
element through the levels decides whether it is a member.

Nothing here depends on the concrete element type. Anything providing the
`GroupElement` and `GroupAction` methods works, including elements that
record how they were calculated, like `SLPPermutation`.
"""

from collections import deque
import logging

from .config import Config
from .element import identity_of

_logger = logging.getLogger(__name__)

# Schreier vector entry of the base point
NO_GENERATOR = -1


class NotInOrbit(ValueError):
    pass


class NoMovedPoint(ValueError):
    pass


def find_base(gset, generators):
    """Find the base point for a new level.

    Returns the image of the first point of gset that some generator moves,
    or None if no generator moves any point.
    """
    for original in gset:
        for gen in generators:
            image = gen.act_on(original)
            if image != original:
                return image
    return None


def transversal_for(point, generators, indices, stats=None):
    """Reconstruct the transversal mapping the base to point.

    Walks the Schreier vector indices back from point to the base, collecting
    the inverses of the generators on the way. Returns None if point is not
    in the orbit.
    """
    if point not in indices:
        return None

    transversal = identity_of(generators)
    index = indices[point]
    while index != NO_GENERATOR:
        inverse = generators[index].inverse()
        point = inverse.act_on(point)
        transversal = transversal.times(inverse)
        if stats is not None:
            stats.inverses += 1
            stats.products += 1
        index = indices[point]

    if stats is not None:
        stats.inverses += 1
    return transversal.inverse()


class BaseStrongGeneratorLevel:
    """A level of the stabilizer chain.

    Holds a base point, the generators acting at this level and a Schreier
    vector for the orbit of the base point: each orbit point maps to the
    index of the generator that reached it first, the base point maps to
    NO_GENERATOR.
    """

    def __init__(self, base, generators, indices, cfg=None):
        self.cfg = cfg or Config()
        self.base = base
        self.generators = list(generators)
        self.indices = dict(indices)

    @classmethod
    def build(cls, base, generators, cfg=None):
        """Explore the orbit of base and collect Schreier generators.

        Returns the new level together with the generators of the stabilizer
        of base. Points are visited in breadth first order and generators in
        the given order, which makes the result reproducible.
        """
        cfg = cfg or Config()
        generators = list(generators)
        indices = {base: NO_GENERATOR}
        to_visit = deque([base])
        stabilizers = []

        while to_visit:
            point = to_visit.popleft()
            for i, gen in enumerate(generators):
                image = gen.act_on(point)
                if image not in indices:
                    indices[image] = i
                    to_visit.append(image)
                    continue

                # the edge point -> image closes a cycle of the orbit graph
                to = transversal_for(point, generators, indices, cfg.stats)
                fro = transversal_for(
                    image, generators, indices, cfg.stats).inverse()
                stabilizer = to.times(gen).times(fro)
                cfg.stats.inverses += 1
                cfg.stats.products += 2

                if stabilizer.is_identity():
                    continue
                if cfg.dedupe_schreier_gens and stabilizer in stabilizers:
                    continue
                stabilizers.append(stabilizer)

        cfg.stats.schreier_gens += len(stabilizers)
        cfg.stats.levels += 1
        _logger.debug(
            'level with base %r: orbit length %d, %d Schreier generators',
            base, len(indices), len(stabilizers))

        return cls(base, generators, indices, cfg), stabilizers

    def has_transversal_for(self, g):
        """Return whether g maps the base into the orbit.
        """
        return g.act_on(self.base) in self.indices

    def transversal_for(self, g):
        """Return the transversal for the image of the base under g.

        Returns None if that image is not in the orbit.
        """
        return transversal_for(
            g.act_on(self.base), self.generators, self.indices, self.cfg.stats)

    def transversal_to(self, point):
        """Return the transversal mapping the base to point.
        """
        if point not in self.indices:
            raise NotInOrbit(f'{point!r} is not in the orbit of {self.base!r}')
        return transversal_for(
            point, self.generators, self.indices, self.cfg.stats)

    def orbit(self):
        """Return the orbit of the base point in breadth first order.
        """
        return list(self.indices)

    def length(self):
        """Length of the orbit.
        """
        return len(self.indices)

    __len__ = length

    def __str__(self):
        gens = ''.join(f' {g}' for g in self.generators)
        indices = ''.join(f' {p}: {i}' for p, i in self.indices.items())
        return f'[{self.base};<{gens} >;{indices}]'


class Group:
    """A group given by generators acting on the points of gset.

    The stabilizer chain is built in the constructor. Construction does not
    terminate for generating sets whose Schreier generators never become
    trivial; this is not checked.

    Raises NoMovedPoint if there are generators but none of them moves a
    point of gset.
    """

    def __init__(self, gset, generators, cfg=None):
        self.cfg = cfg or Config()
        self.gset = list(gset)
        self.levels = []

        gens = list(generators)
        while gens:
            base = find_base(self.gset, gens)
            if base is None:
                raise NoMovedPoint('generators should move something')
            level, gens = BaseStrongGeneratorLevel.build(base, gens, self.cfg)
            self.levels.append(level)

        _logger.debug(
            'built stabilizer chain with base %r and order %d',
            self.base(), self.size())

    def stabilizer_chain(self):
        """Return the levels of the stabilizer chain.
        """
        return list(self.levels)

    def base(self):
        """Return the base points of the chain.
        """
        return [level.base for level in self.levels]

    def generators(self):
        """Return the strong generating set, i.e. the generators of all levels.
        """
        return [g for level in self.levels for g in level.generators]

    def size(self):
        """The order of the group, i.e. the number of elements this group has.
        """
        order = 1
        for level in self.levels:
            order *= level.length()
        return order

    order = size

    def strip(self, element):
        """Sift element through the chain.

        At every level the transversal for the image of the base is divided
        off. Stops at the first level whose orbit does not contain that image
        and returns what is left.
        """
        candidate = element
        for level in self.levels:
            transversal = level.transversal_for(candidate)
            if transversal is None:
                break
            candidate = candidate.times(transversal.inverse())
            self.cfg.stats.inverses += 1
            self.cfg.stats.products += 1
        return candidate

    def is_member(self, element):
        """Determine if a group element is a member of this group.
        """
        return self.strip(element).is_identity()

    def __contains__(self, element):
        return self.is_member(element)

    def __str__(self):
        return '<\n' + ''.join(f'{level}\n' for level in self.levels) + '>\n'
