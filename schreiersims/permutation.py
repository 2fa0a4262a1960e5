"""
A permutation is a bijection of a set. Together with function composition
this forms a group.

Permutations act on the points 0..n-1 for a suitable n. They are stored as a
sparse mapping: points that are missing from the mapping are fixed. The
mapping is not checked to be a bijection, supplying one is up to the caller.
"""

import re


ELEMENT_SEP_RE = r' *[, ] *'
CYCLE_RE = rf'\(( *\d+({ELEMENT_SEP_RE}\d+)* *)?\) *'


class Permutation:
    """A permutation of the set 0..n-1, where n is the size of the mapping.

    Instances are immutable, products and inverses are new permutations.

    Equality is structural: two permutations are equal when they were built
    from equal mappings. Permutations with the same action but different
    explicit mappings, e.g. {0: 1, 1: 0} and {0: 1, 1: 0, 2: 2}, compare
    unequal.
    """
    __slots__ = ('n', 'images', '_hash')

    def __init__(self, images):
        self.images = dict(images)
        self.n = len(self.images)
        self._hash = None

    def is_identity(self):
        for i in range(self.n):
            if self.images.get(i, i) != i:
                return False
        return True

    def times(self, other):
        images = {}
        for i in range(max(self.n, other.n)):
            image = self.images.get(i, i)
            images[i] = other.images.get(image, image)
        return Permutation(images)

    def inverse(self):
        images = {}
        for i in range(self.n):
            images[self.images.get(i, i)] = i
        return Permutation(images)

    def act_on(self, point):
        return self.images.get(point, point)

    def cycles(self):
        """Return the non-trivial cycles, ordered by their first point.
        """
        seen = set()
        out = []
        for i in range(self.n):
            if i in seen:
                continue
            seen.add(i)
            cycle = [i]
            j = self.images.get(i, i)
            while j not in seen:
                seen.add(j)
                cycle.append(j)
                j = self.images.get(j, j)
            if len(cycle) > 1:
                out.append(tuple(cycle))
        return out

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.n == other.n and self.images == other.images

    def __hash__(self):
        if self._hash is None:
            self._hash = hash((self.n, frozenset(self.images.items())))
        return self._hash

    def __repr__(self):
        return f'Permutation({self.images!r})'

    def __str__(self):
        """Display a permutation as a product of cycles.
        """
        out = ['(%s)' % ' '.join(map(str, cycle)) for cycle in self.cycles()]
        if not out:
            return 'Id'
        return ''.join(out)


def permute(*pairs):
    """Build a permutation from a flat list of (point, image) pairs.

    `permute(0, 1, 1, 0, 2, 2)` swaps 0 and 1 on the points 0, 1 and 2.
    """
    if len(pairs) % 2:
        raise ValueError('expected an even number of arguments')
    return Permutation(zip(pairs[::2], pairs[1::2]))


def parse_perm(s, n=0):
    """Parse a permutation given as a product of cycles.

    The result acts on 0..m-1, where m is the larger of n and one more than
    the largest point mentioned. Cycles are multiplied from left to right.
    """
    cycles = []
    stripped = re.subn(r'\s', ' ', s)[0].strip()
    if stripped == 'Id':
        stripped = ''
    for match in re.finditer(CYCLE_RE + r'|.', stripped):
        cycle = match.group().strip()
        if len(cycle) == 1:
            raise ValueError(f"could not parse permutation {s!r}")
        cycle = cycle[1:-1].strip()
        if not cycle:
            continue
        cycle = list(map(int, re.split(ELEMENT_SEP_RE, cycle)))
        if len(set(cycle)) != len(cycle):
            raise ValueError(f"repeated point in cycle of {s!r}")
        cycles.append(cycle)
    n = max(n, max(map(max, cycles), default=-1) + 1)
    out = Permutation({i: i for i in range(n)})
    for cycle in cycles:
        out = out.times(cycle_perm(n, cycle))
    return out


def cycle_perm(n, cycle):
    """Return a given cycle acting on 0..n-1.
    """
    images = {i: i for i in range(n)}
    for i, j in zip(cycle, cycle[1:]):
        images[i] = j
    if cycle:
        images[cycle[-1]] = cycle[0]
    return Permutation(images)
