"""
The two capabilities every algebraic object in this package provides.

A group element knows whether it is the identity, how to multiply with
another element of the same type and how to invert itself. Products are
composed from left to right: `a.times(b)` means "apply a, then b".

A group action additionally lets an element move points of some domain. The
action has to be compatible with the group operation, i.e.
`a.times(b).act_on(p) == b.act_on(a.act_on(p))`.

No base class is involved, any type providing these methods can be used.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GroupElement(Protocol):
    def is_identity(self):
        """Return whether this is the identity element.
        """
        ...

    def times(self, other):
        """Return the product of self and other, self applied first.
        """
        ...

    def inverse(self):
        """Return the inverse element.
        """
        ...


@runtime_checkable
class GroupAction(Protocol):
    def act_on(self, point):
        """Return the image of point.
        """
        ...


def identity_of(elements):
    """Return the identity of the group containing the given elements.

    Only the capabilities above are available, so the identity is formed as
    g * g^-1 for the first element.
    """
    for g in elements:
        return g.times(g.inverse())
    raise ValueError('need at least one element to form an identity')


def mult_all(xs):
    """Multiply a sequence of elements from left to right.

    Returns None for an empty sequence.
    """
    w = None
    for x in xs:
        w = x if w is None else w.times(x)
    return w


def power(g, n):
    """Take a group element to the nth power.
    """
    if n == 0:
        return identity_of([g])
    elif n < 0:
        return power(g.inverse(), -n)

    q = power(g, n >> 1) if n > 1 else None
    if q is not None:
        q = q.times(q)
    if n & 1:
        q = g if q is None else q.times(g)

    return q
