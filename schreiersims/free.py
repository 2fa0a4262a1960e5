"""
A free group consists of the sequences of symbols and their inverses where
no symbol occurs next to its own inverse.

Words are stored as (symbol, exponent) pairs. They are always kept freely
reduced: no exponent is zero and no two neighbouring pairs share a symbol.
"""


def normalize(terms):
    """Freely reduce a sequence of (symbol, exponent) pairs.

    Neighbouring pairs with the same symbol are merged. When a merge cancels
    to a zero exponent, the pair before it is taken up again, so that it gets
    merged with whatever follows. This way `a b b^-1 a^-1` reduces all the
    way to the empty word.
    """
    terms = list(terms)
    if len(terms) <= 1:
        return [(s, e) for s, e in terms if e != 0]

    out = []
    current = terms[0]
    i = 1
    while i < len(terms):
        symbol, exponent = terms[i]
        if current[0] == symbol:
            current = (symbol, current[1] + exponent)
        else:
            if current[1] != 0:
                out.append(current)
            elif out:
                # compare the uncovered pair against the same input pair
                current = out.pop()
                continue
            current = (symbol, exponent)
        i += 1
    if current[1] != 0:
        out.append(current)

    return out


class Word:
    """An element of a free group.
    """
    __slots__ = ('terms',)

    def __init__(self, terms=()):
        self.terms = tuple(normalize(terms))

    @classmethod
    def identity(cls):
        """The empty word.
        """
        return cls()

    @classmethod
    def generator(cls, symbol):
        """The word consisting of a single generator.
        """
        return cls([(symbol, 1)])

    @classmethod
    def _reduced(cls, terms):
        word = cls.__new__(cls)
        word.terms = tuple(terms)
        return word

    def is_identity(self):
        return not self.terms

    def times(self, other):
        return Word(self.terms + other.terms)

    def inverse(self):
        # the inverse of a reduced word is reduced
        return Word._reduced((s, -e) for s, e in reversed(self.terms))

    def length(self):
        """Total number of letters, counting exponents.
        """
        return sum(abs(e) for s, e in self.terms)

    def __len__(self):
        return len(self.terms)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self):
        return hash(self.terms)

    def __repr__(self):
        return f'Word({list(self.terms)!r})'

    def __str__(self):
        if not self.terms:
            return 'Id'
        return ''.join(f'{s}^{e}' for s, e in self.terms)
