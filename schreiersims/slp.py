"""
Straight-line programs (SLPs) record the structure of a calculation instead
of carrying it out.

Forming products of words during the construction of a stabilizer chain
makes them grow exponentially with the depth of the chain. An SLP product or
inverse only allocates a single node, whatever the size of the word it
stands for. When the actual value is needed, a morphism maps the generators
of the SLP to elements of some other group, usually a free group, and the
tree is evaluated there.
"""

from dataclasses import dataclass

from .free import Word


class MissingImage(KeyError):
    pass


class SLP:
    """Base class of the SLP expression nodes.

    Nodes are immutable. Equality is structural, no attempt is made to
    recognize algebraically equal trees, so only a literal Identity node is
    the identity. Comparing, hashing and printing walk the tree with an
    explicit stack, like `evaluate`, so they work for trees of any depth.
    """
    def is_identity(self):
        return False

    def times(self, other):
        return Product(self, other)

    def inverse(self):
        return Inverse(self)

    def transform(self, morphism):
        """Evaluate this SLP using the generator images of morphism.

        Shared sub-trees are evaluated once.
        """
        return evaluate(self, morphism.transform, morphism.identity)

    def __eq__(self, other):
        if not isinstance(other, SLP):
            return NotImplemented
        seen = set()
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b or (id(a), id(b)) in seen:
                continue
            seen.add((id(a), id(b)))
            if type(a) is not type(b):
                return False
            ha, hb = a.__dict__.get('_hash'), b.__dict__.get('_hash')
            if ha is not None and hb is not None and ha != hb:
                return False
            label_a, children_a = _parts(a)
            label_b, children_b = _parts(b)
            if label_a != label_b:
                return False
            stack.extend(zip(reversed(children_a), reversed(children_b)))
        return True

    def __hash__(self):
        stack = [self]
        while stack:
            top = stack[-1]
            if '_hash' in top.__dict__:
                stack.pop()
                continue
            label, children = _parts(top)
            missing = [c for c in children if '_hash' not in c.__dict__]
            if missing:
                stack.extend(missing)
                continue
            h = hash((type(top).__name__, label,
                      tuple(c.__dict__['_hash'] for c in children)))
            # frozen nodes, the cache is not part of the value
            object.__setattr__(top, '_hash', h)
            stack.pop()
        return self.__dict__['_hash']

    def __repr__(self):
        return _render(self, _format_repr)

    def __str__(self):
        return _render(self, _format)


@dataclass(frozen=True, eq=False, repr=False)
class Identity(SLP):
    def is_identity(self):
        return True


@dataclass(frozen=True, eq=False, repr=False)
class Generator(SLP):
    index: int


@dataclass(frozen=True, eq=False, repr=False)
class Product(SLP):
    left: SLP
    right: SLP


@dataclass(frozen=True, eq=False, repr=False)
class Inverse(SLP):
    term: SLP


def _parts(node):
    """Return the generator index (or None) and the children of a node.
    """
    if isinstance(node, Generator):
        return node.index, ()
    elif isinstance(node, Product):
        return None, (node.left, node.right)
    elif isinstance(node, Inverse):
        return None, (node.term,)
    elif isinstance(node, Identity):
        return None, ()
    raise TypeError(f'not an SLP node: {type(node).__name__}')


def _format(node, label, parts):
    if isinstance(node, Identity):
        return 'Id'
    elif isinstance(node, Generator):
        return f'G_{label}'
    elif isinstance(node, Product):
        return f'({parts[0][1]}) * ({parts[1][1]})'
    return f'({parts[0][1]})^-1'


def _format_repr(node, label, parts):
    args = [f'index={label!r}'] if label is not None else []
    args.extend(f'{name}={part}' for name, part in parts)
    return f'{type(node).__name__}({", ".join(args)})'


_FIELDS = {Product: ('left', 'right'), Inverse: ('term',)}


def _render(node, fmt):
    """Build a string bottom up, fmt gets the node, its label and the
    (field name, rendered child) pairs.
    """
    done = {}
    stack = [node]
    while stack:
        top = stack[-1]
        if id(top) in done:
            stack.pop()
            continue
        label, children = _parts(top)
        missing = [c for c in children if id(c) not in done]
        if missing:
            stack.extend(missing)
            continue
        names = _FIELDS.get(type(top), ())
        parts = [(name, done[id(c)]) for name, c in zip(names, children)]
        done[id(top)] = fmt(top, label, parts)
        stack.pop()
    return done[id(node)]


def evaluate(node, generator_image, identity):
    """Evaluate an SLP tree bottom up.

    generator_image is called with each Generator node, identity is used for
    Identity nodes. Results are cached per node object, and the walk uses an
    explicit stack so deep trees do not run into the recursion limit.
    """
    done = {}
    stack = [node]
    while stack:
        top = stack[-1]
        key = id(top)
        if key in done:
            stack.pop()
            continue
        if isinstance(top, Identity):
            done[key] = identity
        elif isinstance(top, Generator):
            done[key] = generator_image(top)
        elif isinstance(top, Product):
            left, right = id(top.left), id(top.right)
            if left not in done:
                stack.append(top.left)
                continue
            if right not in done:
                stack.append(top.right)
                continue
            done[key] = done[left].times(done[right])
        elif isinstance(top, Inverse):
            term = id(top.term)
            if term not in done:
                stack.append(top.term)
                continue
            done[key] = done[term].inverse()
        else:
            raise TypeError(f'not an SLP node: {top!r}')
        stack.pop()
    return done[id(node)]


class Morphism:
    """Maps the generators of one group to elements of another group.

    Only generators are looked up. Extending the map to products and
    inverses is done by `SLP.transform`.
    """

    def __init__(self, generator_images, identity=None):
        self.generator_images = {
            _tag(g): h for g, h in dict(generator_images).items()}
        self.identity = Word.identity() if identity is None else identity

    def transform(self, generator):
        """Return the image of a single generator.

        Raises MissingImage if the generator has no registered image.
        """
        tag = _tag(generator)
        try:
            return self.generator_images[tag]
        except KeyError:
            raise MissingImage(f'no image for generator {tag!r}') from None

    image = transform

    def __contains__(self, generator):
        return _tag(generator) in self.generator_images

    def __repr__(self):
        return f'Morphism({self.generator_images!r})'


def _tag(generator):
    if isinstance(generator, Generator):
        return generator.index
    return generator


def morphism(*pairs):
    """Build a morphism to the free group from a flat list of pairs.

    `morphism(0, 't', 1, 'r')` maps generator 0 to the word `t` and
    generator 1 to the word `r`.
    """
    if len(pairs) % 2:
        raise ValueError('expected an even number of arguments')
    return Morphism(
        {tag: Word.generator(symbol)
         for tag, symbol in zip(pairs[::2], pairs[1::2])})
