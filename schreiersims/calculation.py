"""
A shared store of straight-line program nodes.

An `SLPFactory` keeps every node it ever created in an append-only table and
hands out `Expression` handles, which are just an index into that table.
Structurally identical nodes are interned, so building the same product twice
yields the same handle. Concrete values are computed on demand and cached per
node, so an intermediate result shared by many expressions is only
calculated once.

Registering nodes and filling the cache happen under a lock, which allows
sharing one factory between threads.
"""

import threading

from .element import identity_of

IDENTITY = 'id'
GENERATOR = 'gen'
PRODUCT = 'mul'
INVERSE = 'inv'


class SLPFactory:
    """Owner of the node table, the generators and the evaluation cache.
    """

    def __init__(self, identity=None):
        self._identity = identity
        self._lock = threading.Lock()
        self.nodes = []
        self.generators = []
        self._interned = {}
        self._cache = {}

    def __len__(self):
        return len(self.nodes)

    def register(self, node):
        """Add a node to the table and return its id.

        A node that is already present is not added again.
        """
        with self._lock:
            node_id = self._interned.get(node)
            if node_id is None:
                node_id = len(self.nodes)
                self.nodes.append(node)
                self._interned[node] = node_id
            return node_id

    def generator(self, element):
        """Register a concrete generator and return an expression for it.
        """
        with self._lock:
            index = len(self.generators)
            self.generators.append(element)
        return Expression(self, self.register((GENERATOR, index)))

    def identity(self):
        return Expression(self, self.register((IDENTITY,)))

    def identity_value(self):
        if self._identity is not None:
            return self._identity
        if not self.generators:
            raise ValueError('no identity given and no generators registered')
        return identity_of(self.generators)

    def evaluate(self, node_id):
        """Return the value of a node, calculating missing values bottom up.
        """
        cached = self._cache.get(node_id)
        if cached is not None:
            return cached

        with self._lock:
            values = _walk(
                self.nodes, node_id, self._cache,
                lambda index: self.generators[index],
                self.identity_value)
            self._cache.update(values)
            return self._cache[node_id]

    def transform(self, node_id, morphism):
        """Map a node into another group according to morphism.

        Unlike `evaluate` nothing is cached, the result depends on morphism.
        """
        return _walk(
            self.nodes, node_id, {},
            morphism.transform,
            lambda: morphism.identity)[node_id]


def _walk(nodes, node_id, known, generator_value, identity_value):
    """Calculate the value of node_id and of all nodes it depends on.

    Values found in known are reused. Returns the newly calculated values.
    """
    done = {}

    def value(i):
        return known[i] if i in known else done.get(i)

    stack = [node_id]
    while stack:
        top = stack[-1]
        if value(top) is not None:
            stack.pop()
            continue
        node = nodes[top]
        kind = node[0]
        if kind == IDENTITY:
            done[top] = identity_value()
        elif kind == GENERATOR:
            done[top] = generator_value(node[1])
        elif kind == PRODUCT:
            missing = [i for i in node[1:] if value(i) is None]
            if missing:
                stack.extend(reversed(missing))
                continue
            done[top] = value(node[1]).times(value(node[2]))
        elif kind == INVERSE:
            if value(node[1]) is None:
                stack.append(node[1])
                continue
            done[top] = value(node[1]).inverse()
        else:
            raise ValueError(f'unknown node kind {kind!r}')
        stack.pop()
    return done


class Expression:
    """Handle of a node in an `SLPFactory`.

    Expressions are group elements: products and inverses register new nodes
    without calculating anything. They also act on points through their
    value, so a `Group` can be built from them directly.
    """
    __slots__ = ('factory', 'id')

    def __init__(self, factory, node_id):
        self.factory = factory
        self.id = node_id

    @property
    def node(self):
        return self.factory.nodes[self.id]

    def _check(self, other):
        if other.factory is not self.factory:
            raise ValueError('expressions belong to different factories')

    def is_identity(self):
        """True for the Identity node and for expressions whose value is the
        identity.
        """
        if self.node[0] == IDENTITY:
            return True
        return self.evaluate().is_identity()

    def times(self, other):
        self._check(other)
        return Expression(
            self.factory, self.factory.register((PRODUCT, self.id, other.id)))

    def inverse(self):
        return Expression(
            self.factory, self.factory.register((INVERSE, self.id)))

    def evaluate(self):
        return self.factory.evaluate(self.id)

    def act_on(self, point):
        return self.evaluate().act_on(point)

    def transform(self, morphism):
        """Expand this expression using the generator images of morphism.
        """
        return self.factory.transform(self.id, morphism)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return self.factory is other.factory and self.id == other.id

    def __hash__(self):
        return hash((id(self.factory), self.id))

    def __repr__(self):
        return f'Expression({self.id}: {self.node!r})'

    def __str__(self):
        kind = self.node[0]
        if kind == IDENTITY:
            return 'Id'
        elif kind == GENERATOR:
            return f'G_{self.node[1]}'
        elif kind == PRODUCT:
            # operands are referred to by node id
            return f'E_{self.node[1]} * E_{self.node[2]}'
        return f'(E_{self.node[1]})^-1'
