# -*- coding: utf-8 -*-

"""Build protein-protein interaction graphs from SPARQL result rows.

Rows are pairs of protein labels as returned by the interaction query.
The same pair can show up more than once and in either orientation, so
nodes are keyed on their label and edges on their unordered pair of labels.
"""

import logging
from typing import Any, Iterable, List, Mapping, NamedTuple, Sequence, Tuple

import networkx as nx

__all__ = [
    'Node',
    'Edge',
    'MalformedRowError',
    'build_graph',
    'canonical_pair',
    'canonical_pair_key',
    'iter_label_pairs',
    'to_networkx',
]

logger = logging.getLogger(__name__)

LabelPair = Tuple[str, str]


class Node(NamedTuple):
    """A protein, identified by its label."""

    id: str
    label: str

    @classmethod
    def from_label(cls, label: str) -> 'Node':
        """Make a node whose identifier is its label."""
        return cls(id=label, label=label)


class Edge(NamedTuple):
    """An undirected interaction between two proteins.

    The orientation is the one of the first row the pair was seen in.
    """

    source: str
    target: str


class MalformedRowError(ValueError):
    """Raised when a result row does not hold two string labels."""

    def __init__(self, index: int, row: Any, reason: str):
        self.index = index
        self.row = row
        self.reason = reason
        super().__init__(f'row {index} is malformed ({reason}): {row!r}')


def canonical_pair(a: str, b: str) -> LabelPair:
    """Get the key shared by ``(a, b)`` and ``(b, a)``."""
    return (a, b) if a <= b else (b, a)


def canonical_pair_key(a: str, b: str, sep: str = '__') -> str:
    """Get a string key shared by ``(a, b)`` and ``(b, a)``.

    This is the key vis-network style front ends use. Two different pairs
    collide when a label contains ``sep``, e.g. ``('x__y', 'z')`` and
    ``('x', 'y__z')``. :func:`build_graph` keys on :func:`canonical_pair`
    instead.
    """
    return sep.join(canonical_pair(a, b))


def _validate_rows(rows: Iterable[Sequence[Any]]) -> List[LabelPair]:
    rv = []
    for index, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise MalformedRowError(index, row, 'not a pair')
        if len(row) != 2:
            raise MalformedRowError(index, row, f'expected 2 labels, got {len(row)}')
        a, b = row
        for label in (a, b):
            if label is None:
                raise MalformedRowError(index, row, 'missing label')
            if not isinstance(label, str):
                raise MalformedRowError(index, row, f'label is {type(label).__name__}, not str')
        rv.append((a, b))
    return rv


def build_graph(rows: Iterable[Sequence[str]]) -> Tuple[List[Node], List[Edge]]:
    """Build the deduplicated nodes and undirected edges for the given label pairs.

    :param rows: An iterable of ``(protein_a, protein_b)`` label pairs
    :returns: A pair of the nodes and the edges, both in first-seen order
    :raises MalformedRowError: if any row is not a pair of strings. Nothing
        is built in that case.

    Self pairs like ``('A', 'A')`` are kept as a single node with a self edge,
    since the interaction query already filters them out.

    >>> nodes, edges = build_graph([('A', 'B'), ('B', 'A'), ('A', 'C')])
    >>> [node.id for node in nodes]
    ['A', 'B', 'C']
    >>> edges
    [Edge(source='A', target='B'), Edge(source='A', target='C')]
    """
    pairs = _validate_rows(rows)

    nodes = {}
    edges = {}
    for a, b in pairs:
        for label in (a, b):
            if label not in nodes:
                nodes[label] = Node.from_label(label)
        key = canonical_pair(a, b)
        if key not in edges:
            edges[key] = Edge(source=a, target=b)

    logger.debug('built graph with %d nodes and %d edges from %d rows', len(nodes), len(edges), len(pairs))
    return list(nodes.values()), list(edges.values())


def iter_label_pairs(
    bindings: Iterable[Mapping[str, Mapping[str, str]]],
    source: str = 'p1Label',
    target: str = 'p2Label',
) -> Iterable[LabelPair]:
    """Yield label pairs from SPARQL JSON bindings.

    :raises MalformedRowError: if a binding is missing either variable
    """
    for index, binding in enumerate(bindings):
        try:
            yield binding[source]['value'], binding[target]['value']
        except (KeyError, TypeError):
            raise MalformedRowError(index, binding, f'missing ?{source} or ?{target}') from None


def to_networkx(nodes: Iterable[Node], edges: Iterable[Edge]) -> nx.Graph:
    """Convert built nodes and edges to an undirected graph."""
    graph = nx.Graph()
    for node in nodes:
        graph.add_node(node.id, label=node.label)
    graph.add_edges_from(edges)
    return graph
