import enum
from collections import namedtuple

from nucleotide import reverse_complement


class Orientation(enum.Enum):

    FORWARD = '+'
    REVERSE = '-'

    @classmethod
    def from_sign(cls, sign):
        return cls(sign)

    @property
    def sign(self):
        return self.value


class Node:

    """de Bruijn graph node, one BCALM unitig."""
    def __init__(self, seq, counts):
        """
        Initialize a node.
        Arguments:
            seq(str): the sequence of the unitig.
            counts(list[int]): abundance counts, may be empty.
        """
        self.seq = seq
        self.complement = reverse_complement(seq)
        self.counts = list(counts)
        self.orientation = Orientation.FORWARD

    def __str__(self):
        return "{{{}{}, {}}}".format(self.seq, self.orientation.sign, self.counts)

    def __repr__(self):
        return self.__str__()

    @property
    def length(self):
        return len(self.seq)

    @property
    def is_forward(self):
        return self.orientation is Orientation.FORWARD

    def set_dir(self, sign):
        self.orientation = Orientation.from_sign(sign)

    def is_dir(self, sign):
        return self.orientation.sign == sign


# `source` and `target` are indexes into Graph.nodes.
Edge = namedtuple('Edge', ['source', 'target', 'start', 'end'])


class Graph:

    def __init__(self):
        self.nodes = []
        self.edges = []

    def __len__(self):
        return len(self.nodes)

    def append(self, seq, counts=()):
        """Add a node built from `seq`, return its index.

        The node is built before it is stored, so a sequence with an unknown
        base leaves the graph untouched.
        """
        node = Node(seq, counts)
        self.nodes.append(node)
        return len(self.nodes) - 1

    def add_link(self, start, target, end):
        """Link the last appended node to node `target`.
        Arguments:
            start(str): '+' or '-', side of the last appended node.
            target(int): index of the other node.
            end(str): '+' or '-', side of the target node.
        Return:
            Edge or None: None when the link is a self-loop.
        """
        if not self.nodes:
            raise ValueError('Cannot add a link before any node.')
        source = len(self.nodes) - 1
        if source == target:
            return None
        edge = Edge(source, target, start, end)
        self.edges.append(edge)
        return edge

    def is_eligible(self, edge):
        return self.nodes[edge.source].is_dir(edge.start)

    def eligible_edges(self):
        return [edge for edge in self.edges if self.is_eligible(edge)]
