import logging

logger = logging.getLogger('bcalm2dot').getChild(__name__)

GRAPH_NAME = 'genome'
RANKDIR = 'LR'
ORIENTED_SHAPE = 'cds'
PLAIN_SHAPE = 'box'
NODE_MARGIN = '0.2'


class DotFile:

    """Writer of an undirected Graphviz graph."""
    def __init__(self, output, name=GRAPH_NAME):
        """
        Arguments:
            output(str or file): a path, or an open text stream that is left open.
            name(str): the graph name.
        """
        self.output = output
        self.name = name
        self._f = None
        self._own_file = False

    def __enter__(self):
        if hasattr(self.output, 'write'):
            self._f = self.output
        else:
            self._f = open(self.output, 'w')
            self._own_file = True
        self._f.write('graph {} {{\n'.format(self.name))
        self._f.write('\trankdir="{}";\n'.format(RANKDIR))
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self._f.write('}\n')
        if self._own_file:
            self._f.close()
        else:
            self._f.flush()

    def write(self, string):
        self._f.write(string)

    def add_attributes(self, attribute_dict):
        self._f.write(', '.join(('{}="{}"'.format(key, value) for key, value in attribute_dict.items())))

    def new_line(self):
        self._f.write('\n')

    def add_node(self, node_name, attribute_dict=None):
        self._f.write('\t{}'.format(node_name))
        if attribute_dict:
            self.write(' [')
            self.add_attributes(attribute_dict)
            self.write(']')
        self.write(';')
        self.new_line()

    def add_edge(self, node_a, node_b, attribute_dict=None):
        self._f.write('\t{} -- {}'.format(node_a, node_b))
        if attribute_dict:
            self.write(' [')
            self.add_attributes(attribute_dict)
            self.write(']')
        self.write(';')
        self.new_line()


def node_label(node):
    # Graphviz reads `\n` inside a quoted label as a line break.
    return '\\n'.join((node.seq, '({})'.format(node.complement), str(node.counts)))


def node_attributes(node, oriented):
    attributes = {'label': node_label(node)}
    if oriented:
        attributes['shape'] = ORIENTED_SHAPE
        if not node.is_forward:
            attributes['orientation'] = '180'
    else:
        attributes['shape'] = PLAIN_SHAPE
    attributes['margin'] = NODE_MARGIN
    return attributes


def write_graph(graph, output, oriented=True, symbols=False):
    """
    Write `graph` in DOT format.
    Arguments:
        graph(dbg_graph.Graph): a graph, already oriented if `oriented`.
        output(str or file): where to write.
        oriented(bool): draw nodes by direction and keep one edge per link.
        symbols(bool): label both ends of each edge with its link signs.
    Return:
        int: number of edges written.
    """
    num_edges = 0
    with DotFile(output) as fout:
        # Write nodes.
        for index, node in enumerate(graph.nodes):
            fout.add_node(index, node_attributes(node, oriented))
        fout.new_line()

        # Write edges.
        for edge in graph.edges:
            if oriented:
                if not graph.is_eligible(edge):
                    continue
                node_a, node_b = '{}:e'.format(edge.source), '{}:w'.format(edge.target)
            else:
                node_a, node_b = edge.source, edge.target
            attributes = {}
            if symbols:
                attributes = {'taillabel': edge.start, 'headlabel': edge.end}
            fout.add_edge(node_a, node_b, attributes)
            num_edges += 1
    logger.info('Wrote %d nodes and %d edges.', len(graph.nodes), num_edges)
    return num_edges
