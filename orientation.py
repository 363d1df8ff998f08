import logging

from dbg_graph import Orientation

logger = logging.getLogger('bcalm2dot').getChild(__name__)


def resolve_orientation(graph):
    """
    Give every node of `graph` a direction from the link signs.

    Edges are visited once, in insertion order. An edge whose start sign
    matches its source node fixes the direction of its target, unless an
    earlier edge already fixed it. Nodes no edge reaches stay forward.
    Arguments:
        graph(dbg_graph.Graph): modified in place.
    Return:
        list[Orientation]: the orientation of each node, by index.
    """
    for node in graph.nodes:
        node.orientation = Orientation.FORWARD
    fixed = [False] * len(graph.nodes)
    for edge in graph.edges:
        source = graph.nodes[edge.source]
        if not source.is_dir(edge.start) or fixed[edge.target]:
            continue
        graph.nodes[edge.target].set_dir(edge.end)
        fixed[edge.source] = True
        fixed[edge.target] = True
    num_reverse = sum(1 for node in graph.nodes if not node.is_forward)
    logger.info('Resolved orientation: %d forward, %d reverse.',
                len(graph.nodes) - num_reverse, num_reverse)
    return [node.orientation for node in graph.nodes]
