import logging
import re
from collections import namedtuple

from dbg_graph import Graph
from dbg_errors import (BcalmEncodingError, BcalmSyntaxError, MalformedCountError,
                        UnknownNodeError, UnknownNucleotideError)

logger = logging.getLogger('bcalm2dot').getChild(__name__)

HEADER_MARK = '>'
COUNT_TAG = 'ab:Z:'
COUNT_RE = re.compile(r'ab:Z:(\d+(?: \d+)*)')
LINK_RE = re.compile(r'L:([+-]):(\d+):([+-])')

Link = namedtuple('Link', ['start', 'target', 'end'])
# `line_number` is the 1-based number of the sequence line.
Record = namedtuple('Record', ['seq', 'counts', 'links', 'line_number'])


def read_counts(header, line_number=None):
    """
    Example of `header` format:
        >0 LN:i:31 KC:i:12 km:f:1.0 ab:Z:3 2 1 L:+:1:- L:-:4:+
    Return:
        list[int]: [3, 2, 1], empty if there is no `ab:Z:` field.
    """
    match = COUNT_RE.search(header)
    if match is None:
        # A tag with no leading integer, i.e. `ab:Z:x4`.
        if COUNT_TAG in header:
            raise MalformedCountError(line_number, header)
        return []
    return [int(value) for value in match.group(1).split(' ')]


def _numbered_lines(lines):
    """Like enumerate(lines), a line that cannot be decoded is an error."""
    index = -1
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as error:
            raise BcalmEncodingError(index + 2, error.reason) from error
        index += 1
        yield index, line


def read_links(header):
    """
    Return:
        list[Link]: every `L:<sign>:<index>:<sign>` field of `header`, in order.
    """
    return [Link(start, int(target), end)
            for start, target, end in LINK_RE.findall(header)]


def read_records(lines):
    """
    Read (header, sequence) line pairs.
    Arguments:
        lines(iterable[str]): lines of a BCALM file, newlines are stripped.
    Yield:
        Record
    """
    header = None
    index = -1
    for index, line in _numbered_lines(lines):
        line = line.rstrip('\r\n')
        # Even lines are headers.
        if index % 2 == 0:
            if not line.startswith(HEADER_MARK):
                raise BcalmSyntaxError(index + 1, line)
            header = line
            continue
        # Two headers in a row.
        if line.startswith(HEADER_MARK):
            raise BcalmSyntaxError(index + 1, line)
        # `index` is the 1-based number of the header line.
        yield Record(line, read_counts(header, index), read_links(header), index + 1)
        header = None
    # A header without sequence at the end of the stream.
    if header is not None:
        raise BcalmSyntaxError(index + 1, header)


def build_graph(lines):
    """Build a dbg_graph.Graph from the lines of a BCALM file."""
    graph = Graph()
    link_lines = []
    for record in read_records(lines):
        try:
            node_index = graph.append(record.seq, record.counts)
        except UnknownNucleotideError as error:
            error.line_number = record.line_number
            raise
        logger.debug('Node %d: %d bp, counts %s, %d links.', node_index,
                     len(record.seq), record.counts, len(record.links))
        for link in record.links:
            if graph.add_link(*link) is not None:
                link_lines.append(record.line_number)
    for edge, line_number in zip(graph.edges, link_lines):
        if edge.target >= len(graph.nodes):
            raise UnknownNodeError(line_number - 1, edge.target, len(graph.nodes))
    logger.info('Loaded a de Bruijn graph, containing %d nodes and %d edges.',
                len(graph.nodes), len(graph.edges))
    return graph


def read_file(file_name):
    with open(file_name, encoding='utf-8') as fin:
        return build_graph(fin)
