"""
Convert BCALM de Bruijn graphs to DOT diagrams.
"""

import argparse
import logging
import os
import subprocess
import sys

import bcalm_file
import dot_file
import dot_util
from dbg_errors import Bcalm2DotError
from orientation import resolve_orientation

logger = logging.getLogger('bcalm2dot')

DOT_EXTENSION = '.gv'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Global variable.
_handler = None


def default_output_file(input_file):
    return os.path.splitext(input_file)[0] + DOT_EXTENSION


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Convert BCALM de Bruijn graphs to DOT diagrams.')

    parser.add_argument('input_file', nargs='?',
        metavar='INPUT', help='BCALM FASTA file to convert. If not provided the file will be read from stdin.')

    parser.add_argument('-o', dest='output_file',
        metavar='FILE', help='Output DOT file. If not provided the output file will depend on the input one.')

    parser.add_argument('-d', '--dot', dest='dot_format',
        metavar='TYPE', help='Invoke dot to generate the graph with the specified format type at the end.')

    parser.add_argument('--no-orientation', dest='oriented', action='store_false',
        help='Draw every node forward and every link, without orientation.')

    parser.add_argument('--symbols', action='store_true',
        help='Label edge ends with the link signs.')

    parser.add_argument('-l', '--log', dest='log_level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], default='WARNING',
        metavar='LOG_LEVEL', help='Set the logging level.')

    # Anything argparse does not know goes to dot, i.e. -Gdpi=300.
    args, dot_options = parser.parse_known_args(argv)
    args.dot_options = dot_options

    # Defaulting arguments.
    if args.input_file and not args.output_file:
        args.output_file = default_output_file(args.input_file)
    if args.dot_format and not args.output_file:
        parser.error('-d/--dot needs an output file, give INPUT or -o.')
    return args


def set_logger(log_level):
    global _handler
    # Module loggers are children of `logger`.
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setLevel(getattr(logging, log_level))
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, log_level))


def convert(input_file, output_file, oriented=True, symbols=False):
    """
    Read a BCALM file, write its DOT diagram.
    Arguments:
        input_file(str or None): None reads stdin.
        output_file(str or None): None writes stdout.
    """
    if input_file:
        graph = bcalm_file.read_file(input_file)
    else:
        graph = bcalm_file.build_graph(sys.stdin)
    if oriented:
        resolve_orientation(graph)

    if not output_file:
        dot_file.write_graph(graph, sys.stdout, oriented, symbols)
        return graph
    try:
        dot_file.write_graph(graph, output_file, oriented, symbols)
    except OSError:
        # A partial diagram is never kept.
        if os.path.exists(output_file):
            os.remove(output_file)
        raise
    return graph


def main(argv=None):
    args = parse_args(argv)
    set_logger(args.log_level)
    logger.info('Input command: %s', ' '.join(sys.argv))

    try:
        dot_path = None
        if args.dot_format:
            dot_path = os.environ.get('DOT_PATH') or dot_util.find_dot()
        convert(args.input_file, args.output_file, args.oriented, args.symbols)
        if args.output_file:
            logger.info('DOT file written: %s', args.output_file)
        if args.dot_format:
            dot_util.run_dot(dot_path, args.output_file, args.dot_format, args.dot_options)
    except (Bcalm2DotError, OSError, subprocess.CalledProcessError) as error:
        logger.error('%s', error)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
