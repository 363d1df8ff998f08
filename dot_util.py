import logging
import os
import shutil
import subprocess
import sys

from dbg_errors import DotNotFoundError

logger = logging.getLogger('bcalm2dot').getChild(__name__)

# Tried in order when `dot` is not on PATH: (file that must exist, command).
FALLBACK_COMMANDS = {
    'darwin': (('/usr/local/bin/env', '/usr/local/bin/env dot'),
               ('/usr/local/bin/dot', '/usr/local/bin/dot')),
    'linux': (('/usr/bin/env', '/usr/bin/env dot'),
              ('/usr/bin/dot', '/usr/bin/dot')),
}


def find_dot(platform=None):
    """Return the command used to run Graphviz dot on this platform."""
    platform = platform or sys.platform
    names = ('dot.exe', 'dot') if platform.startswith('win') else ('dot',)
    for name in names:
        if shutil.which(name):
            return name
    for prefix, fallbacks in FALLBACK_COMMANDS.items():
        if not platform.startswith(prefix):
            continue
        for path, command in fallbacks:
            if os.path.exists(path):
                return command
    raise DotNotFoundError()


def run_dot(dot_path, dot_file, dot_format, options=()):
    """
    Render `dot_file` next to itself, dot names the output `<dot_file>.<format>`.
    Arguments:
        dot_path(str): command to run dot, may hold extra words (`/usr/bin/env dot`).
        dot_file(str): a DOT file, completely written.
        dot_format(str): a dot output format, i.e. svg, png, pdf.
        options(list[str]): passed to dot as is.
    """
    command = dot_path.split() + ['-O'] + list(options) + ['-T{}'.format(dot_format), dot_file]
    logger.info('Running: %s', ' '.join(command))
    subprocess.run(command, check=True)
