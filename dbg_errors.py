class Bcalm2DotError(Exception):
    """Base class of every error raised while converting a BCALM file."""


class BcalmSyntaxError(Bcalm2DotError):

    def __init__(self, line_number, line):
        """
        Arguments:
            line_number(int): 1-based number of the offending line.
            line(str): the offending line, without its newline.
        """
        self.line_number = line_number
        self.line = line
        super().__init__('Syntax error at line {}: "{}"'.format(line_number, line))


class BcalmEncodingError(Bcalm2DotError):

    def __init__(self, line_number, reason):
        """
        Arguments:
            line_number(int): first line that could not be read, input is
                decoded in blocks so the bad byte may be further on.
            reason(str): the decoder message.
        """
        self.line_number = line_number
        self.reason = reason
        super().__init__('Cannot decode input at line {} or later: {}'.format(line_number, reason))


class UnknownNucleotideError(Bcalm2DotError):

    def __init__(self, sequence, line_number=None):
        self.sequence = sequence
        self.line_number = line_number
        super().__init__(sequence, line_number)

    def __str__(self):
        if len(self.sequence) == 1:
            message = "Unknown '{}' nucleotide".format(self.sequence)
        else:
            message = 'Unknown nucleotide into sequence "{}"'.format(self.sequence)
        if self.line_number is not None:
            message += ' at line {}'.format(self.line_number)
        return message


class MalformedCountError(Bcalm2DotError):

    def __init__(self, line_number, header):
        self.line_number = line_number
        self.header = header
        super().__init__('Malformed abundance counts at line {}: "{}"'.format(
            line_number, header))


class UnknownNodeError(Bcalm2DotError):

    def __init__(self, line_number, target, num_nodes):
        self.line_number = line_number
        self.target = target
        self.num_nodes = num_nodes
        super().__init__('Link at line {} points to node {}, but the graph has {} nodes'.format(
            line_number, target, num_nodes))


class DotNotFoundError(Bcalm2DotError):

    def __init__(self):
        super().__init__('dot executable not found. Please insert it into system PATH '
                         'or set the environment variable DOT_PATH')
