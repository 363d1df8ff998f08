from Bio.Seq import reverse_complement as _bio_reverse_complement

from dbg_errors import UnknownNucleotideError

COMPLEMENT = {'A': 'T', 'C': 'G', 'G': 'C', 'T': 'A'}


def complement(base):
    """Return the Watson-Crick complement of a single base."""
    try:
        return COMPLEMENT[base]
    except KeyError:
        raise UnknownNucleotideError(base) from None


def reverse_complement(seq):
    """
    Arguments:
        seq(str): a sequence over A, C, G, T.
    Return:
        str: the reverse complement of `seq`.
    Raise:
        UnknownNucleotideError: naming the whole `seq` if any base is unknown.
    """
    # Biopython happily complements IUPAC codes, so check the alphabet first.
    if not seq or any(base not in COMPLEMENT for base in seq):
        raise UnknownNucleotideError(seq)
    return _bio_reverse_complement(seq)
