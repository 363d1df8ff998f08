"""
Pytest configuration and shared fixtures.
"""

import pytest


EXAMPLE_BCALM = (
    ">1 ab:Z:5 L:+:1:-\n"
    "ACGT\n"
    ">0 ab:Z:3\n"
    "TTTT\n"
)


@pytest.fixture
def example_text():
    """Two unitigs linked once, from node 0 (+) to node 1 (-)."""
    return EXAMPLE_BCALM


@pytest.fixture
def example_lines():
    return EXAMPLE_BCALM.splitlines(keepends=True)


@pytest.fixture
def example_file(tmp_path):
    """The example graph written to a .fa file."""
    path = tmp_path / "unitigs.fa"
    path.write_text(EXAMPLE_BCALM)
    return path


@pytest.fixture
def chain_text():
    """A three node chain where every link is listed from both ends."""
    return (
        ">0 LN:i:5 KC:i:4 km:f:2.0 ab:Z:2 2 L:+:1:+\n"
        "AACCG\n"
        ">1 LN:i:5 KC:i:6 km:f:3.0 ab:Z:3 3 L:-:0:- L:+:2:-\n"
        "ACCGT\n"
        ">2 LN:i:5 KC:i:2 km:f:1.0 ab:Z:1 1 L:+:1:-\n"
        "CCGTA\n"
    )
