import pytest
from alignedit.structure import dot_bracket, resolve


@pytest.fixture(scope="module")
def structure():
    """
    A long structure of nested stems with pseudoknots.
    """
    element = "((((..[[[..))))..<<..]]]..>>.."
    return element * 1000


@pytest.mark.benchmark
def benchmark_resolve(structure):
    resolve(structure)


@pytest.mark.benchmark
def benchmark_dot_bracket(structure):
    table, _ = resolve(structure)
    dot_bracket(table)
