import logging

import pytest

from qmc_minimizer import Term


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("qmc_minimizer")
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def scenario_a():
    """Minterms and don't-cares of the classic 4-input textbook example."""
    minterms = [Term.from_integer(n) for n in (4, 8, 10, 11, 12, 15)]
    dont_cares = [Term.from_integer(n) for n in (9, 14)]
    return minterms, dont_cares


@pytest.fixture
def scenario_b():
    minterms = [Term.from_integer(n) for n in (1, 2, 9, 11, 12, 14, 15)]
    return minterms, []
