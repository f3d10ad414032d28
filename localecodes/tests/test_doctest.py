"""
Run the examples in the docstrings as tests.
"""
import doctest

import pytest

import localecodes
from localecodes import names, registry, storage, tag_parser


@pytest.mark.parametrize('module', [localecodes, names, registry, storage, tag_parser])
def test_doctests(module):
    failures, tests = doctest.testmod(module)
    assert tests > 0
    assert failures == 0
