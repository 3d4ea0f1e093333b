import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'byteorder_pack.api',
    'byteorder_pack.byte_order',
    'byteorder_pack.compound_encoding.array',
    'byteorder_pack.compound_encoding.tuple',
    'byteorder_pack.encoding.bool',
    'byteorder_pack.encoding.float',
    'byteorder_pack.encoding.int',
    'byteorder_pack.utils.dict',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
