import logging

import pytest

from conftest import q
from harness import VectorRunner
from ufixed64 import OPERATIONS, FixedPointKernel
from ufixed64.errors import MustBeLessThanTwo
from ufixed64.utils.math import ONE


def test_exposes_every_operation(kernel):
    assert kernel.operations() == [
        'normalized_exponent',
        'log_base_2_of_fraction',
        'log_base_2',
        'log_base_10',
        'log_base_1_0001',
        'log_base_0_5',
        'pow_base_2_of_fraction',
        'pow_base_2',
        'pow',
        'sqrt',
    ]
    assert set(kernel.operations()) == set(OPERATIONS)


def test_named_attributes(kernel):
    assert kernel.normalized_exponent(q("4")) == 2
    assert kernel.pow(q("2"), q("4")) == 16 * ONE
    assert kernel.sqrt(4 * ONE) == 2 * ONE


def test_call_dispatch(kernel):
    assert kernel.call('log_base_2', 8 * ONE) == 3 * ONE
    assert kernel.arity('pow') == 2
    assert kernel.arity('sqrt') == 1


def test_unknown_operation(kernel):
    with pytest.raises(ValueError):
        kernel.call('exp', ONE)
    with pytest.raises(AttributeError):
        kernel.exp


def test_wrong_arity(kernel):
    with pytest.raises(TypeError):
        kernel.call('pow', ONE)


def test_failures_are_logged_and_reraised(caplog):
    kernel = FixedPointKernel()
    with caplog.at_level(logging.WARNING, logger='ufixed64.kernel'):
        with pytest.raises(MustBeLessThanTwo):
            kernel.log_base_2_of_fraction(2 * ONE)
    assert "MustBeLessThanTwo(36893488147419103232)" in caplog.text


def test_calls_are_logged_at_debug(kernel, caplog):
    with caplog.at_level(logging.DEBUG, logger='ufixed64.kernel'):
        kernel.sqrt(4 * ONE)
    assert str(2 * ONE) in caplog.text


def test_instances_leave_shared_logger_level_alone():
    shared = logging.getLogger('ufixed64.kernel')
    before = shared.level
    FixedPointKernel()
    FixedPointKernel()
    assert shared.level == before


def test_runner_sets_kernel_log_level_once(caplog):
    runner = VectorRunner(log_level='ERROR')
    assert logging.getLogger('ufixed64').level == logging.ERROR
    with caplog.at_level(logging.NOTSET):
        with pytest.raises(MustBeLessThanTwo):
            runner.kernel.log_base_2_of_fraction(2 * ONE)
    assert "MustBeLessThanTwo" not in caplog.text
