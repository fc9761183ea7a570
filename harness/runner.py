import logging
from dataclasses import dataclass, asdict
from typing import Optional

import numpy as np
import pandas as pd

from ufixed64.errors import FixedPointError
from ufixed64.kernel import FixedPointKernel
from .compare import DEFAULT_TOLERANCE, relative_error, within_tolerance
from .logger import get_logger


@dataclass
class CaseResult:
    function: str
    case: int
    args: str
    x_64x64: str
    expected: str
    actual: Optional[str]
    error: Optional[str]
    relative_error: float
    passed: bool


class VectorRunner:

    def __init__(self, kernel=None, tolerance=DEFAULT_TOLERANCE, log_level='INFO'):
        self.tolerance = tolerance
        level = getattr(logging, log_level) if isinstance(log_level, str) else log_level
        self.logger = get_logger(self.__class__.__name__, level)
        # The kernel logs under its package name; give it the same handler setup
        get_logger('ufixed64', level)
        self.kernel = kernel or FixedPointKernel()

    def run_case(self, index, case):
        self.logger.debug(f"{case.function} #{index}: args={case.actual_args} x_64x64={case.args}")
        actual = None
        error = None
        try:
            actual = self.kernel.call(case.function, *case.args)
        except FixedPointError as e:
            error = str(e)

        if case.expects_error:
            expected = case.error if case.error is not None else 'any error'
            passed = error is not None and (case.error is None or error == case.error)
            rel = 0.0 if passed else float('inf')
        elif error is not None:
            expected = str(case.expected)
            passed = False
            rel = float('inf')
        else:
            expected = str(case.expected)
            rel = relative_error(actual, case.expected)
            passed = within_tolerance(actual, case.expected, self.tolerance)

        if passed:
            self.logger.info(f"Success: {case.function} #{index} actual is {actual if error is None else error}; expected is {expected}")
        else:
            self.logger.error(f"Mismatch: {case.function} #{index} actual is {actual if error is None else error}; expected is {expected}")

        return CaseResult(
            function=case.function,
            case=index,
            args=', '.join(case.actual_args),
            x_64x64=', '.join(str(x) for x in case.args),
            expected=expected,
            actual=None if actual is None else str(actual),
            error=error,
            relative_error=rel,
            passed=passed,
        )

    def run(self, cases):
        results = []
        counters = {}
        for case in cases:
            index = counters.get(case.function, 0)
            counters[case.function] = index + 1
            results.append(asdict(self.run_case(index, case)))
        return pd.DataFrame(results, columns=list(CaseResult.__dataclass_fields__))


def summarize(results):
    """Per-function counts and the worst relative error among cases that returned a value."""
    if results.empty:
        return pd.DataFrame(columns=['function', 'cases', 'passed', 'failed', 'max_relative_error'])

    finite = results['relative_error'].replace([np.inf, -np.inf], np.nan)
    grouped = results.assign(finite_error=finite).groupby('function', sort=False)
    summary = pd.DataFrame({
        'cases': grouped.size(),
        'passed': grouped['passed'].sum().astype(int),
        'max_relative_error': grouped['finite_error'].max().fillna(0.0),
    })
    summary['failed'] = summary['cases'] - summary['passed']
    summary = summary.reset_index()
    return summary[['function', 'cases', 'passed', 'failed', 'max_relative_error']]
