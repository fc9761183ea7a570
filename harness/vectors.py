from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import yaml

from ufixed64.kernel import BINARY_OPERATIONS, OPERATIONS
from ufixed64.utils.math import parse_64x64, to_64x64_round_down, to_actual_by_64x64


@dataclass
class VectorCase:
    function: str
    args: Tuple[int, ...]
    actual_args: Tuple[str, ...] = field(default_factory=tuple)
    expected: Optional[int] = None
    error: Optional[str] = None
    any_error: bool = False

    @property
    def expects_error(self):
        return self.any_error or self.error is not None


def _argument(raw, name):
    """One argument either as a decimal (``name``) or as a raw magnitude (``name_64x64``)."""
    if raw.get(f'{name}_64x64') is not None:
        x_64x64 = parse_64x64(raw[f'{name}_64x64'])
        return x_64x64, str(to_actual_by_64x64(x_64x64))
    if raw.get(name) is not None:
        x = str(raw[name])
        return to_64x64_round_down(x), x
    raise ValueError(f"Case {raw} has neither '{name}' nor '{name}_64x64'")


def parse_case(function, raw):
    if function not in OPERATIONS:
        raise ValueError(f"Unknown function: {function}")

    names = ('base', 'exp') if function in BINARY_OPERATIONS else ('input',)
    parsed = [_argument(raw, name) for name in names]
    case = VectorCase(
        function=function,
        args=tuple(x_64x64 for x_64x64, _ in parsed),
        actual_args=tuple(x for _, x in parsed),
    )

    error = raw.get('error')
    if error is True:
        case.any_error = True
    elif error:
        case.error = str(error)
    elif raw.get('expected_64x64') is not None:
        case.expected = parse_64x64(raw['expected_64x64'])
    elif raw.get('expected') is not None:
        case.expected = to_64x64_round_down(str(raw['expected']))
    else:
        raise ValueError(f"Case {raw} for {function} has no expected outcome")
    return case


def parse_vectors(data) -> List[VectorCase]:
    cases = []
    for function, raw_cases in (data or {}).items():
        for raw in raw_cases or []:
            cases.append(parse_case(function, raw))
    return cases


def load_vectors(path):
    with open(path, 'r') as file:
        return parse_vectors(yaml.safe_load(file))
