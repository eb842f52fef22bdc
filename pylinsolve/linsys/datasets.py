"""
Reference systems for examples and tests.

The three preset systems offered by the interactive solver front end.
The module-level arrays are read-only; load_example() hands out writable
copies.
"""

import numpy as np


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


# Example 1 (3x3) - unique solution x = [-3, 1, 2]
example_3x3_A = _frozen([
    [2.0, 1.0, 3.0],
    [4.0, 3.0, 5.0],
    [6.0, 5.0, 5.0],
])
example_3x3_b = _frozen([1.0, 1.0, -3.0])

# Example 2 (4x4) - unique solution, non-integer entries
example_4x4_A = _frozen([
    [2.0, -1.0, -3.0, 1.0],
    [1.0, 1.0, 1.0, -2.0],
    [3.0, 2.0, -3.0, -4.0],
    [-1.0, -4.0, 1.0, 1.0],
])
example_4x4_b = _frozen([9.0, 10.0, 6.0, 6.0])

# Inverse example (3x3, det = 1) - inverse is [[1, 0, 1], [3, 3, 4], [2, 2, 3]]
inverse_example_A = _frozen([
    [1.0, 2.0, -3.0],
    [-1.0, 1.0, -1.0],
    [0.0, -2.0, 3.0],
])
inverse_example_b = _frozen([5.0, 3.0, -1.0])


EXAMPLES = {
    'example_3x3': (example_3x3_A, example_3x3_b),
    'example_4x4': (example_4x4_A, example_4x4_b),
    'inverse_example': (inverse_example_A, inverse_example_b),
}


def load_example(name: str) -> tuple[np.ndarray, np.ndarray]:
    """
    Return fresh, writable copies of a preset system (A, b).

    Args:
        name: One of 'example_3x3', 'example_4x4', 'inverse_example'

    Raises:
        KeyError: If name is not a known preset
    """
    if name not in EXAMPLES:
        raise KeyError(
            f"Unknown example {name!r}; available: {sorted(EXAMPLES)}"
        )
    A, b = EXAMPLES[name]
    return A.copy(), b.copy()
