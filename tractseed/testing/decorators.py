"""
Decorators for tractseed tests
"""

from functools import wraps
import inspect

import numpy as np


def set_random_number_generator(seed_v=1234):
    """Decorator to use a fixed value for the random generator seed.

    This will make the tests that use random functions reproducible.

    """

    def _set_random_number_generator(func):
        @wraps(func)
        def _set_random_number_generator_wrapper(*args, **kwargs):
            kwargs["rng"] = np.random.default_rng(seed_v)
            return func(*args, **kwargs)

        # pytest must not try to resolve ``rng`` as a fixture
        params = [p for name, p in
                  inspect.signature(func).parameters.items() if name != "rng"]
        _set_random_number_generator_wrapper.__signature__ = \
            inspect.Signature(params)
        return _set_random_number_generator_wrapper

    return _set_random_number_generator
