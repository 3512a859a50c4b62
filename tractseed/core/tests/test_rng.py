from concurrent.futures import ThreadPoolExecutor
import threading

import numpy as np
import numpy.testing as npt

from tractseed.core.rng import ThreadLocalGenerator
from tractseed.testing import assert_false, assert_true


def test_same_thread_same_generator():
    rng = ThreadLocalGenerator(random_seed=3)
    assert_true(rng.generator is rng.generator)
    assert_true(isinstance(rng.generator, np.random.Generator))
    npt.assert_equal(rng.random_seed, 3)


def test_reproducible_streams():
    a = ThreadLocalGenerator(random_seed=42).generator.random(5)
    b = ThreadLocalGenerator(random_seed=42).generator.random(5)
    c = ThreadLocalGenerator(random_seed=43).generator.random(5)
    npt.assert_array_equal(a, b)
    assert_false(np.allclose(a, c))


def test_threads_get_independent_streams():
    rng = ThreadLocalGenerator(random_seed=0)
    barrier = threading.Barrier(4)

    def draw():
        barrier.wait()
        gen = rng.generator
        return id(gen), tuple(gen.random(4))

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(lambda _: draw(), range(4)))

    ids = {r[0] for r in results}
    streams = {r[1] for r in results}
    npt.assert_equal(len(ids), 4)
    npt.assert_equal(len(streams), 4)
