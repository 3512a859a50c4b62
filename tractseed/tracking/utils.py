"""Tools to consume seeders.

``draw_seeds`` plays the part of a multi-threaded tracking engine: several
workers share one seeder and each asks for one seed at a time until the
seeder is exhausted or enough seeds have been collected.
"""
from concurrent.futures import ThreadPoolExecutor
import threading

import numpy as np
from tqdm.auto import tqdm

from tractseed.core.errors import ConfigurationError
from tractseed.core.geometry import nearest_voxel
from tractseed.utils.logging import logger


def _count(value, name, minimum):
    if isinstance(value, (bool, np.bool_)) or \
            not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"{name} should be an integer, got {value!r}")
    if value < minimum:
        word = "non-negative" if minimum == 0 else f"at least {minimum}"
        raise ConfigurationError(f"{name} should be {word}, got {value}")
    return int(value)


def draw_seeds(seeder, n_seeds=None, n_threads=1, show_progress=False):
    """Collect seeds from a seeder shared by several threads.

    Parameters
    ----------
    seeder : Seeder
        The seeder to draw from.
    n_seeds : int, optional
        Number of seeds to collect. If None, draw until the seeder is
        exhausted, which requires a finite seeder.
    n_threads : int, optional
        Number of worker threads sharing ``seeder``.
    show_progress : bool, optional
        Display a progress bar.

    Returns
    -------
    seeds : array (N, 3)
        Seeds in scanner coordinates. Seeds of one worker are contiguous; the
        order across workers is unspecified.

    Raises
    ------
    ConfigurationError
        If ``n_seeds`` is None and the seeder never runs out of seeds, or if
        ``n_seeds`` or ``n_threads`` are invalid.

    """
    if n_seeds is None:
        if not seeder.is_finite:
            raise ConfigurationError(f"{seeder.name} seeding never runs out "
                                     "of seeds, n_seeds is required")
    else:
        n_seeds = _count(n_seeds, "n_seeds", minimum=0)
    n_threads = _count(n_threads, "n_threads", minimum=1)

    budget = [n_seeds]
    budget_lock = threading.Lock()

    def _take():
        if n_seeds is None:
            return True
        with budget_lock:
            if budget[0] <= 0:
                return False
            budget[0] -= 1
            return True

    total = n_seeds if n_seeds is not None else seeder.count
    with tqdm(total=total, disable=not show_progress,
              desc=seeder.name) as pbar:

        def _worker():
            seeds = []
            while _take():
                seed = seeder.get_seed()
                if seed is None:
                    break
                seeds.append(seed)
                pbar.update(1)
            return seeds

        with ThreadPoolExecutor(max_workers=n_threads) as executor:
            futures = [executor.submit(_worker) for _ in range(n_threads)]
            results = [f.result() for f in futures]

    seeds = [s for worker_seeds in results for s in worker_seeds]
    logger.info(f"Collected {len(seeds)} seeds from {seeder.name} with "
                f"{n_threads} threads")
    if not seeds:
        return np.empty((0, 3))
    return np.array(seeds)


def seed_counts(seeds, affine, shape):
    """Number of seeds falling in each voxel.

    Parameters
    ----------
    seeds : array (N, 3)
        Seeds in scanner coordinates.
    affine : array (4, 4)
        Voxel to scanner mapping of the counting grid.
    shape : tuple of 3 ints
        Shape of the counting grid.

    Returns
    -------
    counts : ndarray of int, shape ``shape``

    Raises
    ------
    IndexError
        If a seed falls outside the grid.

    """
    counts = np.zeros(shape, dtype=int)
    if len(seeds) == 0:
        return counts
    vox = nearest_voxel(seeds, affine)
    if np.any(vox < 0) or np.any(vox >= np.array(shape)):
        raise IndexError("seeds fall outside of the volume")
    np.add.at(counts, tuple(vox.T), 1)
    return counts
