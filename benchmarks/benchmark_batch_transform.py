"""Benchmark batched point transforms vs. the single-value layer."""

import logging
import time

import numpy as np

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

from xform3d import (
    Vector3,
    apply,
    apply_points,
    from_euler,
    quaternion_to_matrix,
    rotate_points,
    translation,
)


def create_test_points(n: int) -> np.ndarray:
    """Create test points."""
    rng = np.random.default_rng(42)
    return rng.standard_normal((n, 3))


def benchmark(func, warmup=5, iterations=50):
    """Benchmark a function."""
    for _ in range(warmup):
        func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start

    return (elapsed / iterations) * 1000


def run_benchmarks():
    """Run batched transform benchmarks."""
    logger.info("=" * 70)
    logger.info("BATCHED TRANSFORM BENCHMARKS")
    logger.info("=" * 70)

    q = from_euler(0.3, -0.2, 1.1)
    m = translation(1.0, 2.0, 3.0) * quaternion_to_matrix(q)

    for n in [10_000, 100_000, 1_000_000]:
        logger.info(f"\nDataset size: {n:,} points")
        logger.info("-" * 70)

        points = create_test_points(n)
        out = np.empty_like(points)

        ms = benchmark(lambda: apply_points(m, points, out=out))
        logger.info(f"apply_points:  {ms:.3f} ms ({n / ms * 1000 / 1e6:.1f}M/sec)")

        ms = benchmark(lambda: rotate_points(q, points, out=out))
        logger.info(f"rotate_points: {ms:.3f} ms ({n / ms * 1000 / 1e6:.1f}M/sec)")

    # Single-value reference on a small slice
    n = 10_000
    vectors = [Vector3.from_array(p) for p in create_test_points(n)]
    ms = benchmark(lambda: [apply(m, v) for v in vectors], warmup=1, iterations=5)
    logger.info(f"\nSingle-value apply ({n:,} points): {ms:.3f} ms")


if __name__ == "__main__":
    run_benchmarks()
