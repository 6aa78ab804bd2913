#!/usr/bin/env python3
"""Benchmark pair counting strategies and the Hilbert remap."""

import time

from pairvis.frequency import PAIR_GRID_SIZE, build_frequency_grid
from pairvis.grid import Grid, Pos2
from pairvis.remap import to_curve_order, to_natural_order


def count_pairs_indexed(data: bytes) -> Grid:
    """Baseline: increment one grid cell per pair."""
    grid = Grid(PAIR_GRID_SIZE, PAIR_GRID_SIZE, 0)
    for i in range(len(data) - 1):
        pos = Pos2(data[i], data[i + 1])
        grid.set(pos, grid.get(pos) + 1)
    return grid


def generate_test_data(size: int) -> bytes:
    """Generate semi-random but reproducible data."""
    return bytes((i * 137 + i // 256) % 256 for i in range(size))


def benchmark(func, arg, runs: int = 3):
    """Run a function multiple times and return average, min and max time."""
    times = []
    result = None
    for _ in range(runs):
        start = time.perf_counter()
        result = func(arg)
        times.append(time.perf_counter() - start)

    return sum(times) / len(times), min(times), max(times), result


def remap_round_trip(grid: Grid) -> Grid:
    return to_natural_order(to_curve_order(grid))


def main():
    sizes = [
        (10_000, "10 KB"),
        (100_000, "100 KB"),
        (1_000_000, "1 MB"),
    ]

    print("=" * 80)
    print("PAIR COUNTING BENCHMARK")
    print("=" * 80)

    for size, label in sizes:
        print(f"\nTest data size: {label} ({size:,} bytes)")
        print("-" * 80)
        data = generate_test_data(size)

        avg1, min1, max1, result1 = benchmark(count_pairs_indexed, data)
        avg2, min2, max2, result2 = benchmark(build_frequency_grid, data)

        # Verify both methods produce the same grid
        assert result1 == result2, "Count mismatch!"

        print(f"{'Method':<20} {'Avg Time':>12} {'Min Time':>12} {'Max Time':>12} {'Speedup':>10}")
        print("-" * 80)
        print(f"{'indexed':<20} {avg1:>10.4f}s {min1:>10.4f}s {max1:>10.4f}s {'1.00x':>10}")
        print(f"{'counter':<20} {avg2:>10.4f}s {min2:>10.4f}s {max2:>10.4f}s {avg1/avg2:>10.2f}x")

    print()
    print("=" * 80)
    print("HILBERT REMAP (256x256, curve order and back)")
    print("=" * 80)
    grid = build_frequency_grid(generate_test_data(100_000))
    expected = grid.values()
    avg, low, high, result = benchmark(remap_round_trip, grid)
    assert result.values() == expected, "Remap round trip mismatch!"
    print(f"{'round trip':<20} {avg:>10.4f}s {low:>10.4f}s {high:>10.4f}s")
    print()


if __name__ == "__main__":
    main()
