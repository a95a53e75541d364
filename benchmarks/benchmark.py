#!/usr/bin/env python
"""
Benchmark suite for mcstate.

This script runs a series of benchmarks to measure the performance of
state table construction, state lookups and placement resolution.
"""

import argparse
import asyncio
import gc
import json
import os
import sys
import time
import logging
from pathlib import Path
import numpy as np
import matplotlib.pyplot as plt
from contextlib import contextmanager

# Add the parent directory to the path so we can import mcstate
sys.path.insert(0, str(Path(__file__).parent.parent))

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("benchmarks")

from mcstate.catalog import BlockCatalog
from mcstate.core import (
    BehaviorRegistry, BlockFace, BlockPos, InMemoryWorld, Property, StateTable,
)


@contextmanager
def timer(name):
    """Context manager for timing code blocks."""
    gc.collect()  # Force garbage collection before timing
    start = time.perf_counter()
    yield
    end = time.perf_counter()
    logger.info(f"{name}: {end - start:.6f} seconds")


def _summarize(samples):
    return {
        'avg_time': float(np.mean(samples)),
        'median_time': float(np.median(samples)),
        'std_dev': float(np.std(samples)),
        'min_time': float(np.min(samples)),
        'max_time': float(np.max(samples)),
        'p95_time': float(np.percentile(samples, 95)),
    }


def _plot_histogram(samples, title, color, path):
    avg_time = np.mean(samples)
    median_time = np.median(samples)
    p95_time = np.percentile(samples, 95)

    plt.figure(figsize=(10, 6))
    plt.hist(samples, bins=20, alpha=0.7, color=color)
    plt.axvline(avg_time, color='red', linestyle='dashed', linewidth=2, label=f'Mean: {avg_time:.9f}s')
    plt.axvline(median_time, color='green', linestyle='dashed', linewidth=2, label=f'Median: {median_time:.9f}s')
    plt.axvline(p95_time, color='orange', linestyle='dashed', linewidth=2, label=f'95th percentile: {p95_time:.9f}s')
    plt.xlabel('Time (seconds)')
    plt.ylabel('Frequency')
    plt.title(title)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.savefig(path)
    plt.close()


def benchmark_table_build(output_path, max_properties=6, domain_size=4, repeats=20):
    """Benchmark state table construction for growing property lists."""
    sizes = []
    build_times = []

    for count in range(1, max_properties + 1):
        properties = [
            Property(f"p{i}", tuple(str(v) for v in range(domain_size)))
            for i in range(count)
        ]
        samples = []
        for _ in range(repeats):
            start = time.perf_counter()
            table = StateTable.build(properties)
            samples.append(time.perf_counter() - start)

        sizes.append(table.total)
        build_times.append(float(np.median(samples)))
        logger.info(f"  {count} properties, {table.total} states: {build_times[-1]:.6f}s")

    plt.figure(figsize=(10, 6))
    plt.loglog(sizes, build_times, marker='o')
    plt.xlabel('States')
    plt.ylabel('Build time (seconds)')
    plt.title('State Table Build Time')
    plt.grid(True, alpha=0.3)
    plt.savefig(os.path.join(output_path, 'table_build_benchmark.png'))
    plt.close()

    return {
        'states': sizes,
        'build_times': build_times,
        'states_per_second': sizes[-1] / build_times[-1],
    }


def benchmark_lookups(output_path, operations=100000):
    """Benchmark forward and reverse lookups on a slab-sized table."""
    table = StateTable.build([
        Property("type", ("top", "bottom", "double")),
        Property("waterlogged", ("true", "false")),
    ])
    rng = np.random.default_rng(42)
    offsets = rng.integers(0, table.total, size=operations).tolist()

    reverse_times = []
    forward_times = []
    for offset in offsets:
        start = time.perf_counter()
        assignment = table.assignment_at(offset)
        mid = time.perf_counter()
        table.offset_of(assignment)
        end = time.perf_counter()

        reverse_times.append(mid - start)
        forward_times.append(end - mid)

    results = {
        'reverse': _summarize(reverse_times),
        'forward': _summarize(forward_times),
    }
    results['lookups_per_second'] = 1 / (results['reverse']['avg_time'] + results['forward']['avg_time'])

    logger.info("Lookup Benchmark Results:")
    logger.info(f"  Operations: {operations}")
    logger.info(f"  Average reverse time: {results['reverse']['avg_time']:.9f}s")
    logger.info(f"  Average forward time: {results['forward']['avg_time']:.9f}s")

    _plot_histogram(forward_times, 'Forward Lookup Time Distribution', 'blue',
                    os.path.join(output_path, 'lookup_benchmark.png'))
    return results


def benchmark_placements(output_path, placements=10000):
    """Benchmark placement resolution against an in-memory world."""
    catalog = BlockCatalog.load_default()
    registry = BehaviorRegistry()
    catalog.initialize_behaviors(registry)
    world = InMemoryWorld(catalog)
    slab = catalog.get("oak_slab")
    behavior = registry.for_block(slab)

    async def run():
        times = []
        for i in range(placements):
            position = BlockPos(i % 64, 64, i // 64)
            world.set_block(position, "oak_slab")
            start = time.perf_counter()
            await behavior.place(world, slab, BlockFace.TOP, position)
            times.append(time.perf_counter() - start)
        return times

    times = asyncio.run(run())
    results = _summarize(times)
    results['placements_per_second'] = 1 / results['avg_time']

    logger.info("Placement Benchmark Results:")
    logger.info(f"  Placements: {placements}")
    logger.info(f"  Average time: {results['avg_time']:.9f}s")
    logger.info(f"  Placements per second: {results['placements_per_second']:.2f}")

    _plot_histogram(times, 'Placement Time Distribution', 'purple',
                    os.path.join(output_path, 'placement_benchmark.png'))
    return results


def benchmark_memory_usage(output_path, max_properties=7, domain_size=4):
    """Benchmark memory held by state tables of growing size."""
    import psutil

    process = psutil.Process()
    tables = []
    states = [0]
    memory_usage = [process.memory_info().rss / 1024 / 1024]  # MB

    for count in range(1, max_properties + 1):
        properties = [
            Property(f"p{i}", tuple(str(v) for v in range(domain_size)))
            for i in range(count)
        ]
        tables.append(StateTable.build(properties))
        states.append(states[-1] + tables[-1].total)
        memory_usage.append(process.memory_info().rss / 1024 / 1024)
        logger.info(f"Built {count} tables, memory: {memory_usage[-1]:.2f} MB")

    memory_per_state = (memory_usage[-1] - memory_usage[0]) / states[-1] * 1024  # KB

    plt.figure(figsize=(10, 6))
    plt.plot(states, memory_usage, marker='o', markersize=3)
    plt.xlabel('States Held')
    plt.ylabel('Memory Usage (MB)')
    plt.title('Memory Usage of State Tables')
    plt.grid(True, alpha=0.3)
    plt.savefig(os.path.join(output_path, 'memory_usage_benchmark.png'))
    plt.close()

    return {
        'initial_memory': memory_usage[0],
        'final_memory': memory_usage[-1],
        'states': states[-1],
        'memory_per_state_kb': memory_per_state,
    }


def main():
    """Run the benchmarks."""
    parser = argparse.ArgumentParser(description="mcstate Benchmarks")
    parser.add_argument("--output", type=str, default="benchmark_results", help="Output directory")
    parser.add_argument("--operations", type=int, default=100000, help="Number of lookups")
    parser.add_argument("--placements", type=int, default=10000, help="Number of placements")
    parser.add_argument("--all", action="store_true", help="Run all benchmarks")
    parser.add_argument("--build", action="store_true", help="Run table build benchmark")
    parser.add_argument("--lookup", action="store_true", help="Run lookup benchmark")
    parser.add_argument("--place", action="store_true", help="Run placement benchmark")
    parser.add_argument("--memory", action="store_true", help="Run memory usage benchmark")
    args = parser.parse_args()

    output_path = os.path.abspath(args.output)
    os.makedirs(output_path, exist_ok=True)

    run_all = args.all or not any([args.build, args.lookup, args.place, args.memory])

    results = {}

    if run_all or args.build:
        with timer("Table build benchmark"):
            results['build'] = benchmark_table_build(output_path)

    if run_all or args.lookup:
        with timer("Lookup benchmark"):
            results['lookup'] = benchmark_lookups(output_path, args.operations)

    if run_all or args.place:
        with timer("Placement benchmark"):
            results['place'] = benchmark_placements(output_path, args.placements)

    if run_all or args.memory:
        with timer("Memory usage benchmark"):
            results['memory'] = benchmark_memory_usage(output_path)

    with open(os.path.join(output_path, 'benchmark_results.json'), 'w') as f:
        json.dump(results, f, indent=2)

    logger.info(f"Benchmarks complete, results saved to {output_path}")


if __name__ == "__main__":
    main()
