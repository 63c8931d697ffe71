import time

import numpy as np
import pandas as pd

from IsoBands.isobands import compute_isobands
from IsoBands.parallel import compute_isobands_parallel


def volcano_field(size):
    x = np.linspace(-3.0, 3.0, size)
    xx, yy = np.meshgrid(x, x)
    r2 = xx**2 + yy**2
    return (10.0 * np.exp(-r2) - 6.0 * np.exp(-4.0 * r2) + 0.3 * np.sin(3 * xx)).ravel()


def run_benchmark():
    grid_sizes = [100, 300, 1000]
    thresholds = list(np.linspace(-1.0, 8.0, 10))
    variants = {
        "plain": lambda s, n: compute_isobands(s, n, n, thresholds),
        "quadtree": lambda s, n: compute_isobands(
            s, n, n, thresholds, use_quadtree=True
        ),
        "parallel": lambda s, n: compute_isobands_parallel(
            s, n, n, thresholds, use_quadtree=True
        ),
    }
    results = []

    print(f"{'Grid':<10} | {'Variant':<10} | {'Rings':<8} | {'Time (s)':<10}")
    print("-" * 48)

    for size in grid_sizes:
        samples = volcano_field(size)
        for name, run in variants.items():
            start_time = time.perf_counter()
            bands = run(samples, size)
            end_time = time.perf_counter()

            elapsed = end_time - start_time
            n_rings = sum(len(band.rings) for band in bands)
            results.append(
                {
                    "Grid": f"{size}x{size}",
                    "Cells": (size - 1) ** 2,
                    "Variant": name,
                    "Rings": n_rings,
                    "Time": elapsed,
                }
            )
            print(f"{size:<10} | {name:<10} | {n_rings:<8} | {elapsed:.4f}")

    return pd.DataFrame(results)


df = run_benchmark()
summary = df.pivot_table(index=["Grid", "Cells"], columns="Variant", values="Time")
print("\nSpeedup (quadtree vs plain):")
summary["Speedup (x)"] = summary["plain"] / summary["quadtree"]
print(summary)
