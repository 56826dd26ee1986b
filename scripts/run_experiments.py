#!/usr/bin/env python3
"""
Run round-trip and energy experiments for the reference DCT.

Usage:
    python scripts/run_experiments.py [--sizes 4x4 8x8 16x16] [--output results/metrics.json]
"""

import argparse
import sys
import os
import json
import time
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from dctref.transform import forward_dct, inverse_dct
from dctref.metrics import roundtrip_report, calculate_max_error


REFERENCE_MATRICES = [
    ("4x4 ramp", [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]]),
    ("2x2 columns", [[0, 1], [0, 1]]),
    ("2x2 offset columns", [[6, 1], [6, 1]]),
    ("4x2 ramp", [[0, 1], [2, 3], [4, 5], [6, 7]]),
]


def parse_size(text: str):
    """Parse 'RxC' into a (rows, cols) tuple."""
    try:
        rows, cols = (int(part) for part in text.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Size must look like RxC, got {text!r}")
    return rows, cols


def run_timing_experiment(shape, rng):
    """Time direct and separable evaluation on one random matrix."""
    matrix = rng.standard_normal(shape) * 100

    start = time.perf_counter()
    direct = forward_dct(matrix)
    direct_time = time.perf_counter() - start

    start = time.perf_counter()
    separable = forward_dct(matrix, separable=True)
    separable_time = time.perf_counter() - start

    report = roundtrip_report(matrix)

    return {
        'shape': list(shape),
        'direct_seconds': round(direct_time, 6),
        'separable_seconds': round(separable_time, 6),
        'mode_disagreement': calculate_max_error(direct, separable),
        'roundtrip': report,
    }


def main():
    parser = argparse.ArgumentParser(
        description='Reference DCT experiments - round trip, Parseval and timing',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reference matrices plus default random sizes
  python scripts/run_experiments.py

  # Custom sizes and JSON output
  python scripts/run_experiments.py --sizes 8x8 16x32 --output results/metrics.json
        """
    )

    parser.add_argument('--sizes', '-s', nargs='+', type=parse_size,
                        default=[(4, 4), (8, 8), (16, 16)],
                        help='Random matrix sizes as RxC (default: 4x4 8x8 16x16)')
    parser.add_argument('--seed', type=int, default=0,
                        help='Random seed (default: 0)')
    parser.add_argument('--output', '-o',
                        help='Write results as JSON to this path')

    args = parser.parse_args()

    print("=" * 60)
    print("REFERENCE DCT - EXPERIMENT RUNNER")
    print("=" * 60)

    # Reference matrices
    print("\n" + "=" * 60)
    print("REFERENCE ROUND TRIPS")
    print("=" * 60)

    reference_results = []
    for name, matrix in REFERENCE_MATRICES:
        report = roundtrip_report(matrix)
        report['name'] = name
        reference_results.append(report)

        status = "✓" if report['passed'] else "✗"
        print(f"   {status} {name}: max error = {report['max_error']:.2e}, "
              f"energy ratio = {report['energy_ratio']:.12f}")

    # Random matrices
    print("\n" + "=" * 60)
    print("RANDOM MATRICES")
    print("=" * 60)

    rng = np.random.default_rng(args.seed)
    timing_results = []

    try:
        for shape in args.sizes:
            result = run_timing_experiment(shape, rng)
            timing_results.append(result)

            print(f"\n--- {shape[0]}x{shape[1]} ---")
            print(f"  Direct:     {result['direct_seconds']:.4f}s")
            print(f"  Separable:  {result['separable_seconds']:.4f}s")
            print(f"  Mode gap:   {result['mode_disagreement']:.2e}")
            print(f"  Max error:  {result['roundtrip']['max_error']:.2e}")
            print(f"  Energy:     {result['roundtrip']['energy_ratio']:.12f}")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    all_passed = all(r['passed'] for r in reference_results) and \
        all(r['roundtrip']['passed'] for r in timing_results)

    if args.output:
        output = {
            "experiment_date": datetime.now().isoformat(),
            "seed": args.seed,
            "reference_results": reference_results,
            "random_results": timing_results,
            "all_passed": all_passed,
        }

        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(output, f, indent=2, ensure_ascii=False)

        print(f"\nResults saved to: {args.output}")

    print("\n" + "=" * 60)
    if all_passed:
        print("🎉 All round trips within tolerance")
    else:
        print("⚠️  Some round trips exceeded tolerance")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
