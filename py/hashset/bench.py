# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Micro benchmarks for element insertion

__all__ = (
    'random_ints',
    'measure',
    'benchmarks',
    'main',
)

import sys, os
import argparse
import random
import time

from .set import Set

default_size = 1000
default_iterations = 100

def prerr(msg):
    sys.stderr.write(msg + "\n")

def random_ints(n, rng=random):
    return [rng.randrange(sys.maxsize) for _ in range(n)]

def bench_add(ints):
    s = Set.empty()
    for v in ints:
        s.add(v)

def bench_add_all(ints):
    s = Set.empty()
    s.add_all(ints)

# name -> function taking the list of elements to insert
benchmarks = {
    'add': bench_add,
    'add_all': bench_add_all,
}

def measure(fun, ints, iterations):
    '''Run fun(ints) the given number of times and return the mean
    wall time per call, in nanoseconds'''
    start = time.perf_counter_ns()
    for _ in range(iterations):
        fun(ints)
    return (time.perf_counter_ns() - start) / iterations

def positive_int(s):
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected integer, got {s!r}')
    if n <= 0:
        raise argparse.ArgumentTypeError(
            f'expected positive integer, got {n}')
    return n

def main(argv):
    parser = argparse.ArgumentParser(
        prog=os.path.basename(argv[0]) if argv else 'hashset-bench',
        description='Measure insertion into hashset.Set.')
    parser.add_argument(
        '--size', type=positive_int, default=default_size,
        help=f'number of random integers to insert (default {default_size})')
    parser.add_argument(
        '-n', '--iterations', type=positive_int,
        default=default_iterations,
        help='number of timed runs per benchmark'
        f' (default {default_iterations})')
    parser.add_argument(
        '--seed', type=int, default=None,
        help='seed for the random element generator')
    parser.add_argument(
        'names', nargs='*', metavar='BENCHMARK',
        help='benchmarks to run: %s (default all)'
        % (', '.join(benchmarks),))
    options = parser.parse_args(argv[1:])

    for name in options.names:
        if name not in benchmarks:
            parser.error(f'unknown benchmark {name!r}')
    names = options.names or list(benchmarks)

    ints = random_ints(options.size, random.Random(options.seed))
    longest_name = max(len(name) for name in names)
    try:
        for name in names:
            ns = measure(benchmarks[name], ints, options.iterations)
            print(f'{name.ljust(longest_name)} {options.iterations:8d}'
                  f' {ns:14.1f} ns/op')
    except Exception as e:
        if os.getenv('HASHSET_DEBUG'):
            raise
        prerr(f'{parser.prog}: benchmark {name!r} failed: {e}')
        return 1
    return 0

def run():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    run()
