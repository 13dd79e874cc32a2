import argparse
import logging
import sys
from typing import TextIO

from int_set import IntSet


def run(out: TextIO = sys.stdout):
    a = IntSet.from_values([1, 2, 3])
    b = IntSet.from_values([2, 3, 4])

    removed = IntSet.from_values([1, 2, 3])
    removed.remove(2)

    grown = IntSet(0)

    for i in range(20):
        grown.add(i * i)

    results = [
        ('A', a),
        ('B', b),
        ('A | B', a.union_with(b)),
        ('A & B', a.intersect(b)),
        ('A - B', a.subtract(b)),
        ('{1, 2, 3} - 2', removed),
        (f'squares (cap={grown.capacity})', grown),
    ]

    for label, int_set in results:
        out.write(f'{label}: ')
        int_set.dump(out)
        out.write('\n')

    out.write(f'A <= A | B: {a.is_subset_of(a.union_with(b))}\n')
    out.write(f'{{}} <= {{}}: {IntSet().is_subset_of(IntSet())}\n')


def main():
    parser = argparse.ArgumentParser(description='Run the IntSet example scenarios.')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    run()


if __name__ == '__main__':
    main()
