from __future__ import annotations

import argparse
import os
import random
import sys

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import shuffle, standard_deck  # type: ignore


def main() -> None:
    parser = argparse.ArgumentParser(description='Card-by-position frequency check of the deck shuffle')
    parser.add_argument('--trials', type=int, default=52_000)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    base = standard_deck()
    n = len(base)
    counts = [[0] * n for _ in range(n)]
    index = {card: i for i, card in enumerate(base)}
    for _ in range(args.trials):
        deck = shuffle(list(base), rng)
        for pos, card in enumerate(deck):
            counts[index[card]][pos] += 1

    expected = args.trials / n
    chi2 = sum((c - expected) ** 2 / expected for row in counts for c in row)
    worst = max(abs(c - expected) / expected for row in counts for c in row)
    # (n-1)^2 degrees of freedom for the card x position table.
    dof = (n - 1) ** 2
    print(f"trials={args.trials} expected/cell={expected:.1f}")
    print(f"chi2={chi2:.1f} dof={dof} ratio={chi2 / dof:.3f}")
    print(f"worst relative deviation={worst:.2%}")


if __name__ == '__main__':
    main()
