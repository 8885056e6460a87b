"""Run the Aberth-Ehrlich solver over the test polynomial families.

Every family is swept with one shared, explicitly seeded generator. The
process exits with status 1 on the first polynomial that fails to converge.

    python -m aberth --seed 8008335
"""

import argparse
import sys
from typing import Callable, Iterator

import torch
from torch import Tensor

from aberth.root_finding import INIT_MODES, RootFinder
from aberth.test_polynomial import (
    easy,
    kam1,
    roots_of_unity,
    truncated_exponential,
)

DEFAULT_SEED = 8008335


def families() -> Iterator[tuple[str, str, Callable[[], Tensor]]]:
    """Yield (family name, case label, coefficient factory) for the sweep."""
    for i in range(1, 11):
        yield "Easy", f"degree {10 * i}", lambda i=i: easy(10 * i)

    for i in range(1, 11):
        yield "Exp", f"degree {i}", lambda i=i: truncated_exponential(i)

    for i in range(1, 11):
        c = 1e-6 / (i * 10)
        yield "kam1", f"c = {c:g}", lambda c=c: kam1(c)

    for i in range(1, 11):
        yield "roots of unity", f"degree {i}", lambda i=i: roots_of_unity(i)


def run(
    *,
    seed: int = DEFAULT_SEED,
    tol: float = 1e-9,
    maxiter: int = 200,
    init: str = "random",
    verbose: bool = False,
) -> bool:
    """Sweep all families; return False on the first non-convergence."""
    generator = torch.Generator().manual_seed(seed)

    current = None
    for family, label, make_coeffs in families():
        if family != current:
            print(f'Testing "{family}" polynomials...')
            current = family

        finder = RootFinder(
            make_coeffs(),
            tol=tol,
            maxiter=maxiter,
            init=init,
            generator=generator,
        )
        if not finder.compute(verbose=verbose):
            print(f'Failed "{family}" polynomial with {label}')
            return False

    print("All tests passed! :)")
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m aberth",
        description="Run the Aberth-Ehrlich solver over the test polynomial families.",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--tol", type=float, default=1e-9)
    parser.add_argument("--maxiter", type=int, default=200)
    parser.add_argument("--init", choices=INIT_MODES, default="random")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    passed = run(
        seed=args.seed,
        tol=args.tol,
        maxiter=args.maxiter,
        init=args.init,
        verbose=args.verbose,
    )
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
