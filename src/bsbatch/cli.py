import argparse
import sys

from .batch import run_batch
from .config import DEFAULT_DATASET_PATH, GENERATOR_DEFAULT_ROWS
from .dataset import generate_dataset, load_options, write_prices
from .exceptions import DatasetError


def _non_negative_int(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return n


def cmd_run(args) -> int:
    try:
        batch = load_options(args.input)
    except DatasetError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    record = args.output is not None or args.verbose
    result = run_batch(batch, record=record, vectorised=args.vectorised)
    print(result.summary())

    if args.verbose:
        print(f"{result.n_non_finite()} of {result.n} options have non-finite prices",
              file=sys.stderr)
    if args.output is not None:
        write_prices(args.output, batch, result)
        print(f"Prices written to {args.output}", file=sys.stderr)
    return 0


def cmd_generate(args) -> int:
    n = generate_dataset(args.output, args.n, seed=args.seed)
    print(f"Wrote {n} options to {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bsbatch",
        description="Batch Black-Scholes pricing of European puts and calls",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="price a dataset and report the timing")
    p_run.add_argument("--input", default=DEFAULT_DATASET_PATH,
                       help=f"headerless CSV of S,K,T,r,sigma (default {DEFAULT_DATASET_PATH})")
    p_run.add_argument("--vectorised", action="store_true",
                       help="price the whole batch with array calls")
    p_run.add_argument("--output", default=None, help="write S,K,T,r,sigma,call,put CSV")
    p_run.add_argument("--verbose", action="store_true",
                       help="report non-finite prices on stderr")
    p_run.set_defaults(func=cmd_run)

    p_gen = sub.add_parser("generate", help="write a synthetic dataset")
    p_gen.add_argument("--output", default=DEFAULT_DATASET_PATH)
    p_gen.add_argument("-n", type=_non_negative_int, default=GENERATOR_DEFAULT_ROWS,
                       help="number of rows")
    p_gen.add_argument("--seed", type=int, default=None)
    p_gen.set_defaults(func=cmd_generate)
    return p


def main(argv=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        argv = ["run"]
    args = build_parser().parse_args(argv)
    return args.func(args)


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
