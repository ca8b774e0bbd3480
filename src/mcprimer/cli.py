"""Command-line entry point.

Usage:
    mcprimer --distribution coin --samples 10000 --seed 42
    mcprimer -d gamblers_ruin -n 10000 --params '{"stake": 6, "target": 12}' --std
    mcprimer -d option --config option.json --workers 4 --export output
"""

import argparse
import logging
import sys

from mcprimer.analysis import convergence_table, estimate, estimate_parallel
from mcprimer.config import (
    CONVERGENCE_SAMPLE_SIZES,
    DEFAULT_SAMPLE_COUNT,
    load_params_from_json,
    parse_params,
)
from mcprimer.errors import InvalidArgument
from mcprimer.experiments import Distribution, build_experiment
from mcprimer.output import ConsoleOutput, Exporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcprimer",
        description="Estimate probabilities and expectations by Monte Carlo simulation",
    )
    parser.add_argument(
        "--samples",
        "-n",
        type=int,
        default=DEFAULT_SAMPLE_COUNT,
        help=f"Number of trials (default: {DEFAULT_SAMPLE_COUNT})",
    )
    parser.add_argument(
        "--distribution",
        "-d",
        choices=[d.value for d in Distribution],
        default=Distribution.COIN.value,
        help="Experiment to run (default: coin)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--params",
        default=None,
        help="Experiment parameters as a JSON object",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with experiment parameters (--params entries take precedence)",
    )
    parser.add_argument(
        "--std",
        action="store_true",
        help="Report standard error and a 95%% confidence interval",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Split trials across this many worker processes",
    )
    parser.add_argument(
        "--convergence",
        action="store_true",
        help="Also print estimates for increasing sample counts up to --samples",
    )
    parser.add_argument(
        "--export",
        default=None,
        metavar="DIR",
        help="Write estimate JSON and per-trial CSV to this directory",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    params = {}
    if args.config:
        params.update(load_params_from_json(args.config))
    if args.params:
        params.update(parse_params(args.params))

    experiment = build_experiment(args.distribution, params)
    keep = args.export is not None

    if args.workers is not None:
        result = estimate_parallel(
            args.samples,
            experiment.trial,
            experiment.score,
            seed=args.seed,
            workers=args.workers,
            with_std=args.std,
            keep_contributions=keep,
        )
    else:
        result = estimate(
            args.samples,
            experiment.trial,
            experiment.score,
            seed=args.seed,
            with_std=args.std,
            keep_contributions=keep,
        )

    ConsoleOutput.print_estimate(experiment, result)

    table = None
    if args.convergence:
        expected = experiment.expected
        if isinstance(expected, tuple):
            expected = expected[0]
        sizes = [n for n in CONVERGENCE_SAMPLE_SIZES if n < args.samples] + [args.samples]
        table = convergence_table(
            sizes,
            experiment.trial,
            experiment.score,
            seed=args.seed,
            expected=expected,
        )
        ConsoleOutput.print_convergence(table)

    if args.export is not None:
        exporter = Exporter(output_dir=args.export)
        files = exporter.export_all(experiment, result, prefix=experiment.name)
        if table is not None:
            files["convergence_csv"] = exporter.export_convergence_csv(
                table, f"{experiment.name}_convergence.csv"
            )
        print("\nExported:")
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        run(args)
    except InvalidArgument as e:
        logger.debug("Invalid argument", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
