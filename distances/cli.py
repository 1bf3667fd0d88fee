"""
Distances Command Line Interface

Usage:
    python -m distances <command> [args]

Commands:
    pearson     Pearson distance between two vectors
    stats       Mean and standard deviation (plus covariance / pearson with Y)
    pdist       Condensed pairwise distances between the rows of a file

Examples:
    python -m distances pearson 1,2,3,5,8 0.11,0.12,0.13,0.15,0.18
    python -m distances --dtype f32 stats 2,4,4,4,5,5,7,9
    python -m distances pdist vectors.txt

Vectors are comma separated. Use ``--`` before a vector that starts with a
minus sign. Options given here override the config file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from distances.config import DistanceConfig, load_config
from distances.core.pairwise import METRICS, pdist
from distances.primitives.statistics import covariance, mean, pearson, std_dev
from distances.validation import ValidationError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --strict / --no-strict / neither
LENGTH_POLICY_FLAGS = {True: 'strict', False: 'truncate', None: None}


def parse_vector(text: str) -> np.ndarray:
    """Parse '1,2,3.5' into an array; integers stay integers."""
    tokens = text.replace(',', ' ').split()
    if not tokens:
        raise argparse.ArgumentTypeError("empty vector")

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            try:
                values.append(float(token))
            except ValueError:
                raise argparse.ArgumentTypeError(f"not a number: '{token}'")
    return np.asarray(values)


def read_matrix(path: Path) -> np.ndarray:
    """Read one vector per line, comma or whitespace separated."""
    with open(path) as f:
        lines = [line.replace(',', ' ') for line in f if line.strip()]
    return np.loadtxt(lines, ndmin=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='distances',
        description='Correlation-based distances between numeric vectors',
    )
    parser.add_argument('--dtype', choices=['f32', 'f64'], default=None,
                        help='Accumulator precision (default: config, then f64)')
    parser.add_argument('--strict', action=argparse.BooleanOptionalAction, default=None,
                        help='Fail on vectors of different length instead of truncating '
                             '(--no-strict truncates even when the config is strict)')
    parser.add_argument('--config', type=Path, default=None,
                        help='YAML config file')
    parser.add_argument('--log-level', default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level (default: config, then WARNING)')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('pearson', help='Pearson distance between two vectors')
    p.add_argument('x', type=parse_vector)
    p.add_argument('y', type=parse_vector)

    p = sub.add_parser('stats', help='Mean and population std of X (covariance with Y)')
    p.add_argument('x', type=parse_vector)
    p.add_argument('y', type=parse_vector, nargs='?', default=None)

    p = sub.add_parser('pdist', help='Pairwise distances between rows of a file')
    p.add_argument('path', type=Path)
    p.add_argument('--metric', choices=sorted(METRICS), default=None)

    return parser


def _resolve_config(args: argparse.Namespace) -> DistanceConfig:
    config = load_config(args.config)
    overrides = {
        'accumulator': args.dtype,
        'length_policy': LENGTH_POLICY_FLAGS.get(args.strict),
        'log_level': args.log_level,
        'metric': getattr(args, 'metric', None),
    }
    return config.merged(overrides)


def run_command(args: argparse.Namespace, config: DistanceConfig) -> None:
    dtype = config.accumulator

    if args.command == 'pearson':
        print(f"pearson: {pearson(args.x, args.y, dtype=dtype, strict=config.strict)}")

    elif args.command == 'stats':
        print(f"mean: {mean(args.x, dtype=dtype)}")
        print(f"std_dev: {std_dev(args.x, dtype=dtype)}")
        if args.y is not None:
            print(f"covariance: {covariance(args.x, args.y, dtype=dtype, strict=config.strict)}")
            print(f"pearson: {pearson(args.x, args.y, dtype=dtype, strict=config.strict)}")

    elif args.command == 'pdist':
        matrix = read_matrix(args.path)
        logger.info(f"Read {matrix.shape[0]} vectors of width {matrix.shape[1]} from {args.path}")
        for value in pdist(matrix, metric=config.metric, dtype=dtype):
            print(value)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level or logging.WARNING, format=LOG_FORMAT)

    try:
        config = _resolve_config(args)
    except ValidationError as e:
        logger.error(str(e))
        return 1

    logging.getLogger().setLevel(config.log_level.upper())
    logger.debug(f"Config: {config}")

    try:
        run_command(args, config)
    except (ValueError, OSError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
