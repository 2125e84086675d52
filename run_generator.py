#!/usr/bin/env python3
"""Entry point for generating pseudo-random Erdos-Renyi instances.

Samples one G(n, p) graph and prints it on stdout as a weighted graph,
a max-clique instance or a max-2-SAT instance, in DIMACS or GraphViz form.
Logs go to stderr.

Usage:
    python run_generator.py -n 10 -p 0.5
    python run_generator.py -n 10 -p 0.5 --digraph --loops -o dot
    python run_generator.py -n 5 -p 0.3 --max2sat -w 1 2 3 --seed 42
    python run_generator.py --config config.json
"""

import argparse
import logging
import sys
from pathlib import Path

from dacite import DaciteError

from src.config import GeneratorConfig, load_config
from src.encoding.views import MAX2SAT, MAX_CLIQUE, OUTPUTS
from src.pipeline import run

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convenience tool to generate pseudo random graphs"
    )
    parser.add_argument(
        "-n",
        "--nb-vertices",
        type=int,
        help="Number of vertices (boolean variables in --max2sat mode)",
    )
    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        help="Likelihood of any edge to be picked",
    )
    parser.add_argument(
        "-l",
        "--loops",
        action="store_true",
        help="Allow self loops in the generated graph",
    )
    parser.add_argument(
        "-d",
        "--digraph",
        action="store_true",
        help="Generate a directed graph",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-m",
        "--max2sat",
        action="store_true",
        help="Generate a weighted max-2-SAT instance",
    )
    mode.add_argument(
        "-c",
        "--max-clique",
        action="store_true",
        help="Generate an unweighted max-clique instance",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str.lower,
        choices=OUTPUTS,
        default="dimacs",
        help="Output language (default: dimacs)",
    )
    parser.add_argument(
        "-w",
        "--weights",
        type=int,
        nargs="+",
        help="Weight candidates to redistribute over the edges",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Seed of the random generator",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a generator config JSON file (replaces the flags above)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    verbosity.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Build a GeneratorConfig from parsed command line flags."""
    if args.max2sat:
        mode = MAX2SAT
    elif args.max_clique:
        mode = MAX_CLIQUE
    else:
        mode = "graph"

    return GeneratorConfig(
        n=args.nb_vertices,
        p=args.probability,
        digraph=args.digraph,
        self_loops=args.loops,
        mode=mode,
        output=args.output,
        weights=tuple(args.weights) if args.weights else None,
        seed=args.seed,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging; stdout is reserved for the instance
    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            return 1
    elif args.nb_vertices is None or args.probability is None:
        parser.error("-n/--nb-vertices and -p/--probability are required")

    try:
        if args.config:
            config = load_config(config_path)
            log.info("Config loaded from %s", config_path)
        else:
            config = config_from_args(args)
        out = run(config)
    except (ValueError, DaciteError) as exc:
        log.error("Invalid configuration: %s", exc)
        return 1

    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
