#!/usr/bin/env python3
"""Entry point for generating a router-level Barabasi-Albert topology.

Loads a generation config, builds the topology in memory, validates it and
prints a summary. Nothing is written to disk.

Usage:
    python run_generation.py --config config.json
    python run_generation.py --config config.json --dry-run
    python run_generation.py --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from ba_topology.config import (
    DEFAULT_CONFIG,
    GenerationConfig,
    config_from_json,
    full_config_hash,
    model_string,
    topology_config_hash,
)
from ba_topology.graph import (
    GraphGenerationError,
    RouterGraph,
    estimate_power_law_exponent,
    generate_topology,
    validate_topology,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def summarize(graph: RouterGraph, config: GenerationConfig) -> dict[str, float]:
    """Headline numbers for a generated topology."""
    degrees = graph.out_degrees()
    stats = graph.attachment_stats
    return {
        "nodes": graph.node_count(),
        "edges": graph.edge_count(),
        "degree_sum": int(degrees.sum()),
        "max_degree": int(degrees.max()),
        "mean_degree": float(degrees.mean()),
        "power_law_exponent": estimate_power_law_exponent(
            degrees, config.topology.m
        ),
        "draws": stats.draws if stats else 0,
        "rejections": stats.duplicate_rejections if stats else 0,
    }


def run_generation(config: GenerationConfig) -> RouterGraph:
    """Generate and validate a topology, printing progress banners.

    Raises:
        GraphGenerationError: If generation fails or the result is invalid.
    """
    with stage_timer("Topology Generation"):
        graph = generate_topology(config)

    with stage_timer("Validation"):
        errors = validate_topology(graph, config.topology.m)
        if errors:
            raise GraphGenerationError(
                f"Generated topology is invalid: {'; '.join(errors)}"
            )

    summary = summarize(graph, config)
    print(f"\n{'=' * 60}")
    print(f"  Nodes:      {summary['nodes']}")
    print(f"  Edges:      {summary['edges']}")
    print(f"  Degree sum: {summary['degree_sum']}")
    print(f"  Degree:     mean {summary['mean_degree']:.2f}, "
          f"max {summary['max_degree']}")
    print(f"  Exponent:   {summary['power_law_exponent']:.2f}")
    print(f"  Draws:      {summary['draws']} "
          f"({summary['rejections']} rejected)")
    print(f"{'=' * 60}")
    return graph


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a router-level Barabasi-Albert topology"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to generation config JSON file (defaults built in)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the model without generating it",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = DEFAULT_CONFIG
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            config = config_from_json(config_path.read_text())
        except (ValueError, DaciteError) as exc:
            print(f"Error: invalid config: {exc}", file=sys.stderr)
            sys.exit(1)

    print(model_string(config.topology))
    print(f"Config hash:   {full_config_hash(config)}")
    print(f"Model hash:    {topology_config_hash(config)}")
    print(f"Seed:          {config.seed}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_generation(config)
    except GraphGenerationError:
        log.exception("Generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
