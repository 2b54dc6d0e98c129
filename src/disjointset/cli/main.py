"""Command-line interface for disjointset.

Provides CLI commands for spanning-forest and component queries over
JSONL edge files.
"""

import importlib.metadata
import json
import sys
import time
import traceback
from pathlib import Path

import click

from disjointset.strategies import DEFAULT_STRATEGY, STRATEGY_REGISTRY

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("disjointset")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_strategy_option = click.option(
    "--strategy",
    "-s",
    type=click.Choice(sorted(STRATEGY_REGISTRY)),
    default=DEFAULT_STRATEGY,
    show_default=True,
    help="Root-finding strategy",
)


@click.group()
@click.version_option(version=__version__, prog_name="disjointset")
def cli() -> None:
    """Union-find tools for weighted edge lists.

    Edge files are JSONL, one {"source", "target", "weight"} object per line.

    Use 'disjointset COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("edges_path", type=click.Path(exists=True, dir_okay=False))
@_strategy_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write selected edges as JSONL to this file instead of stdout",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append structured JSONL events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def mst(
    edges_path: str,
    strategy: str,
    output: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Compute the minimum spanning forest of EDGES_PATH.

    Examples
    --------
        disjointset mst edges.jsonl
        disjointset mst edges.jsonl -o forest.jsonl --strategy halving
        disjointset mst edges.jsonl --log events.jsonl
    """
    from disjointset.audit import AuditLogger, generate_run_id
    from disjointset.config import DisjointSetConfig
    from disjointset.errors import DisjointSetError
    from disjointset.spanning import load_edges, minimum_spanning_forest

    logger: AuditLogger | None = None
    start = time.perf_counter()

    try:
        if log_path:
            logger = AuditLogger(generate_run_id(), Path(log_path))
        config = DisjointSetConfig(strategy=strategy)
        if logger is not None:
            logger.run_started(sys.argv, {"edges_path": edges_path, **config.to_dict()})

        edges = load_edges(Path(edges_path))
        if verbose:
            click.echo(f"Loaded {len(edges)} edges from {edges_path}", err=True)
            click.echo(f"Strategy: {strategy}", err=True)

        forest = minimum_spanning_forest(edges, config=config, logger=logger)

        lines = [json.dumps(edge.to_dict(), ensure_ascii=False) for edge in forest.edges]
        if output is not None:
            Path(output).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        else:
            for line in lines:
                click.echo(line)

        if logger is not None:
            logger.run_finished("success", time.perf_counter() - start)

        click.secho(
            f"✓ Selected {len(forest.edges)} edges across {forest.tree_count} tree(s), "
            f"total weight {forest.total_weight:g}",
            fg="green",
            err=output is None,
        )

    except (DisjointSetError, OSError) as e:
        trace = traceback.format_exc() if verbose else None
        if logger is not None:
            logger.error(type(e).__name__, str(e), traceback=trace)
            logger.run_finished("failed", time.perf_counter() - start)
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        if trace is not None:
            click.echo(trace, err=True)
        sys.exit(1)
    finally:
        if logger is not None:
            logger.close()


@cli.command()
@click.argument("edges_path", type=click.Path(exists=True, dir_okay=False))
@_strategy_option
def components(edges_path: str, strategy: str) -> None:
    """Print the connected components of EDGES_PATH, one JSON array per line.

    Examples
    --------
        disjointset components edges.jsonl
    """
    from disjointset.config import DisjointSetConfig
    from disjointset.errors import DisjointSetError
    from disjointset.spanning import connected_components, load_edges

    try:
        edges = load_edges(Path(edges_path))
        groups = connected_components(edges, config=DisjointSetConfig(strategy=strategy))
    except (DisjointSetError, OSError) as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)

    for group in groups:
        click.echo(json.dumps(group, ensure_ascii=False))


if __name__ == "__main__":
    cli()
