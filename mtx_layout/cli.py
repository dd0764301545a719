"""Command-line interface for MatrixMarket ingestion and layout conversion.

Usage:
    python -m mtx_layout graph -m matrix.mtx > graph.json
    python -m mtx_layout info -m matrix.mtx
    python -m mtx_layout layout -m matrix.mtx --element-type float32 --modulo 8
    python -m mtx_layout plot -m matrix.mtx -o pattern.png

Exit codes:
    0  success
    1  matrix file could not be opened or read
    2  matrix file is malformed or of an unsupported type
    3  invalid argument or configuration
"""

import argparse
import logging
import sys
from typing import List, Optional

from mtx_layout.config import (
    ConfigurationError,
    ElementType,
    create_validated_config,
    get_default,
)
from mtx_layout.config.defaults import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL
from mtx_layout.core.errors import InvalidArgumentError, MatrixFormatError
from mtx_layout.core.parser import parse_matrix_market
from mtx_layout.core.statistics import max_row_length, mean_row_length, min_row_length
from mtx_layout.export.graph_json import write_graph_json
from mtx_layout.layout.ellpack import build_padded_layout

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_FORMAT_ERROR = 2
EXIT_INVALID_ARGUMENT = 3


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else str(get_default("logging.level", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=get_default("logging.format", DEFAULT_LOG_FORMAT),
        stream=sys.stderr,
    )


def cmd_graph(args: argparse.Namespace) -> None:
    """Write the nodes/edges JSON view of the matrix to stdout."""
    store = parse_matrix_market(args.matrixfile)
    logger.info("Found %d edges.", store.nonzero_count)
    logger.info("Found %d vertices.", max(store.row_count, store.col_count))
    write_graph_json(store, sys.stdout)
    logger.info("finished.")


def cmd_info(args: argparse.Namespace) -> None:
    """Print dimensions, counts and row statistics."""
    store = parse_matrix_market(args.matrixfile)

    print(f"file:            {args.matrixfile}")
    print(f"type:            {store.field} {store.symmetry}")
    print(f"shape:           {store.row_count} x {store.col_count}")
    print(f"declared nnz:    {store.nonzero_count}")
    print(f"stored entries:  {store.entry_count}")
    print(f"min value:       {store.min_value}")
    print(f"max value:       {store.max_value}")
    print(f"row length max:  {max_row_length(store)}")
    print(f"row length min:  {min_row_length(store)}")
    print(f"row length mean: {mean_row_length(store)}")


def cmd_layout(args: argparse.Namespace) -> None:
    """Build the padded SOA-ELLPACK layout and print a summary."""
    overrides = {}
    if args.element_type is not None:
        overrides["element_type"] = args.element_type
    if args.modulo is not None:
        overrides["padding_modulo"] = args.modulo
    if args.zero is not None:
        overrides["zero_value"] = args.zero
    config = create_validated_config(**overrides)

    store = parse_matrix_market(args.matrixfile)
    padded = build_padded_layout(store, config)

    cells = padded.row_count * padded.padded_length
    fill = store.entry_count / cells if cells else 0.0
    print(f"element type:    {config.element_type.value}")
    print(f"rows:            {padded.row_count}")
    print(f"max row length:  {max_row_length(store)}")
    print(f"padded length:   {padded.padded_length} (modulo {config.padding_modulo})")
    print(f"cells:           {cells}")
    print(f"fill ratio:      {fill:.4f}")

    for r in range(min(args.show_rows, padded.row_count)):
        print(f"row {r}: columns={padded.columns[r].tolist()} values={padded.values[r].tolist()}")


def cmd_plot(args: argparse.Namespace) -> None:
    """Save a sparsity pattern (and optionally a row length histogram) image."""
    # Imported here so the other commands do not pay for matplotlib
    from mtx_layout.utils.visualization import plot_row_length_histogram, plot_sparsity_pattern

    store = parse_matrix_market(args.matrixfile)
    plot_sparsity_pattern(store, title=str(args.matrixfile), save_path=args.output)
    if args.histogram:
        plot_row_length_histogram(store, save_path=args.histogram)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mtx-layout",
        description="MatrixMarket ingestion and ELLPACK layout conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Graph JSON for a matrix
  mtx-layout graph -m bcsstk01.mtx > bcsstk01.json

  # Row statistics
  mtx-layout info -m bcsstk01.mtx

  # Padded float32 layout aligned to 8
  mtx-layout layout -m bcsstk01.mtx --element-type float32 --modulo 8 --show-rows 2
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    def add_matrix_arg(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("-m", "--matrixfile", required=True, help="Input matrix file")

    graph_parser = subparsers.add_parser("graph", help="Write graph JSON (nodes/edges) to stdout")
    add_matrix_arg(graph_parser)

    info_parser = subparsers.add_parser("info", help="Show matrix dimensions and row statistics")
    add_matrix_arg(info_parser)

    layout_parser = subparsers.add_parser("layout", help="Summarize the padded SOA-ELLPACK layout")
    add_matrix_arg(layout_parser)
    layout_parser.add_argument(
        "--element-type",
        choices=[et.value for et in ElementType],
        default=None,
        help="Value type (default: layout.element_type from defaults.yaml)",
    )
    layout_parser.add_argument(
        "--modulo",
        type=int,
        default=None,
        help="Row width alignment (default: layout.padding_modulo from defaults.yaml)",
    )
    layout_parser.add_argument(
        "--zero",
        type=float,
        default=None,
        help="Padding value (default: layout.zero_value from defaults.yaml)",
    )
    layout_parser.add_argument(
        "--show-rows",
        type=int,
        default=0,
        help="Print the first N padded rows (default: 0)",
    )

    plot_parser = subparsers.add_parser("plot", help="Save a sparsity pattern image")
    add_matrix_arg(plot_parser)
    plot_parser.add_argument("-o", "--output", required=True, help="Output image path")
    plot_parser.add_argument("--histogram", default=None, help="Also save a row length histogram here")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    commands = {
        "graph": cmd_graph,
        "info": cmd_info,
        "layout": cmd_layout,
        "plot": cmd_plot,
    }
    if args.command not in commands:
        parser.print_help(sys.stderr)
        return EXIT_INVALID_ARGUMENT

    try:
        commands[args.command](args)
    except OSError as e:
        logger.error("I/O error: %s", e)
        return EXIT_IO_ERROR
    except MatrixFormatError as e:
        logger.error("Cannot process matrix file %s: %s", args.matrixfile, e)
        return EXIT_FORMAT_ERROR
    except (InvalidArgumentError, ConfigurationError) as e:
        logger.error("%s", e)
        return EXIT_INVALID_ARGUMENT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
