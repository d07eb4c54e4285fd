# ruff: noqa: T201
import argparse
import logging
import os
import pathlib
import sys

import tabulate

import correspond._matching as matching
import correspond._models as models
import correspond._util as util
from correspond.__about__ import __version__

DEFAULT_CONFIG_PATH = "~/.config/correspond/config.toml"
logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find one-to-one pairings in a bipartite graph"
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="command",
        help="for more info use: %(prog)s <command> -h",
    )

    def add_subcommand(name, *args, **kwargs):
        subparser = subparsers.add_parser(name, *args, **kwargs)
        subparser.set_defaults(func=globals()[f"_{name}_command"])
        subparser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logs"
        )
        subparser.add_argument(
            "graph", type=pathlib.Path, help="path to a graph description"
        )
        return subparser

    subparser = add_subcommand("match", help="print a maximum matching")
    subparser.add_argument(
        "-n", "--no-header", action="store_true", help="Hide table header"
    )

    add_subcommand(
        "check", help="check, that every vertex on both sides can be paired"
    )

    args = parser.parse_args(argv)

    config_file, explicit = _config_file()
    config = load_config(config_file)

    level = logging.DEBUG if args.verbose else logging.WARNING
    util.configure_logging(level, config.color)

    if not config_file.exists():
        log = logger.warning if explicit else logger.debug
        log('Config file "%s" not found, using defaults', config_file)

    # Don't use escape sequences, if stdout is not a tty
    if not config.color or not sys.stdout.isatty():
        for attr in dir(Format):
            if not attr.startswith("_"):
                setattr(Format, attr, "")

    try:
        return args.func(args, config)
    except KeyboardInterrupt:
        return 130


def _config_file():
    config_file = os.environ.get("CORRESPOND_CONFIG")
    explicit = bool(config_file)
    if not explicit:
        config_file = DEFAULT_CONFIG_PATH
    return pathlib.Path(config_file).expanduser(), explicit


def load_config(config_file):
    config = {}
    if config_file.exists():
        config = util.toml_loads(config_file.read_text())
    return models.Config.init_recursive(**config)


def load_graph(path):
    content = util.toml_loads(path.read_text())
    content.setdefault("name", path.stem)
    return models.GraphDesc.init_recursive(**content)


def _match_command(args, config):
    graph = load_graph(args.graph)
    pairs = matching.find_matching(graph.edges)

    headers = [] if args.no_header else ["Left", "Right"]
    if pairs:
        table = list(pairs.items())
        print(tabulate.tabulate(table, headers=headers, tablefmt=config.tablefmt))

    left_count = len(graph.left_vertices())
    right_count = len(graph.right_vertices())
    print(
        f"{Format.BOLD}{graph.name}:{Format.RESET} "
        f"{len(pairs)} pairs ({left_count} left, {right_count} right)"
    )
    return 0


def _check_command(args, config):
    graph = load_graph(args.graph)
    pairs = matching.find_matching(graph.edges)
    free_left, free_right = matching.find_unmatched(graph.edges, pairs, graph.right)

    if not free_left and not free_right:
        print(f"{Format.GREEN}{graph.name}: every vertex is paired{Format.RESET}")
        return 0

    rows = [("left", v) for v in free_left] + [("right", v) for v in free_right]
    print(f"{Format.RED}{graph.name}: {len(rows)} vertices unpaired{Format.RESET}")
    headers = ["Side", "Vertex"]
    print(tabulate.tabulate(rows, headers=headers, tablefmt=config.tablefmt))
    return 1


class Format:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
