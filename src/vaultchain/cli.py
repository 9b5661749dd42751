"""CLI entry point: argument parsing, logging setup, and the fail-fast run of VaultChain.execute()."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from vaultchain import __version__
from vaultchain.app import VaultChain
from vaultchain.config import AppConfig, LoggingSettings, load_logging_settings

logger = logging.getLogger(__name__)

# Short options that take the rest of a cluster as their value (-ifoo, -vo=out).
_VALUE_LETTERS = frozenset("io")


def setup_logging(verbose: bool = False, settings: LoggingSettings | None = None) -> None:
    """
    Configure the package logger. DEBUG with --verbose, otherwise the level
    from the settings file; unknown level names mean INFO.
    """
    if settings is None:
        settings = load_logging_settings()
    level = logging.DEBUG if verbose else logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    root = logging.getLogger("vaultchain")
    root.setLevel(level)
    if root.handlers:
        return

    fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    root.addHandler(console)
    if settings.file:
        try:
            fh = logging.FileHandler(settings.file, encoding="utf-8")
        except OSError:
            return
        fh.setFormatter(fmt)
        root.addHandler(fh)


def build_parser() -> argparse.ArgumentParser:
    # No -h/--help and no prefix matching: only exact names in the table are options.
    parser = argparse.ArgumentParser(
        prog="vaultchain",
        description="Run the VaultChain application.",
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    # A bare -i/-o parses as an empty string instead of aborting.
    parser.add_argument("-i", "--input", nargs="?", const="", default=None, help="Input location (not used yet).")
    parser.add_argument("-o", "--output", nargs="?", const="", default=None, help="Output location (not used yet).")
    return parser


def _split_cluster(token: str) -> list[str]:
    """
    Expand a short-flag cluster: -vx -> -v -x, -vifoo -> -v -i=foo.

    A letter in _VALUE_LETTERS takes the rest of the token as its value.
    A non-letter ends the cluster and the remainder becomes a stray token.
    """
    out: list[str] = []
    for pos in range(1, len(token)):
        letter = token[pos]
        rest = token[pos + 1 :]
        if letter in _VALUE_LETTERS:
            value = rest[1:] if rest.startswith("=") else rest
            out.append(f"-{letter}={value}" if value else f"-{letter}")
            break
        if not letter.isalpha():
            out.append(token[pos:])
            break
        out.append(f"-{letter}")
    return out


def normalize_argv(argv: Sequence[str]) -> list[str]:
    """
    Rewrite tokens argparse would reject into shapes it ignores or accepts.

    Short clusters are split, and --verbose=VALUE becomes --verbose unless
    VALUE is "false". Everything after a bare "--" is left alone.
    """
    out: list[str] = []
    for index, token in enumerate(argv):
        if token == "--":
            out.extend(argv[index:])
            break
        if token.startswith("--verbose="):
            if token.split("=", 1)[1] != "false":
                out.append("--verbose")
        elif len(token) > 2 and token[0] == "-" and token[1].isalpha():
            out.extend(_split_cluster(token))
        else:
            out.append(token)
    return out


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse argv (default: sys.argv[1:]).

    Unrecognized flags and stray tokens are not an error; they are kept on
    args.ignored and otherwise dropped.
    """
    if argv is None:
        argv = sys.argv[1:]
    args, unknown = build_parser().parse_known_args(normalize_argv(argv))
    args.ignored = unknown
    return args


def build_config(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        verbose=bool(getattr(args, "verbose", False)),
        input=getattr(args, "input", None),
        output=getattr(args, "output", None),
    )


async def run_entry(app: VaultChain) -> Exception | None:
    """Await app.execute() once; return the exception it raised, or None on success."""
    try:
        await app.execute()
    except Exception as e:
        return e
    return None


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)
    app = VaultChain(build_config(args))

    error = asyncio.run(run_entry(app))
    if error is not None:
        logger.debug("Entry operation failed", exc_info=error)
        print(str(error) or repr(error), file=sys.stderr)
        sys.exit(1)
