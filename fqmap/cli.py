"""
Command-line interface for fqmap.

Usage:
    fqmap generate fermions --num-terms 100 --max-orbital-index 31 --output h.json
    fqmap generate qubits --num-terms 100 --pretty
    fqmap convert --input h.json --output h_qubits.json
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from typing import List, Optional

import numpy as np

from fqmap import __version__
from fqmap.core.sumrepr import SumRepr
from fqmap.fermion.mappings import jordan_wigner
from fqmap.generate import random_fermi_sum, random_pauli_sum
from fqmap.io.json_sumrepr import json_to_sumrepr, sumrepr_to_json
from fqmap.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _write_sumrepr(repr: SumRepr, output: Optional[str], pretty: bool, encoding: str) -> None:
    obj = sumrepr_to_json(repr, encoding=encoding)
    text = json.dumps(obj, indent=2 if pretty else None, allow_nan=False)
    if output is None:
        sys.stdout.write(text + "\n")
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")


def _read_json(path: Optional[str]) -> dict:
    try:
        if path is None:
            return json.load(sys.stdin)
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON sum file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path or '<stdin>'}: {e}")


def cmd_generate(args: argparse.Namespace) -> None:
    """Generate a random Hamiltonian."""
    rng = np.random.default_rng(args.seed)
    if args.encoding == "fermions":
        repr = random_fermi_sum(args.num_terms, args.max_orbital_index, rng=rng)
    else:
        repr = random_pauli_sum(args.num_terms, rng=rng)
    logger.info("generated %d %s terms", len(repr), args.encoding)
    _write_sumrepr(repr, args.output, args.pretty, args.encoding)


def cmd_convert(args: argparse.Namespace) -> None:
    """Map a fermionic Hamiltonian to qubits with Jordan-Wigner."""
    fermi_sum = json_to_sumrepr(_read_json(args.input))
    if len(fermi_sum) > 0 and fermi_sum.encoding != "fermions":
        raise ValueError("convert expects a sum with 'fermions' encoding")

    start = time.perf_counter()
    pauli_sum = jordan_wigner(fermi_sum)
    elapsed = time.perf_counter() - start
    logger.info(
        "mapped %d fermionic terms to %d Pauli strings in %.1f ms",
        len(fermi_sum),
        len(pauli_sum),
        1e3 * elapsed,
    )
    _write_sumrepr(pauli_sum, args.output, args.pretty, "qubits")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fqmap",
        description="Map fermionic Hamiltonians to sums of Pauli strings",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log more (-v info, -vv debug)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    generate_parser = subparsers.add_parser("generate", help="Generate a random Hamiltonian")
    generate_parser.add_argument("encoding", choices=["fermions", "qubits"])
    generate_parser.add_argument("--num-terms", type=int, required=True, help="Number of draws")
    generate_parser.add_argument(
        "--max-orbital-index", type=int, default=63, help="Largest orbital index (fermions)"
    )
    generate_parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    generate_parser.add_argument("--output", "-o", default=None, help="Output file (default: stdout)")
    generate_parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    generate_parser.set_defaults(func=cmd_generate)

    convert_parser = subparsers.add_parser(
        "convert", help="Jordan-Wigner map a fermionic Hamiltonian"
    )
    convert_parser.add_argument("--input", "-i", default=None, help="Input file (default: stdin)")
    convert_parser.add_argument("--output", "-o", default=None, help="Output file (default: stdout)")
    convert_parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    convert_parser.set_defaults(func=cmd_convert)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose >= 2:
        configure_logging("DEBUG")
    elif args.verbose == 1:
        configure_logging("INFO")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"fqmap: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
