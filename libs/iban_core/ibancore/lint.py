#!/usr/bin/env python3
"""
IBAN Linter CLI

Usage:
    python -m ibancore.lint <iban> [<iban> ...]
    python -m ibancore.lint --file ibans.txt

Examples:
    python -m ibancore.lint "GB29 NWBK 6016 1331 9268 19"
    python -m ibancore.lint --file exports/payees.txt --json-output
    python -m ibancore.lint --generate DE --count 3 --seed 7
"""
import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from .errors import ParseError, RegistryError
from .generator import generate
from .jsonutil import canonical_json_bytes
from .validators import validate_iban


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iban-lint",
        description="Validate IBANs against the country registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "GB29 NWBK 6016 1331 9268 19"
  %(prog)s --file payees.txt --json-output
  %(prog)s --generate FR --count 5
        """
    )

    parser.add_argument(
        "ibans",
        nargs="*",
        help="IBANs to validate (quote values that contain spaces)"
    )

    parser.add_argument(
        "-f", "--file",
        help="Read IBANs from a file, one per line"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only show invalid IBANs"
    )

    parser.add_argument(
        "--json-output",
        action="store_true",
        help="Output results in JSON format"
    )

    parser.add_argument(
        "-g", "--generate",
        metavar="COUNTRY",
        help="Print random valid IBANs for a country instead of validating"
    )

    parser.add_argument(
        "-n", "--count",
        type=int,
        default=1,
        help="Number of IBANs to generate (default: 1)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for --generate"
    )

    return parser


def _generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    try:
        values = [generate(args.generate, rng) for _ in range(max(args.count, 0))]
    except ParseError as e:
        print(f"Error: {args.generate}: {e}", file=sys.stderr)
        return 2
    if args.json_output:
        sys.stdout.write(canonical_json_bytes({"generated": values}).decode("utf-8"))
    else:
        for value in values:
            print(value)
    return 0


def _cli(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.generate:
            return _generate(args)

        inputs: List[str] = list(args.ibans)
        if args.file:
            path = Path(args.file)
            if not path.is_file():
                print(f"Error: File does not exist: {path}", file=sys.stderr)
                return 2
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                print(f"Error: cannot read {path}: {e}", file=sys.stderr)
                return 2
            inputs.extend(line.strip() for line in text.splitlines() if line.strip())

        if not inputs:
            print("Error: no IBANs given", file=sys.stderr)
            return 2

        results = [validate_iban(text) for text in inputs]
    except RegistryError as e:
        print(f"Error: registry unavailable: {e}", file=sys.stderr)
        return 2

    invalid = sum(1 for r in results if not r["valid"])

    if args.json_output:
        report = {
            "results": results,
            "summary": {"total": len(results), "valid": len(results) - invalid, "invalid": invalid},
        }
        sys.stdout.write(canonical_json_bytes(report).decode("utf-8"))
    else:
        for text, result in zip(inputs, results):
            if result["valid"]:
                if not args.quiet:
                    print(f"OK      {result['metadata']['formatted']}")
            else:
                print(f"INVALID {text}: {'; '.join(result['errors'])}")
        if not args.quiet:
            print(f"\nSummary: {len(results)} checked, {len(results) - invalid} valid, {invalid} invalid")

    return 1 if invalid else 0


def main():
    """Main CLI entry point."""
    sys.exit(_cli())


if __name__ == "__main__":
    main()
