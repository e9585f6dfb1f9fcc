# sbml_notes/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .constants import SBML_LEVEL_DEFAULT, SBML_VERSION_DEFAULT, TOOLKIT_VERSION_DEFAULT
from .convert import ConvertConfig, convert_model
from .diagnostics import print_issues
from .io import load_model
from .validate import ValidateConfig, validate_model_issues
from .writer import write_document


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Attach SBML notes and annotations to Reactome pathway records."
    )
    parser.add_argument(
        "--model",
        type=Path,
        required=True,
        help="Path to a split export directory or a single YAML export file.",
    )
    parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Output XML file for the annotated nodes",
    )
    parser.add_argument("--level", type=int, default=SBML_LEVEL_DEFAULT, help="SBML level")
    parser.add_argument("--version", type=int, default=SBML_VERSION_DEFAULT, help="SBML version")
    parser.add_argument(
        "--reactome-version",
        type=int,
        default=None,
        help="Database version for the provenance note (default: model.database.version)",
    )
    parser.add_argument(
        "--toolkit-version",
        type=str,
        default=TOOLKIT_VERSION_DEFAULT,
        help="Toolkit version recorded in the provenance note",
    )
    parser.add_argument(
        "--lenient-ampersand",
        action="store_true",
        help="Replace '&' runs with whitespace instead of the word 'and'.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=(
            "Fail on warnings (validation and conversion, e.g. unknown entity "
            "kinds or notes that had to be skipped). Errors always fail."
        ),
    )
    parser.add_argument(
        "--escalate",
        type=str,
        default="",
        help="Comma-separated warning codes to treat as errors.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint."""
    args = _build_parser().parse_args(argv)

    model = load_model(args.model)

    escalate = {c.strip() for c in args.escalate.split(",") if c.strip()}
    issues = validate_model_issues(model, ValidateConfig(escalate=escalate))
    errors = [iss for iss in issues if iss.severity == "error"]
    warnings = [iss for iss in issues if iss.severity == "warning"]
    print_issues(warnings)

    if errors or (args.strict and warnings):
        print_issues(errors)
        raise SystemExit(2)

    cfg = ConvertConfig(
        level=args.level,
        version=args.version,
        reactome_version=args.reactome_version,
        toolkit_version=args.toolkit_version,
        strict_ampersand=not args.lenient_ampersand,
    )
    result = convert_model(model, cfg)
    print_issues(result.diagnostics.issues)

    write_document(args.out, result)
    print(
        f"wrote {args.out} ({len(result.species)} species, {len(result.reactions)} reactions)",
        file=sys.stderr,
    )

    if args.strict and result.diagnostics.issues:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
