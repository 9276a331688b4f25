"""Command-line interface for the DCP Packager.

WHY: Operators need a simple way to turn a set of wrapped essence files
into a validated package manifest from the terminal. The CLI wires the
whole pipeline (context creation, ingestion, reel assembly and
validation, aggregation, and export) behind a single command.

HOW: Each ``--reel`` flag lists the essence files of one reel, in order.
The CLI builds one PKL holding one CPL with those reels, runs the
selected formatters, and saves their output. Status messages go to
stderr; logging is configured from ``--log-level``.

RULES:
- At least one --reel is required; each reel needs a picture track
- Descriptive flags and overrides are validated by PackageOptions
- Output stem: --basename when given, else the PKL uuid
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-manifest-2.json)
- The file_done callback fires after every saved file
- Exit status is the ErrorCode of the failure, 0 on success
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import jsonschema

from dcp_packager import config
from dcp_packager.core.aggregate import add_cpl_to_pkl, add_pkl_to_context, add_reel_to_cpl
from dcp_packager.core.assembler import add_asset_to_reel
from dcp_packager.core.constants import RatingAgency
from dcp_packager.core.errors import DcpError, ErrorCode
from dcp_packager.core.factory import create_context, create_cpl, create_pkl, create_reel
from dcp_packager.core.ingest import add_asset
from dcp_packager.core.inspector import EssenceInspector
from dcp_packager.core.ir import Callbacks, PackageContext
from dcp_packager.core.validator import validate_reel
from dcp_packager.formatters import FORMATTERS
from dcp_packager.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def assemble_package(
    context: PackageContext,
    reel_files: Sequence[Sequence[str]],
    inspector: Optional[EssenceInspector] = None,
) -> PackageContext:
    """Build one PKL with one CPL from groups of essence files.

    WHY: This is the assembly core of the CLI, kept separate from argument
    parsing and file output so it can be driven directly by tests.

    HOW: For each group: create a reel, ingest and attach every file,
    validate the reel, and append it to the CPL. Then the CPL joins a new
    PKL and the PKL joins the context.

    Args:
        context: Fresh build context.
        reel_files: One sequence of essence paths per reel.
        inspector: Essence metadata reader passed to the ingestor.

    Returns:
        The same context, now holding the finished PKL.

    Raises:
        DcpError: On the first ingestion, assembly, or validation failure.
    """
    pkl = create_pkl(context)
    cpl = create_cpl(context)

    for index, files in enumerate(reel_files):
        reel = create_reel(context)
        for path in files:
            asset = add_asset(context, path, inspector=inspector)
            add_asset_to_reel(context, reel, asset)
        duration = validate_reel(reel, index)
        add_reel_to_cpl(cpl, reel)
        _status("  Reel {}: {} track(s), {} frames".format(
            index + 1, len(list(reel.tracks())), duration,
        ))

    add_cpl_to_pkl(pkl, cpl)
    add_pkl_to_context(context, pkl)
    return context


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Return ``{stem}{suffix}`` in output_dir, adding -2, -3, ... on conflict."""
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # e.g. "-manifest.json" → ("-manifest", ".json")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")
    return path


def _parse_formats(value: Optional[str]) -> List[str]:
    if not value:
        return list(FORMATTERS.keys())
    keys = [f.strip() for f in value.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            raise ValueError("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            ))
    return keys


def _options_from_args(args: argparse.Namespace) -> dict:
    options = {
        "issuer": args.issuer,
        "annotation": args.annotation,
        "title": args.title,
        "kind": args.kind,
        "rating": args.rating,
        "rating_agency": RatingAgency[args.rating_agency],
        "basename": args.basename,
        "aspect_ratio": args.aspect_ratio,
        "duration": args.duration,
        "entry_point": args.entry_point,
    }
    return {key: value for key, value in options.items() if value is not None}


def _run_pipeline(args: argparse.Namespace, callbacks: Optional[Callbacks] = None) -> int:
    """Execute the full build and return the process exit status."""
    output_dir = Path(args.output_dir).resolve() if args.output_dir else Path.cwd()
    if not output_dir.is_dir():
        print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
        return int(ErrorCode.ERROR)

    try:
        format_keys = _parse_formats(args.formats)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return int(ErrorCode.ERROR)

    try:
        context = create_context(_options_from_args(args))
        if callbacks is not None:
            context.callbacks = callbacks

        _status("Assembling {} reel(s)...".format(len(args.reel)))
        assemble_package(context, args.reel)
        _status("  Package namespace: {}".format(context.namespace.name))

        stem = context.basename or context.pkls[0].uuid
        _status("Formatting output...")
        saved_files: List[Path] = []
        for key in format_keys:
            formatter = FORMATTERS[key]()
            _status("  Running {} formatter...".format(formatter.name))
            for output in formatter.format(context):
                saved_path = _save_output(output, stem, output_dir)
                saved_files.append(saved_path)
                context.callbacks.file_done()
                _status("  Saved: {}".format(saved_path.name))
    except DcpError as e:
        logger.debug("Build stopped with %s", e.code.name)
        print("Error: {}".format(e), file=sys.stderr)
        return int(e.code)
    except jsonschema.ValidationError as e:
        print("Error: Manifest failed schema validation: {}".format(e.message), file=sys.stderr)
        return int(ErrorCode.ERROR)

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return int(ErrorCode.NO_ERROR)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="dcp_packager",
        description="Assemble and validate a DCP manifest (PKL, CPL, reels) "
                    "from wrapped essence files.",
    )

    parser.add_argument(
        "--reel",
        action="append",
        nargs="+",
        required=True,
        metavar="FILE",
        help="Essence files of one reel. Repeat for each reel, in order.",
    )
    parser.add_argument("--basename", default=None,
                        help="Use this instead of the UUID in PKL/CPL filenames.")
    parser.add_argument("--title", default=None, help="Content title of the CPL.")
    parser.add_argument("--annotation", default=None, help="Annotation text.")
    parser.add_argument("--issuer", default=None, help="Issuer of the package.")
    parser.add_argument(
        "--kind",
        default=None,
        help="Content kind. One of: {} (default: {}).".format(
            ", ".join(config.CONTENT_KINDS), config.DEFAULT_KIND
        ),
    )
    parser.add_argument("--rating", default=None, help="Rating label of the CPL.")
    parser.add_argument(
        "--rating-agency",
        default=RatingAgency.NONE.name,
        choices=[agency.name for agency in RatingAgency],
        help="Rating authority (default: %(default)s).",
    )
    parser.add_argument("--aspect-ratio", default=None,
                        help="Force this aspect ratio on every asset.")
    parser.add_argument("--duration", type=int, default=None,
                        help="Shorten every asset to this many frames.")
    parser.add_argument("--entry-point", type=int, default=None,
                        help="Start playback of every asset at this frame.")
    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of outputs. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )
    parser.add_argument("--output-dir", default=None,
                        help="Directory to save output files (default: current directory).")
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=list(config.LOG_LEVEL_NAMES),
        help="Diagnostic verbosity (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None, callbacks: Optional[Callbacks] = None) -> None:
    """Entry point for ``python -m dcp_packager``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - callbacks, when given, receive the build's progress notifications
    - Always exits via SystemExit with the pipeline's status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=config.map_log_level(args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    sys.exit(_run_pipeline(args, callbacks))


if __name__ == "__main__":
    main()
