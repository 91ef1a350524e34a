"""CLI entrypoint for transcriptkit."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import BaseModel

from transcriptkit.cefr import DictionaryCache, estimate_breakdown
from transcriptkit.config import load_config
from transcriptkit.core import NormalizationSettings, analyze_transcript, normalize_transcript
from transcriptkit.io import TranscriptFileError, read_segments, to_json, write_json
from transcriptkit.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="transcriptkit",
        description="Transcript sentence normalization and CEFR difficulty estimation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("normalize", "Rewrite transcript segments into well-formed sentences"),
        ("difficulty", "Estimate the CEFR level of a transcript"),
        ("analyze", "Normalize a transcript and estimate its CEFR level"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("transcript", help="Path to a transcript JSON file")
        command.add_argument("--language", default="en", help="Language code (default: en)")
        command.add_argument(
            "--captions",
            action="store_true",
            help="Input items are raw captions timed in seconds",
        )
        command.add_argument(
            "-o",
            "--output",
            default=None,
            help="Output JSON path. If omitted, prints to stdout.",
        )
        if name != "difficulty":
            command.add_argument(
                "--pause-ms",
                type=int,
                default=None,
                help="Override the sentence-break pause threshold in milliseconds",
            )
        if name != "normalize":
            command.add_argument(
                "--data-dir",
                default=None,
                help="Directory holding <language>.json CEFR dictionaries",
            )

    serve = subparsers.add_parser("serve", help="Run the transcriptkit HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    setup_logging(config.log_level)

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`transcriptkit serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        uvicorn.run(
            "transcriptkit.api:app",
            host=args.host or config.api_host,
            port=args.port or config.api_port,
            workers=config.workers,
            reload=False,
        )
        return 0

    try:
        segments = read_segments(args.transcript, captions=args.captions)
    except TranscriptFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    settings = NormalizationSettings.from_config(config)
    pause_ms = getattr(args, "pause_ms", None)
    if pause_ms is not None:
        if pause_ms < 0:
            print("error: --pause-ms must be >= 0", file=sys.stderr)
            return 2
        settings = NormalizationSettings(
            enabled=settings.enabled,
            pause_threshold_ms=pause_ms,
            languages=settings.languages,
        )
    data_dir = getattr(args, "data_dir", None)
    cache = DictionaryCache(data_dir or config.cefr_data_dir)

    result: BaseModel
    if args.command == "normalize":
        result = normalize_transcript(segments, args.language, settings)
        logger.info("Normalization reason: %s", result.meta.reason)
    elif args.command == "difficulty":
        result = estimate_breakdown(segments, args.language, cache=cache)
        logger.info("CEFR estimate: %s", result.level)
    else:
        result = analyze_transcript(segments, args.language, settings=settings, cache=cache)

    if args.output:
        write_json(result, args.output)
        print(f"Wrote {args.command} JSON to {args.output}")
        return 0
    print(to_json(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
