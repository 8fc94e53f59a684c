from __future__ import annotations

import argparse

from patterndetect.cli.commands.scan import ScanOptions, run_scan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="patterndetect")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Find near-duplicate code patterns across files")
    scan.add_argument("path", nargs="*", default=["."])
    scan.add_argument("--format", choices=["json", "text"], default="text")
    scan.add_argument("--out", default=None)
    scan.add_argument("--min-similarity", type=float, default=None)
    scan.add_argument("--min-lines", type=int, default=None)
    scan.add_argument("--max-blocks", type=int, default=None)
    scan.add_argument("--batch-size", type=int, default=None)
    scan.add_argument("--approx", dest="approx", action="store_true", default=None)
    scan.add_argument("--no-approx", dest="approx", action="store_false", default=None)
    scan.add_argument("--min-shared-tokens", type=int, default=None)
    scan.add_argument("--max-candidates", type=int, default=None)
    scan.add_argument("--fast", dest="fast_mode", action="store_true", default=None)
    scan.add_argument("--exact", dest="fast_mode", action="store_false", default=None)
    budget = scan.add_mutually_exclusive_group()
    budget.add_argument("--max-comparisons", type=int, default=None)
    budget.add_argument("--unlimited-comparisons", action="store_true")
    scan.add_argument("--include-globs", action="append", default=None)
    scan.add_argument("--exclude-globs", action="append", default=None)
    scan.add_argument("--no-progress", action="store_true")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    if args.out is None:
        args.out = "patterndetect_report.json" if args.format == "json" else "-"
    if args.command == "scan":
        run_scan(
            ScanOptions(
                paths=args.path,
                fmt=args.format,
                out_path=args.out,
                min_similarity=args.min_similarity,
                min_lines=args.min_lines,
                max_blocks=args.max_blocks,
                batch_size=args.batch_size,
                approx=args.approx,
                min_shared_tokens=args.min_shared_tokens,
                max_candidates_per_block=args.max_candidates,
                fast_mode=args.fast_mode,
                max_comparisons=args.max_comparisons,
                unlimited_comparisons=args.unlimited_comparisons,
                include_globs=args.include_globs,
                exclude_globs=args.exclude_globs,
                show_progress=not args.no_progress,
            )
        )
