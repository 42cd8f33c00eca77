#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for phonetic confusion analysis.

Usage:
    namekit analyze names.txt -o name_confusion_analysis.txt
    namekit analyze names.txt --json --workers 4
    namekit complexity "Katherine" -v
    namekit encode "Catherine"
"""

import argparse
import logging
import sys

from namekit import __version__
from namekit.models import NameKitError

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                         for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_analyze(args, out: Output):
    """Cluster and rank same-sounding names from an input file."""
    from namekit.clusters import ClusterBuilder
    from namekit.ingest import read_records
    from namekit.pipeline import ConfusionPipeline
    from namekit.profiler import PipelineProfiler
    from namekit.report import clusters_to_json, print_summary, write_report

    profiler = PipelineProfiler(enabled=args.profiling)
    builder = ClusterBuilder(workers=args.workers) if args.workers else None
    pipeline = ConfusionPipeline(builder=builder, profiler=profiler)

    pairs = read_records(args.input)
    clusters = pipeline.run(pairs)
    path = write_report(clusters, args.output)

    if args.json:
        print(clusters_to_json(clusters))
    else:
        out.print(f"Analysis complete. Found {len(clusters)} confusing clusters.")
        out.print(f"Report written to {path}")
        if not out.quiet:
            print_summary(clusters, top=args.top)

    if args.profiling:
        out.print(profiler.report())
        if args.profile_output:
            profiler.save_json(args.profile_output)
            out.print(f"Profile data saved to {args.profile_output}")

    if args.verbose:
        from namekit.phonetic_similarity import cache_info
        for fn, info in cache_info().items():
            logger.debug(f"{fn} cache: {info}")

    return 0


def cmd_complexity(args, out: Output):
    """Show the complexity score of a single name."""
    from namekit.complexity import ComplexityScorer

    breakdown = ComplexityScorer().breakdown(args.name)
    out.print(f"{args.name}: {breakdown.total:.3f}")
    if args.verbose:
        out.print()
        out.table(['Term', 'Value'], [[term, f"{value:.3f}"] for term, value in breakdown.terms], [20, 10])
    return 0


def cmd_encode(args, out: Output):
    """Show the phonetic bucket key of a name."""
    from namekit.indexer import PhoneticIndexer

    code = PhoneticIndexer().code_for(args.name)
    out.print(f"{args.name}: {code.display()}")
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - Phonetic Name Confusion Analysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s analyze names.txt
  %(prog)s analyze names.txt -o report.txt --top 10
  %(prog)s analyze names.txt --json --workers 4
  %(prog)s complexity "Katherine" -v
  %(prog)s encode "Catherine"
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- analyze ---
    p = subparsers.add_parser('analyze', aliases=['a'], help='Find and rank confusable name clusters')
    p.add_argument('input', help='Input file with one "name,value" record per line')
    p.add_argument('--output', '-o', help='Report path (default: report.output_path from app.yaml)')
    p.add_argument('--top', '-t', type=int, help='Clusters shown in the console summary')
    p.add_argument('--workers', '-w', type=int, help='Threads used for cluster scoring')
    p.add_argument('--json', '-j', action='store_true', help='Print clusters as JSON')
    p.add_argument('--profiling', action='store_true', help='Time each pipeline stage')
    p.add_argument('--profile-output', help='Save profiling data to JSON file')
    p.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    # --- complexity ---
    p = subparsers.add_parser('complexity', aliases=['c'], help='Score the complexity of a name')
    p.add_argument('name', help='Name to score')
    p.add_argument('--verbose', '-v', action='store_true', help='Show every term')

    # --- encode ---
    p = subparsers.add_parser('encode', aliases=['e'], help='Show the phonetic code of a name')
    p.add_argument('name', help='Name to encode')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'a': 'analyze', 'c': 'complexity', 'e': 'encode'}
    command = cmd_map.get(args.command, args.command)

    configure_logging(getattr(args, 'verbose', False))
    out = Output(quiet=getattr(args, 'quiet', False))

    commands = {
        'analyze': cmd_analyze,
        'complexity': cmd_complexity,
        'encode': cmd_encode,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (NameKitError, ValueError, OSError) as e:
            out.error(str(e))
            if getattr(args, 'verbose', False):
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
