import os
import sys
from datetime import datetime
import argparse
from typing import List, Optional
from foldersleuth.core import analyze, derive_findings, format_bytes, InvalidPathError
from foldersleuth.core.models import AnalysisReport
from foldersleuth.ui import generate_html_report


def _status(message: str) -> None:
    # stdout is reserved for the JSON report
    print(message, file=sys.stderr)


def print_summary(report: AnalysisReport) -> None:
    _status(f"Files: {report.total_files} | Folders: {report.total_folders} | "
            f"Size: {format_bytes(report.total_size)} | Max depth: {report.max_depth}")
    if report.oldest_file and report.newest_file:
        _status(f"Oldest: {report.oldest_file.name} ({report.oldest_file.modified}) | "
                f"Newest: {report.newest_file.name} ({report.newest_file.modified}) | "
                f"Average age: {report.avg_file_age_days:.0f} days")
    for finding in derive_findings(report):
        _status(f"Finding: {finding.message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FolderSleuth: Profile a directory tree (sizes, ages, types, naming, duplicate names).")
    parser.add_argument("directory", metavar="DIRECTORY", type=str, help="The root directory to analyze.")
    parser.add_argument("-o", "--output", type=str, default=None, help="Path to save the JSON report. Defaults to stdout.")
    parser.add_argument("--html", type=str, default=None, help="Also render the HTML case notes to this path.")
    parser.add_argument("--indent", type=int, default=2, help="Indentation of the JSON report.")
    parser.add_argument("--quiet", action="store_true", help="Do not show progress bars.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    scan_path = args.directory

    _status(f"FolderSleuth started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    try:
        report = analyze(scan_path, show_progress=not args.quiet)
    except InvalidPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report_json = report.to_json(indent=args.indent)
    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(report_json)
            _status(f"JSON report saved to {args.output}")
        except OSError as e:
            print(f"Error writing JSON report to {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        print(report_json)

    if args.html:
        _status(f"Generating HTML report at: {args.html}")
        generate_html_report(report, args.html, os.path.abspath(scan_path))

    print_summary(report)
    _status(f"FolderSleuth finished at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
