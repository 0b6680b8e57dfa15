# foldersleuth/ui/html_reporter.py
import html
import sys
from datetime import datetime
from foldersleuth.core.file_classifier import classify_file
from foldersleuth.core.findings import derive_findings, format_bytes
from foldersleuth.core.models import (
    AnalysisReport, DuplicateGroup, FileRecord, NamingTally, TypeBucket, NO_EXTENSION_KEY,
)

TOP_FILE_TYPES = 5
SUSPECT_COUNT = 3


def _type_label(extension: str) -> str:
    return '[no ext]' if extension == NO_EXTENSION_KEY else extension.upper()


def _file_line(label: str, record: FileRecord) -> str:
    return (f"<p>{label}: <span class=\"file-path\">{html.escape(record.name)}</span> "
            f"<span class=\"file-details\">({html.escape(record.modified)})</span></p>")


def generate_html_report(report: AnalysisReport, output_html_path: str, root_dir: str = "") -> None:
    """
    Generates the HTML "case board" for an analysis report.

    Args:
        report (AnalysisReport): The report returned by analyze().
        output_html_path (str): Path to save the generated HTML file.
        root_dir (str): The analyzed folder, shown in the page title.
    """

    # Basic inline CSS for readability
    html_style = """
    <style>
        body { font-family: monospace; margin: 20px; background-color: #f4efe6; color: #333; }
        h1 { color: #333; border-bottom: 2px solid #8b5a2b; padding-bottom: 10px; }
        h2 { color: #8b5a2b; margin-top: 30px; border-bottom: 1px solid #ccc; padding-bottom: 5px;}
        ul { list-style-type: none; padding-left: 0; }
        li { background-color: #fff; border: 1px solid #ddd; margin-bottom: 8px; padding: 10px; border-radius: 4px; }
        .file-path { font-weight: bold; }
        .file-details { font-size: 0.9em; color: #555; }
        .summary { background-color: #fdf6e3; border-left: 6px solid #8b5a2b; padding: 15px; margin-bottom: 20px; }
        .bar { display: inline-block; height: 10px; background-color: #8b5a2b; }
        .finding { color: #a33; }
    </style>
    """

    title = html.escape(root_dir) if root_dir else "Analysis"
    html_content = f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>FolderSleuth Case Notes - {title}</title>
        {html_style}
    </head>
    <body>
        <h1>FolderSleuth - Case Notes: {title}</h1>
        <p class="file-details">Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}</p>

        <div class="summary">
            <p><strong>Summary:</strong></p>
            <p>Total files: {report.total_files}</p>
            <p>Total folders: {report.total_folders}</p>
            <p>Total size: {format_bytes(report.total_size)}</p>
            <p>Max depth: {report.max_depth}</p>
        </div>

        <h2>Suspects of Interest</h2>
        <ul>
    """

    for rank, record in enumerate(report.largest_files[:SUSPECT_COUNT], start=1):
        html_content += f"""
            <li>
                #{rank} <span class="file-path">{html.escape(record.name)}</span>
                <br>
                <span class="file-details">Size: {format_bytes(record.size)} | Category: {classify_file(record)} |
                Modified: {html.escape(record.modified)} | {html.escape(record.path)}</span>
            </li>
        """
    html_content += "</ul>"

    html_content += "<h2>File Type Distribution</h2><ul>"
    top_types = sorted(report.file_types.items(), key=lambda item: item[1].count, reverse=True)[:TOP_FILE_TYPES]
    for extension, bucket in top_types:
        share = (bucket.count / report.total_files * 100) if report.total_files else 0
        html_content += f"""
            <li>
                <span class="file-path">{html.escape(_type_label(extension))}</span>
                <span class="bar" style="width: {share:.0f}px"></span>
                <span class="file-details">{bucket.count} files | {format_bytes(bucket.total_size)} |
                avg {format_bytes(bucket.average_size)}</span>
            </li>
        """
    html_content += "</ul>"

    if report.oldest_file and report.newest_file:
        html_content += f"""
        <h2>Timeline</h2>
        {_file_line("Oldest file", report.oldest_file)}
        {_file_line("Newest file", report.newest_file)}
        <p>Average age: {report.avg_file_age_days:.0f} days</p>
        """

    findings = derive_findings(report)
    html_content += "<h2>Key Findings</h2><ul>"
    if not findings:
        html_content += "<li>Nothing unusual.</li>"
    for finding in findings:
        html_content += f"<li class=\"finding\">{html.escape(finding.message)}</li>"
    html_content += "</ul>"

    naming = report.naming_stats
    html_content += f"""
        <h2>Naming Conventions</h2>
        <p class="file-details">snake_case: {naming.snake_case_count} |
        kebab-case: {naming.kebab_case_count} | camelCase: {naming.camel_case_count}</p>
    """

    if report.duplicate_patterns:
        html_content += "<h2>Duplicate Name Patterns</h2><ul>"
        for group in report.duplicate_patterns:
            names = ", ".join(html.escape(name) for name in group.files)
            html_content += f"""
            <li>
                <span class="file-path">{html.escape(group.pattern)}</span>
                <span class="file-details">({group.count} files)</span>
                <br>
                <span class="file-details">{names}</span>
            </li>
            """
        html_content += "</ul>"

    html_content += """
    </body>
    </html>
    """

    try:
        with open(output_html_path, 'w', encoding='utf-8') as f:
            f.write(html_content)
    except IOError as e:
        print(f"Error writing HTML report to {output_html_path}: {e}", file=sys.stderr)


if __name__ == '__main__':
    # Example Usage (for testing the reporter directly)
    now = datetime.now().astimezone()
    f1 = FileRecord(path="/case/evidence.pdf", name="evidence.pdf", extension="pdf", size=2048000, modified_at=now, depth=1)
    f2 = FileRecord(path="/case/notes/evidence.txt", name="evidence.txt", extension="txt", size=1024, modified_at=now, depth=2)
    f3 = FileRecord(path="/case/Photo_01.JPG", name="Photo_01.JPG", extension="jpg", size=512000, modified_at=now, depth=1)

    mock_report = AnalysisReport(
        total_files=3, total_size=f1.size + f2.size + f3.size, total_folders=1,
        file_types={'pdf': TypeBucket(1, f1.size, f1.size), 'txt': TypeBucket(1, f2.size, f2.size),
                    'jpg': TypeBucket(1, f3.size, f3.size)},
        largest_files=[f1, f3, f2], oldest_file=f1, newest_file=f3, max_depth=2, hidden_file_count=0,
        duplicate_patterns=[DuplicateGroup(pattern="evidence", files=["evidence.pdf", "evidence.txt"])],
        naming_stats=NamingTally(snake_case_count=1),
    )

    report_path = "foldersleuth_report_test.html"
    generate_html_report(mock_report, report_path, "/case")
    print(f"Generated dummy report: {report_path}")
