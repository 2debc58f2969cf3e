"""Console report (Rich)

Per-record pass/fail lines, the structure guide for failing records, and the
final summary with the word-count table and warnings.
"""

import json
import re
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from converter_validator.schema.sections import SectionSchema, get_section_schema, known_sections
from converter_validator.validation.models import RecordResult, ValidationReport
from converter_validator.validation.record import TOP_LEVEL_OPTIONAL_KEYS, TOP_LEVEL_REQUIRED_KEYS

TOP_LEVEL = "top-level"
RULE = "─" * 50

_SECTION_NAME = re.compile(r'Section "([^"]+)"')
_SECTION_PATH = re.compile(r"contentSections\.([A-Za-z0-9_]+)")


def problem_sections(errors: List[str]) -> List[str]:
    """Sections (and `top-level`) that the errors point at, in first-seen order"""
    found: List[str] = []
    for error in errors:
        if error.startswith("Missing required field:"):
            name: Optional[str] = TOP_LEVEL
        else:
            match = _SECTION_NAME.search(error) or _SECTION_PATH.search(error)
            name = match.group(1) if match else None
        if name and name not in found:
            found.append(name)
    return found


def print_record_result(console: Console, result: RecordResult, show_guide: bool = True) -> None:
    """Pass/fail line for one record, followed by its errors"""
    record_id = escape(result.record_id)
    console.print(f"📄 {result.index + 1}. Validating: {record_id}")

    if result.is_valid:
        console.print(f"   [green]✅ {record_id}: Valid[/green]")
    else:
        console.print(f"   [red]❌ {record_id}: {len(result.errors)} error(s)[/red]")
        for error in result.errors:
            console.print(f"      🔴 {escape(error)}")
        if show_guide:
            print_structure_guide(console, result)
    console.print()


def print_structure_guide(console: Console, result: RecordResult) -> None:
    """Expected structure for every section that had an error"""
    sections = problem_sections(result.errors)
    if not sections:
        return

    console.print(f"\n   [bold cyan]📖 STRUCTURE GUIDE for {escape(result.record_id)}:[/bold cyan]")
    console.print(f"   {RULE}")

    if TOP_LEVEL in sections:
        console.print(f"   TOP-LEVEL required keys: {', '.join(TOP_LEVEL_REQUIRED_KEYS)}")
        console.print(f"   TOP-LEVEL optional keys: {', '.join(TOP_LEVEL_OPTIONAL_KEYS)}")
        console.print(f"   {RULE}")

    notes: List[str] = []
    for name in sections:
        schema = get_section_schema(name)
        if schema is None or not schema.example:
            continue
        console.print(f"   {name.upper()} structure:")
        console.print(escape(_indent_json(schema.example, "     ")), highlight=False)
        console.print(f"   {RULE}")
        notes.extend(note for note in schema.notes if note not in notes)

    if notes:
        for note in notes:
            console.print(f"   ℹ️  {escape(note)}")
        console.print(f"   {RULE}")


def print_summary(console: Console, report: ValidationReport) -> None:
    """Final block: failed ids, word counts, warnings"""
    console.print("\n" + "=" * 60)
    console.print("[bold]🔬 VALIDATION SUMMARY[/bold]")
    console.print("=" * 60)

    if report.is_valid:
        console.print("[bold green]🎉 All converters passed validation![/bold green]")
    else:
        console.print(f"[red]❌ {report.failed} converter(s) failed validation:[/red]")
        for record_id in report.failed_ids:
            console.print(f"   - {escape(record_id)}")

    if report.word_counts:
        minimum = report.min_word_count
        table = Table(title="📊 WORD COUNT SUMMARY", show_header=True, header_style="bold magenta")
        table.add_column("Converter", style="cyan")
        table.add_column("Words", justify="right")
        table.add_column("Status", justify="center")
        for record_id, count in report.word_counts.items():
            status = "✅" if count >= minimum else f"❌ NEEDS {minimum - count} MORE"
            table.add_row(escape(record_id), str(count), status)
        console.print(table)

    if report.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in report.warnings:
            console.print(f"   • {escape(warning)}")

    console.print("=" * 60)

    if not report.is_valid:
        console.print("\n[bold red]🚨 Validation failed! Fix errors before deployment.[/bold red]")


def print_report(console: Console, report: ValidationReport, show_guide: bool = True) -> None:
    """Full console report of a run"""
    console.print(f"🔍 Validating {report.total} converter(s)...\n")
    for result in report.results:
        print_record_result(console, result, show_guide)
    print_summary(console, report)


def print_section_schema(console: Console, schema: SectionSchema) -> None:
    """Schema details of one section type (used by the `guide` command)"""
    console.print(f"[bold cyan]{schema.name}[/bold cyan]")
    console.print(f"   required keys: {', '.join(schema.required_keys) or '-'}")
    console.print(f"   optional keys: {', '.join(schema.optional_keys) or '-'}")
    for array in schema.arrays:
        item = array.item.describe() if array.item else "any"
        console.print(f"   {array.name}: array, at least {array.min_items} item(s) of {escape(item)}")
    for rule in schema.rules:
        console.print(f"   rule: {escape(rule.describe())}")
    if schema.example:
        console.print("   example:")
        console.print(escape(_indent_json(schema.example, "     ")), highlight=False)
    for note in schema.notes:
        console.print(f"   ℹ️  {escape(note)}")


def print_section_list(console: Console) -> None:
    """Table of all known section types"""
    table = Table(title="Known content sections", show_header=True, header_style="bold magenta")
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Required keys")
    table.add_column("Arrays")
    for name in known_sections():
        schema = get_section_schema(name)
        arrays = ", ".join(f"{a.name} (≥{a.min_items})" for a in schema.arrays)
        table.add_row(name, ", ".join(schema.required_keys), arrays or "-")
    console.print(table)


def _indent_json(data: dict, prefix: str) -> str:
    text = json.dumps(data, indent=2, ensure_ascii=False)
    return "\n".join(f"{prefix}{line}" for line in text.splitlines())
