"""CLI interface

Typer commands, Rich console output. A bare path is shorthand for
`validate <path>`.
"""

import json
import typer
import yaml
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup
from converter_validator.config.loader import Config, get_config, load_config
from converter_validator.exceptions import DocumentError
from converter_validator.report.console import (
    print_report,
    print_section_list,
    print_section_schema,
)
from converter_validator.schema.sections import get_section_schema
from converter_validator.utils.logger import get_logger, setup_logging
from converter_validator.validation.document import load_document
from converter_validator.validation.validator import ConverterValidator

logger = get_logger(__name__)
console = Console()

DEFAULT_COMMAND = "validate"


class ValidateByDefaultGroup(TyperGroup):
    """Routes `converter-validator <path>` to the validate command"""

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands and not args[0].startswith("-"):
            args.insert(0, DEFAULT_COMMAND)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=ValidateByDefaultGroup,
    help="Converter Validator - schema checks for converter JSON before publishing",
)

USAGE = """Usage: converter-validator [validate] <path-to-converters.json>
Example: converter-validator ./data/converters.json

VALIDATION RULES:
  • Required top-level keys: id, slug, title, description, keywords, categories,
    manualRelatedLinks, featured, contentSequence, defaults, supportedUnits, faqs, contentSections
  • conversions OR conversionFormulas (not both required)
  • Optional: conversionFormulas, ingredientFormulas
  • contentSequence must include "hero"
  • quickReference: items need "ingredient" + at least one value
  • comparisonTable: need at least 8 rows if present
  • tips/related: need either tips/links or items (or both)
  • Minimum 1000 words of content

Exits with code 1 if validation fails."""


def _load_settings(config_file: Optional[str]) -> Config:
    try:
        return load_config(config_file) if config_file else get_config()
    except (FileNotFoundError, yaml.YAMLError, TypeError) as e:
        console.print(f"[red]❌ Invalid config: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _print_usage_and_exit():
    console.print(escape(USAGE), highlight=False)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Converter Validator - schema checks for converter JSON before publishing"""
    if ctx.invoked_subcommand is None:
        _print_usage_and_exit()


@app.command()
def validate(
    path: Optional[str] = typer.Argument(None, help="converters JSON file"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="config.yml path"),
    json_out: Optional[str] = typer.Option(None, "--json-out", "-o", help="also write the report as JSON"),
    no_guide: bool = typer.Option(False, "--no-guide", help="hide the structure guide for failing records"),
):
    """Validate a converters JSON file"""
    if path is None:
        _print_usage_and_exit()

    config = _load_settings(config_file)
    setup_logging(config.logging.file_level, config.logging.console_level, config.logging.log_dir)

    console.print(f"📂 Reading file: {escape(path)}")
    try:
        records = load_document(path, config.validation.records_key)
    except DocumentError as e:
        logger.info(f"Fatal document error: {e}")
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    console.print(f"📊 Found {len(records)} converter(s) in file\n")

    validator = ConverterValidator(config.validation)
    report = validator.validate_converters(records)

    show_guide = config.report.show_structure_guide and not no_guide
    print_report(console, report, show_guide=show_guide)

    if json_out:
        out_path = Path(json_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)
        console.print(f"\n💾 JSON report: [green]{escape(str(out_path))}[/green]")

    if not report.is_valid:
        raise typer.Exit(code=1)


@app.command()
def guide(
    section: Optional[str] = typer.Argument(None, help="section name (omit to list all)")
):
    """Show the expected structure of content sections"""
    if section is None:
        print_section_list(console)
        return

    schema = get_section_schema(section)
    if schema is None:
        console.print(f'[red]❌ Unknown section: "{escape(section)}"[/red]')
        raise typer.Exit(code=1)

    print_section_schema(console, schema)


if __name__ == "__main__":
    app()
