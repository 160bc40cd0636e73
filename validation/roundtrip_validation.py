"""
Round-Trip Validation — Translates every CREATE TABLE of a script from A to B
and back to A, then checks that column names, column count and primary key
survived.

Usage:
    python roundtrip_validation.py --input schema.sql --source mysql --target postgresql
    python roundtrip_validation.py -i schema.sql -s sqlite -t sqlserver -o roundtrip_results.json
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import click
from rich.console import Console
from rich.table import Table

from create_table_translator import CREATE_TABLE_PATTERN, translate_create_table
from ddl_parser import parse_create_table, split_statements
from dialects import DIALECT_ALIASES, normalize_dialect
from translation_errors import DatabaseConversionError
from translator_config import TranslatorConfig

console = Console()
logger = logging.getLogger(__name__)


class RoundTripValidator:
    """Checks that A → B → A translation keeps the column list and primary key of each table."""

    def __init__(self, source_dialect: str, target_dialect: str, config: Optional[TranslatorConfig] = None):
        self.source = normalize_dialect(source_dialect)
        self.target = normalize_dialect(target_dialect)
        self.config = config
        self.results: List[Dict[str, Any]] = []

    def validate_statement(self, sql: str) -> Dict[str, Any]:
        """Round-trip one CREATE TABLE statement and record the comparison."""
        original = parse_create_table(sql)
        result = {
            "entity": original.table_name,
            "pair": f"{self.source}→{self.target}→{self.source}",
            "source_columns": len(original.columns),
            "roundtrip_columns": 0,
            "missing_columns": [],
            "extra_columns": [],
            "primary_key_match": False,
            "error": None,
            "passed": False,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        try:
            forward = translate_create_table(sql, self.source, self.target, self.config)
            back = translate_create_table(forward, self.target, self.source, self.config)
            roundtrip = parse_create_table(back)
        except DatabaseConversionError as e:
            logger.error(f"{original.table_name}: round trip failed: {e}")
            result["error"] = str(e)
            self.results.append(result)
            return result

        expected = [column.name.lower() for column in original.columns]
        actual = [column.name.lower() for column in roundtrip.columns]
        result["roundtrip_columns"] = len(actual)
        result["missing_columns"] = [name for name in expected if name not in actual]
        result["extra_columns"] = [name for name in actual if name not in expected]
        result["primary_key_match"] = (
            [name.lower() for name in original.primary_key_columns]
            == [name.lower() for name in roundtrip.primary_key_columns]
        )
        result["passed"] = expected == actual and result["primary_key_match"]

        self.results.append(result)
        return result

    def validate_script(self, sql_text: str) -> List[Dict[str, Any]]:
        """Validate every CREATE TABLE statement of a script."""
        for statement in split_statements(sql_text):
            if CREATE_TABLE_PATTERN.match(statement):
                self.validate_statement(statement)
        return self.results

    @property
    def all_passed(self) -> bool:
        return all(r["passed"] for r in self.results)

    def display_results(self) -> None:
        """Display validation results."""
        table = Table(title=f"Round-Trip Validation ({self.source} → {self.target} → {self.source})")
        table.add_column("Table", style="cyan")
        table.add_column("Columns", justify="right")
        table.add_column("After", justify="right")
        table.add_column("Missing", justify="right", style="red")
        table.add_column("Extra", justify="right", style="yellow")
        table.add_column("PK", justify="center")
        table.add_column("Status", justify="center")

        for r in self.results:
            status = "[green]PASS[/green]" if r["passed"] else "[red]FAIL[/red]"
            table.add_row(
                r["entity"],
                str(r["source_columns"]),
                str(r["roundtrip_columns"]),
                str(len(r["missing_columns"])),
                str(len(r["extra_columns"])),
                "OK" if r["primary_key_match"] else "DIFF",
                status,
            )

        console.print(table)

        for r in self.results:
            if r["error"]:
                console.print(f"\n[red]{r['entity']} — Error:[/red] {r['error']}")
            elif r["missing_columns"]:
                console.print(f"\n[red]{r['entity']} — Missing columns:[/red] {', '.join(r['missing_columns'])}")

    def save_results(self, output_path: str) -> None:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.results, f, indent=2)


@click.command()
@click.option("--input", "-i", "input_path", required=True, help="Path to DDL script")
@click.option("--source", "-s", required=True,
              type=click.Choice(sorted(DIALECT_ALIASES.keys()), case_sensitive=False),
              help="Dialect of the DDL script")
@click.option("--target", "-t", required=True,
              type=click.Choice(sorted(DIALECT_ALIASES.keys()), case_sensitive=False),
              help="Dialect to translate through")
@click.option("--output", "-o", default="roundtrip_results.json", help="Output file path")
def main(input_path: str, source: str, target: str, output: str):
    """Run round-trip validation of a DDL script."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    console.print("[bold]Round-Trip Validator[/bold]")

    with open(input_path, "r", encoding="utf-8") as f:
        sql_text = f.read()

    validator = RoundTripValidator(source, target)
    validator.validate_script(sql_text)
    if not validator.results:
        console.print("[yellow]No CREATE TABLE statements found. Check the input file.[/yellow]")
        return

    validator.display_results()
    validator.save_results(output)
    if not validator.all_passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
