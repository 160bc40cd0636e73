"""
Schema Inventory — builds a per-column CSV inventory of a DDL script with the
type each column gets in every target dialect, flagging lossy mappings.

Usage:
    python schema_inventory.py --input schema.sql --source mysql --output column_inventory.csv
    python schema_inventory.py -i schema.sql -s postgresql -t mysql -t sqlserver -o inventory.csv
"""

import logging
from typing import Any, Dict, List, Sequence

import click
import pandas as pd
from rich.console import Console
from rich.table import Table

from ddl_parser import ColumnClause, parse_create_table, render_tokens, split_statements
from dialects import DIALECT_ALIASES, DIALECT_REGISTRY, normalize_dialect
from field_type_translator import translate_field_type
from translation_errors import DatabaseConversionError
from type_mappings import SQL_TO_NATIVE_TYPE, lookup_type

console = Console()
logger = logging.getLogger(__name__)

# Source types whose values or constraints do not survive translation intact
LOSSY_TYPES = {"enum", "set", "json", "jsonb", "money", "smallmoney", "uniqueidentifier", "xml"}


def _needs_review(column: ColumnClause, targets: Sequence[str]) -> bool:
    if column.base_type in LOSSY_TYPES or column.unsigned or column.is_array:
        return True
    # no mapping in some target: the type is passed through as written
    return any(
        lookup_type(DIALECT_REGISTRY[target].type_map, column.base_type, column.type_params) is None
        for target in targets
    )


def build_inventory(sql_text: str, source_dialect: str, target_dialects: Sequence[str] = None) -> pd.DataFrame:
    """One row per column of every CREATE TABLE statement in ``sql_text``."""
    source = normalize_dialect(source_dialect)
    targets = [normalize_dialect(t) for t in target_dialects] if target_dialects else \
        [name for name in DIALECT_REGISTRY if name != source]

    rows: List[Dict[str, Any]] = []
    for statement_sql in split_statements(sql_text):
        try:
            statement = parse_create_table(statement_sql)
        except DatabaseConversionError as e:
            logger.warning(f"Skipping statement: {e}")
            continue

        pk_columns = {name.lower() for name in statement.primary_key_columns}
        for position, column in enumerate(statement.columns, start=1):
            translated = {
                target: translate_field_type(column.type_name or "text", source, target) for target in targets
            }
            row = {
                "table_name": statement.table_name,
                "column_name": column.name,
                "position": position,
                "source_type": column.raw_type.upper() or "(none)",
                "native_type": lookup_type(SQL_TO_NATIVE_TYPE, column.base_type, column.type_params) or "string",
                "nullable": not column.not_null and column.name.lower() not in pk_columns,
                "primary_key": column.name.lower() in pk_columns,
                "auto_increment": column.auto_increment or column.base_type in ("serial", "bigserial", "smallserial"),
                "default": render_tokens(column.default) if column.default else "",
            }
            for target, target_type in translated.items():
                row[f"{target}_type"] = target_type
            row["needs_review"] = _needs_review(column, targets)
            rows.append(row)

    logger.info(f"Inventoried {len(rows)} columns from {source} DDL")
    return pd.DataFrame(rows)


def display_summary(df: pd.DataFrame) -> None:
    """Display a rich table summary of the inventory, one row per table."""
    table = Table(title="Column Inventory")
    table.add_column("Table", style="cyan")
    table.add_column("Columns", justify="right")
    table.add_column("Primary Key", style="dim")
    table.add_column("Auto Inc", justify="center")
    table.add_column("Needs Review", justify="right", style="yellow")

    for table_name, group in df.groupby("table_name", sort=False):
        table.add_row(
            str(table_name),
            str(len(group)),
            ", ".join(group.loc[group["primary_key"], "column_name"]) or "-",
            "Yes" if group["auto_increment"].any() else "No",
            str(int(group["needs_review"].sum())),
        )

    console.print(table)


@click.command()
@click.option("--input", "-i", "input_path", required=True, help="Path to DDL script")
@click.option("--source", "-s", required=True,
              type=click.Choice(sorted(DIALECT_ALIASES.keys()), case_sensitive=False),
              help="Dialect of the DDL script")
@click.option("--target", "-t", "targets", multiple=True,
              type=click.Choice(sorted(DIALECT_ALIASES.keys()), case_sensitive=False),
              help="Target dialect (repeatable, default: all others)")
@click.option("--output", "-o", "output_path", default="column_inventory.csv", help="Path to output CSV")
def main(input_path: str, source: str, targets: Sequence[str], output_path: str):
    """Generate a column inventory CSV from a DDL script."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    logger.info(f"Loading DDL from {input_path}")

    with open(input_path, "r", encoding="utf-8") as f:
        sql_text = f.read()

    df = build_inventory(sql_text, source, targets)
    if df.empty:
        console.print("[yellow]No CREATE TABLE statements found. Check the input file.[/yellow]")
        return

    df.to_csv(output_path, index=False)
    logger.info(f"Inventory saved to {output_path} ({len(df)} columns)")

    display_summary(df)
    console.print(f"Columns needing review: {int(df['needs_review'].sum())}")


if __name__ == "__main__":
    main()
