"""
Unit tests for translator/create_table_translator.py
Covers: per-pair pipeline rewrites (types, auto-increment, booleans, enums,
defaults, constraints, indexes), primary-key deduplication, the pair registry,
script/file translation and the click CLI.
"""

import logging

import pytest
from click.testing import CliRunner

from create_table_translator import (
    TRANSLATION_PAIRS,
    CreateTableTranslator,
    PrimaryKeyModel,
    get_pair_translator,
    main,
    mysql_to_postgresql,
    mysql_to_sqlite,
    mysql_to_sqlserver,
    postgresql_to_mysql,
    postgresql_to_sqlite,
    sqlite_to_mysql,
    sqlserver_to_mysql,
    sqlserver_to_postgresql,
    sqlserver_to_sqlite,
    translate_create_table,
    translate_file,
    translate_sql_script,
)
from ddl_parser import parse_create_table
from translation_errors import (
    MalformedStatementError,
    UnsupportedDialectError,
    UnsupportedTranslationPairError,
)


def _line(result: str, column: str) -> str:
    """Return the output line that defines ``column`` (already quoted)."""
    for line in result.split("\n"):
        if line.strip().startswith(column):
            return line.strip().rstrip(",")
    raise AssertionError(f"{column} not found in:\n{result}")


# ═══════════════════════════════════════════════════════════════════════════
# MYSQL → POSTGRESQL
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
@pytest.mark.sql
class TestMySQLToPostgreSQL:

    def test_users_table(self, mysql_users_ddl):
        result = mysql_to_postgresql(mysql_users_ddl)
        assert result.startswith('CREATE TABLE IF NOT EXISTS "users" (')
        assert _line(result, '"id"') == '"id" SERIAL PRIMARY KEY'
        assert _line(result, '"username"') == '"username" CHARACTER VARYING(50) NOT NULL'
        assert _line(result, '"email"') == '"email" CHARACTER VARYING(100) NULL DEFAULT NULL'
        assert _line(result, '"is_active"') == '"is_active" BOOLEAN NOT NULL DEFAULT TRUE'
        assert _line(result, '"role"') == '"role" TEXT NOT NULL DEFAULT \'viewer\''
        assert _line(result, '"balance"') == '"balance" DECIMAL(10,2) DEFAULT \'0.00\''
        assert _line(result, '"created_at"') == '"created_at" TIMESTAMP WITHOUT TIME ZONE DEFAULT CURRENT_TIMESTAMP'
        assert _line(result, '"updated_at"') == (
            '"updated_at" TIMESTAMP WITH TIME ZONE NULL DEFAULT CURRENT_TIMESTAMP'
        )
        assert 'PRIMARY KEY ("id")' not in result
        assert result.count("PRIMARY KEY") == 1
        assert 'CONSTRAINT "uq_users_username" UNIQUE ("username")' in result
        assert result.endswith(");")

    def test_mysql_only_syntax_removed(self, mysql_users_ddl):
        result = mysql_to_postgresql(mysql_users_ddl)
        for fragment in ("ON UPDATE", "ENGINE", "CHARSET", "AUTO_INCREMENT", "`", "idx_users_email"):
            assert fragment not in result

    def test_boolean_default(self):
        result = mysql_to_postgresql("CREATE TABLE t (flag TINYINT(1) NOT NULL DEFAULT '1')")
        assert '"flag" BOOLEAN NOT NULL DEFAULT TRUE' in result

    def test_boolean_false_default(self):
        result = mysql_to_postgresql("CREATE TABLE t (flag TINYINT(1) DEFAULT 0)")
        assert '"flag" BOOLEAN DEFAULT FALSE' in result

    def test_varchar_length_kept(self):
        result = mysql_to_postgresql("CREATE TABLE t (name VARCHAR(100) NOT NULL)")
        assert '"name" CHARACTER VARYING(100) NOT NULL' in result

    def test_enum_members_discarded(self):
        result = mysql_to_postgresql("CREATE TABLE t (status ENUM('A','B','C') NOT NULL)")
        assert '"status" TEXT NOT NULL' in result
        assert "'A'" not in result

    def test_auto_increment_becomes_primary_key_when_table_has_none(self):
        result = mysql_to_postgresql("CREATE TABLE t (id INT AUTO_INCREMENT, name TEXT)")
        assert '"id" SERIAL PRIMARY KEY' in result
        assert result.count("PRIMARY KEY") == 1

    def test_dump_primary_key_moves_onto_serial(self):
        result = mysql_to_postgresql(
            "CREATE TABLE t (`id` int(11) NOT NULL AUTO_INCREMENT, `name` varchar(20), PRIMARY KEY (`id`))"
        )
        assert _line(result, '"id"') == '"id" SERIAL PRIMARY KEY'
        assert 'PRIMARY KEY ("id")' not in result
        assert result.count("PRIMARY KEY") == 1

    def test_composite_key_stays_table_level(self):
        result = mysql_to_postgresql(
            "CREATE TABLE t (id INT NOT NULL AUTO_INCREMENT, tenant INT NOT NULL, PRIMARY KEY (id, tenant))"
        )
        assert _line(result, '"id"') == '"id" SERIAL NOT NULL'
        assert 'PRIMARY KEY ("id", "tenant")' in result

    def test_bigint_auto_increment(self, mysql_orders_ddl):
        result = mysql_to_postgresql(mysql_orders_ddl)
        assert '"order_id" BIGSERIAL PRIMARY KEY' in result
        assert '"user_id" INTEGER NOT NULL' in result
        assert "ON DELETE CASCADE ON UPDATE RESTRICT" in result

    def test_unsigned_widened(self):
        result = mysql_to_postgresql("CREATE TABLE t (n INT UNSIGNED NOT NULL, b BIGINT UNSIGNED)")
        assert '"n" BIGINT NOT NULL' in result
        assert '"b" NUMERIC(20)' in result
        assert "UNSIGNED" not in result

    def test_charset_and_collation_dropped(self):
        result = mysql_to_postgresql(
            "CREATE TABLE t (name VARCHAR(20) CHARACTER SET utf8mb4 COLLATE utf8mb4_bin NOT NULL)"
        )
        assert '"name" CHARACTER VARYING(20) NOT NULL' in result
        assert "utf8mb4" not in result
        assert "COLLATE" not in result

    def test_double_quoted_default_is_a_string(self):
        result = mysql_to_postgresql('CREATE TABLE t (s VARCHAR(5) DEFAULT "x")')
        assert "DEFAULT 'x'" in result

    def test_primary_key_null_becomes_not_null(self):
        result = mysql_to_postgresql("CREATE TABLE t (id INT NULL PRIMARY KEY)")
        assert '"id" INTEGER NOT NULL PRIMARY KEY' in result

    def test_duplicate_primary_key_rendered_once(self):
        result = mysql_to_postgresql("CREATE TABLE t (id INT PRIMARY KEY, PRIMARY KEY (id))")
        assert result.count("PRIMARY KEY") == 1
        assert '"id" INTEGER PRIMARY KEY' in result

    def test_check_constraint(self):
        result = mysql_to_postgresql("CREATE TABLE t (qty INT, CONSTRAINT chk_qty CHECK (qty > 0))")
        assert 'CONSTRAINT "chk_qty" CHECK (qty > 0)' in result

    def test_inline_reference(self):
        result = mysql_to_postgresql("CREATE TABLE t (user_id INT REFERENCES users(id))")
        assert '"user_id" INTEGER REFERENCES "users" ("id")' in result

    def test_temporary_table(self):
        result = mysql_to_postgresql("CREATE TEMPORARY TABLE tmp (id INT)")
        assert result.startswith('CREATE TEMPORARY TABLE "tmp" (')

    def test_rewrites_logged_once(self, mysql_users_ddl, caplog):
        with caplog.at_level(logging.INFO):
            mysql_to_postgresql(mysql_users_ddl)
        messages = [r.getMessage() for r in caplog.records if "Applied" in r.getMessage()]
        assert len(messages) == 1
        assert messages[0].startswith("[mysql→postgresql] Applied")
        assert "ON UPDATE removed" in messages[0]

    def test_dropped_index_warns(self, mysql_users_ddl, caplog):
        with caplog.at_level(logging.WARNING):
            mysql_to_postgresql(mysql_users_ddl)
        assert "idx_users_email dropped" in caplog.text

    def test_unknown_table_options_warn(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = mysql_to_postgresql("CREATE TABLE t (id INT) ENGINE=InnoDB PARTITION BY HASH(id)")
        assert "PARTITION" in caplog.text
        assert "PARTITION" not in result


# ═══════════════════════════════════════════════════════════════════════════
# MYSQL → SQLITE
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
@pytest.mark.sql
class TestMySQLToSQLite:

    def test_single_autoincrement_primary_key(self):
        result = mysql_to_sqlite("CREATE TABLE t (id INT AUTO_INCREMENT PRIMARY KEY, name VARCHAR(20))")
        assert '"id" INTEGER PRIMARY KEY AUTOINCREMENT' in result
        assert '"name" NVARCHAR(20)' in result
        assert result.count("PRIMARY KEY") == 1
        assert result.count("AUTOINCREMENT") == 1

    def test_table_level_key_moved_inline(self, mysql_users_ddl):
        result = mysql_to_sqlite(mysql_users_ddl)
        assert '"id" INTEGER PRIMARY KEY AUTOINCREMENT' in result
        assert 'PRIMARY KEY ("id")' not in result
        assert result.count("PRIMARY KEY") == 1

    def test_unique_constraint_loses_name(self, mysql_users_ddl):
        result = mysql_to_sqlite(mysql_users_ddl)
        assert 'UNIQUE ("username")' in result
        assert "uq_users_username" not in result

    def test_second_auto_increment_stripped(self):
        result = mysql_to_sqlite(
            "CREATE TABLE t (a INT AUTO_INCREMENT, b INT AUTO_INCREMENT, PRIMARY KEY (a))"
        )
        assert result.count("AUTOINCREMENT") == 1
        assert '"b" INTEGER' in result

    def test_composite_key_drops_autoincrement(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = mysql_to_sqlite(
                "CREATE TABLE t (id INT NOT NULL AUTO_INCREMENT, tenant INT NOT NULL, PRIMARY KEY (id, tenant))"
            )
        assert "AUTOINCREMENT" not in result
        assert 'PRIMARY KEY ("id", "tenant")' in result
        assert "AUTOINCREMENT" in caplog.text

    def test_boolean_default_numeric(self):
        result = mysql_to_sqlite("CREATE TABLE t (flag TINYINT(1) DEFAULT '1')")
        assert '"flag" INTEGER DEFAULT 1' in result

    def test_no_table_options(self, mysql_users_ddl):
        result = mysql_to_sqlite(mysql_users_ddl)
        assert result.endswith("\n);")


# ═══════════════════════════════════════════════════════════════════════════
# MYSQL → SQL SERVER
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
@pytest.mark.sql
class TestMySQLToSQLServer:

    def test_users_table(self, mysql_users_ddl):
        result = mysql_to_sqlserver(mysql_users_ddl)
        assert result.startswith("CREATE TABLE [users] (")
        assert "IF NOT EXISTS" not in result
        assert _line(result, "[id]") == "[id] INT IDENTITY(1,1) NOT NULL"
        assert _line(result, "[username]") == "[username] NVARCHAR(50) NOT NULL"
        assert _line(result, "[is_active]") == "[is_active] BIT NOT NULL DEFAULT 1"
        assert _line(result, "[role]") == "[role] NVARCHAR(255) NOT NULL DEFAULT 'viewer'"
        assert _line(result, "[balance]") == "[balance] DECIMAL(10,2) DEFAULT '0.00'"
        assert "DATETIME2" in _line(result, "[created_at]")
        assert "CONSTRAINT [uq_users_username] UNIQUE ([username])" in result
        assert "INDEX [idx_users_email] ([email])" in result

    def test_orders_table(self, mysql_orders_ddl):
        result = mysql_to_sqlserver(mysql_orders_ddl)
        assert "[order_id] BIGINT IDENTITY(1,1) NOT NULL" in result
        assert _line(result, "[note]") == "[note] NVARCHAR(MAX)"
        assert "quotes" not in result
        assert ("CONSTRAINT [fk_orders_user] FOREIGN KEY ([user_id]) REFERENCES [users] ([id]) "
                "ON DELETE CASCADE ON UPDATE NO ACTION") in result

    def test_long_varchar_becomes_max(self):
        result = mysql_to_sqlserver("CREATE TABLE t (body VARCHAR(5000))")
        assert "[body] NVARCHAR(MAX)" in result

    def test_fulltext_index_dropped(self):
        result = mysql_to_sqlserver("CREATE TABLE t (body TEXT, FULLTEXT KEY ft_body (body))")
        assert "INDEX" not in result
        assert "ft_body" not in result

    def test_temporary_table_prefixed(self):
        result = mysql_to_sqlserver("CREATE TEMPORARY TABLE tmp (id INT)")
        assert result.startswith("CREATE TABLE [#tmp] (")

    def test_enum_type_from_config(self, tmp_output):
        from translator_config import TranslatorConfig
        config_path = tmp_output / "config.json"
        config_path.write_text('{"dev": {"sqlserver": {"enum_type": "VARCHAR(50)"}}}', encoding="utf-8")
        config = TranslatorConfig(str(config_path), "dev")
        result = mysql_to_sqlserver("CREATE TABLE t (kind ENUM('a','b'))", config)
        assert "[kind] VARCHAR(50)" in result


# ═══════════════════════════════════════════════════════════════════════════
# INTO MYSQL
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
@pytest.mark.sql
class TestIntoMySQL:

    def test_postgresql_accounts(self, postgresql_accounts_ddl):
        result = postgresql_to_mysql(postgresql_accounts_ddl)
        assert result.startswith("CREATE TABLE `accounts` (")
        assert _line(result, "`id`") == "`id` INT NOT NULL AUTO_INCREMENT PRIMARY KEY"
        assert _line(result, "`name`") == "`name` VARCHAR(120) NOT NULL"
        assert _line(result, "`active`") == "`active` TINYINT(1) DEFAULT '1'"
        assert _line(result, "`settings`") == "`settings` JSON"
        assert _line(result, "`tags`") == "`tags` JSON"
        assert _line(result, "`created_at`") == "`created_at` TIMESTAMP DEFAULT CURRENT_TIMESTAMP"
        assert _line(result, "`code`") == "`code` VARCHAR(10) DEFAULT 'abc'"
        assert result.endswith(") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;")

    def test_postgresql_nextval_default(self):
        result = postgresql_to_mysql(
            "CREATE TABLE t (id integer NOT NULL DEFAULT nextval('t_id_seq'::regclass), PRIMARY KEY (id))"
        )
        assert "AUTO_INCREMENT" in _line(result, "`id`")
        assert "nextval" not in result
        assert "PRIMARY KEY (`id`)" in result

    def test_postgresql_identity_column(self):
        result = postgresql_to_mysql("CREATE TABLE t (id BIGINT GENERATED ALWAYS AS IDENTITY PRIMARY KEY)")
        assert "`id` BIGINT NOT NULL AUTO_INCREMENT PRIMARY KEY" in result

    def test_postgresql_bare_varchar_gets_length(self):
        result = postgresql_to_mysql("CREATE TABLE t (name varchar)")
        assert "`name` VARCHAR(255)" in result

    def test_non_default_schema_kept(self):
        result = postgresql_to_mysql("CREATE TABLE sales.orders (id INT)")
        assert result.startswith("CREATE TABLE `sales`.`orders` (")

    def test_sqlite_notes(self, sqlite_notes_ddl):
        result = sqlite_to_mysql(sqlite_notes_ddl)
        assert _line(result, "`id`") == "`id` BIGINT NOT NULL AUTO_INCREMENT PRIMARY KEY"
        assert _line(result, "`title`") == "`title` TEXT NOT NULL"
        assert _line(result, "`pinned`") == "`pinned` TINYINT(1) DEFAULT '0'"
        assert _line(result, "`created`") == "`created` DATETIME DEFAULT CURRENT_TIMESTAMP"

    def test_sqlite_typeless_column(self):
        result = sqlite_to_mysql("CREATE TABLE t (payload)")
        assert "`payload` TEXT" in result

    def test_sqlserver_products(self, sqlserver_products_ddl):
        result = sqlserver_to_mysql(sqlserver_products_ddl)
        assert result.startswith("CREATE TABLE `products` (")
        assert _line(result, "`product_id`") == "`product_id` INT NOT NULL AUTO_INCREMENT"
        assert _line(result, "`name`") == "`name` VARCHAR(200) NOT NULL"
        assert _line(result, "`description`") == "`description` LONGTEXT NULL"
        assert _line(result, "`in_stock`") == "`in_stock` TINYINT(1) NOT NULL DEFAULT '1'"
        assert _line(result, "`price`") == "`price` DECIMAL(10,2) NOT NULL DEFAULT 0"
        assert _line(result, "`added_on`") == "`added_on` DATETIME DEFAULT CURRENT_TIMESTAMP"
        assert "PRIMARY KEY (`product_id`)" in result
        assert "PK_products" not in result

    def test_sqlserver_national_string_default(self):
        result = sqlserver_to_mysql("CREATE TABLE t ([s] NVARCHAR(10) DEFAULT N'abc')")
        assert "`s` VARCHAR(10) DEFAULT 'abc'" in result

    def test_sqlserver_bracketed_types(self):
        result = sqlserver_to_mysql(
            "CREATE TABLE [dbo].[items] ([id] [int] IDENTITY(1,1) NOT NULL, [n] [nvarchar](max) NULL, "
            "[b] [bit] DEFAULT ((0)), CONSTRAINT [PK_items] PRIMARY KEY CLUSTERED ([id] ASC))"
        )
        assert _line(result, "`id`") == "`id` INT NOT NULL AUTO_INCREMENT"
        assert _line(result, "`n`") == "`n` LONGTEXT NULL"
        assert _line(result, "`b`") == "`b` TINYINT(1) DEFAULT '0'"
        assert "PRIMARY KEY (`id`)" in result
        assert "`int`" not in result
        assert "`nvarchar`" not in result


# ═══════════════════════════════════════════════════════════════════════════
# POSTGRESQL MULTI-WORD TYPES
# ═══════════════════════════════════════════════════════════════════════════

POSTGRESQL_READINGS = """
CREATE TABLE public.readings (
    id SERIAL PRIMARY KEY,
    reading double precision NOT NULL,
    label character varying(30) DEFAULT 'x'::character varying,
    taken_at timestamp with time zone DEFAULT now()
);
"""

READINGS_EXPECTED = {
    "mysql": [
        "`id` INT NOT NULL AUTO_INCREMENT PRIMARY KEY",
        "`reading` DOUBLE NOT NULL",
        "`label` VARCHAR(30) DEFAULT 'x'",
        "`taken_at` TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
    ],
    "sqlite": [
        '"id" INTEGER PRIMARY KEY AUTOINCREMENT',
        '"reading" REAL NOT NULL',
        '"label" NVARCHAR(30) DEFAULT \'x\'',
        '"taken_at" TIMESTAMP DEFAULT CURRENT_TIMESTAMP',
    ],
    "sqlserver": [
        "[id] INT IDENTITY(1,1) NOT NULL PRIMARY KEY",
        "[reading] FLOAT NOT NULL",
        "[label] NVARCHAR(30) DEFAULT 'x'",
    ],
}


@pytest.mark.unit
@pytest.mark.sql
class TestPostgreSQLMultiWordTypes:

    @pytest.mark.parametrize("target", sorted(READINGS_EXPECTED))
    def test_column_lines(self, target):
        result = translate_create_table(POSTGRESQL_READINGS, "postgresql", target)
        for expected in READINGS_EXPECTED[target]:
            column = expected.split(" ")[0]
            assert _line(result, column) == expected

    @pytest.mark.parametrize("target", sorted(READINGS_EXPECTED))
    def test_no_type_words_leak(self, target):
        result = translate_create_table(POSTGRESQL_READINGS, "postgresql", target)
        assert "TIME ZONE" not in result.upper()
        assert "VARYING" not in result.upper()
        assert "PRECISION" not in result.upper()

    def test_sqlserver_zoned_timestamp(self):
        result = translate_create_table(POSTGRESQL_READINGS, "postgresql", "sqlserver")
        assert _line(result, "[taken_at]").startswith("[taken_at] DATETIME2")

    def test_bracketed_sqlserver_types_into_postgresql(self):
        result = sqlserver_to_postgresql(
            "CREATE TABLE [items] ([id] [int] IDENTITY(1,1) NOT NULL, [n] [nvarchar](max) NULL, "
            "[b] [bit] DEFAULT ((0)), PRIMARY KEY ([id]))"
        )
        assert _line(result, '"id"') == '"id" SERIAL PRIMARY KEY'
        assert _line(result, '"n"') == '"n" TEXT NULL'
        assert _line(result, '"b"') == '"b" BOOLEAN DEFAULT FALSE'
        assert '"int"' not in result
        assert '"bit"' not in result



# ═══════════════════════════════════════════════════════════════════════════
# HUB-CHAINED PAIRS
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
@pytest.mark.sql
class TestHubChainedPairs:

    def test_sqlserver_to_sqlite(self, sqlserver_products_ddl):
        result = sqlserver_to_sqlite(sqlserver_products_ddl)
        assert _line(result, '"product_id"') == '"product_id" INTEGER PRIMARY KEY AUTOINCREMENT'
        assert _line(result, '"in_stock"') == '"in_stock" INTEGER NOT NULL DEFAULT 1'
        assert _line(result, '"price"') == '"price" REAL NOT NULL DEFAULT 0'
        assert result.count("PRIMARY KEY") == 1
        assert "ENGINE" not in result

    def test_chain_equals_two_direct_steps(self, postgresql_accounts_ddl):
        chained = postgresql_to_sqlite(postgresql_accounts_ddl)
        stepwise = mysql_to_sqlite(postgresql_to_mysql(postgresql_accounts_ddl))
        assert chained == stepwise

    def test_chain_logs_debug(self, postgresql_accounts_ddl, caplog):
        with caplog.at_level(logging.DEBUG):
            postgresql_to_sqlite(postgresql_accounts_ddl)
        assert "through mysql" in caplog.text


# ═══════════════════════════════════════════════════════════════════════════
# PRIMARY KEY MODEL
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
class TestPrimaryKeyModel:

    def test_table_level(self):
        model = PrimaryKeyModel.from_statement(parse_create_table("CREATE TABLE t (a INT, b INT, PRIMARY KEY (a, b))"))
        assert model.table_columns == ["a", "b"]
        assert model.inline_column is None
        assert model.covers("B")

    def test_inline_and_table_level_same_column(self):
        model = PrimaryKeyModel.from_statement(parse_create_table("CREATE TABLE t (a INT PRIMARY KEY, PRIMARY KEY (a))"))
        assert model.table_columns == []
        assert model.inline_column == "a"

    def test_move_inline_only_for_single_column(self):
        model = PrimaryKeyModel(table_columns=["a", "b"])
        assert model.move_inline("a") is False
        model = PrimaryKeyModel(table_columns=["a"], constraint_name="pk")
        assert model.move_inline("A") is True
        assert model.constraint_name is None

    def test_promote_only_without_key(self):
        assert PrimaryKeyModel(table_columns=["a"]).promote("b") is False
        model = PrimaryKeyModel()
        assert model.promote("b") is True
        assert model.is_inline("b")


# ═══════════════════════════════════════════════════════════════════════════
# REGISTRY & ENTRY POINTS
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.unit
class TestRegistry:

    def test_twelve_pairs(self):
        assert len(TRANSLATION_PAIRS) == 12
        assert all(source != target for source, target in TRANSLATION_PAIRS)

    def test_aliases_resolve(self):
        assert get_pair_translator("mariadb", "postgres") is mysql_to_postgresql
        assert get_pair_translator("MSSQL", "sqlite3") is sqlserver_to_sqlite

    def test_unknown_dialect(self):
        with pytest.raises(UnsupportedDialectError):
            get_pair_translator("mysql", "oracle")

    def test_same_dialect_has_no_pair(self):
        with pytest.raises(UnsupportedTranslationPairError):
            get_pair_translator("mysql", "mariadb")

    def test_same_dialect_returns_input(self, mysql_users_ddl):
        assert translate_create_table(mysql_users_ddl, "mysql", "mariadb") == mysql_users_ddl

    @pytest.mark.parametrize("pair", sorted(TRANSLATION_PAIRS))
    def test_malformed_raises_for_every_pair(self, pair):
        with pytest.raises(MalformedStatementError):
            translate_create_table("CREATE TABLE t (id INT(", *pair)

    def test_translator_instance_records_rewrites(self, mysql_users_ddl):
        translator = CreateTableTranslator("mysql", "sqlserver")
        translator.translate(mysql_users_ddl)
        assert "IF NOT EXISTS removed" in translator.applied_rewrites
        assert len(translator.applied_rewrites) == len(set(translator.applied_rewrites))


@pytest.mark.unit
class TestScriptTranslation:

    def test_non_create_statements_skipped(self, mixed_script, caplog):
        with caplog.at_level(logging.WARNING):
            results = translate_sql_script(mixed_script, "mysql", "postgresql")
        assert len(results) == 2
        assert results[0].startswith('CREATE TABLE IF NOT EXISTS "users"')
        assert results[1].startswith('CREATE TABLE "orders"')
        assert "Skipping non-CREATE TABLE statement" in caplog.text

    def test_errors_raise_by_default(self):
        script = "CREATE TABLE a AS SELECT 1; CREATE TABLE b (y INT);"
        with pytest.raises(MalformedStatementError):
            translate_sql_script(script, "mysql", "sqlite")

    def test_skip_errors(self):
        script = "CREATE TABLE a AS SELECT 1; CREATE TABLE b (y INT);"
        results = translate_sql_script(script, "mysql", "sqlite", skip_errors=True)
        assert results == ['CREATE TABLE "b" (\n    "y" INTEGER\n);']

    def test_translate_file(self, tmp_output, mixed_script):
        input_path = tmp_output / "schema.sql"
        output_path = tmp_output / "schema_pg.sql"
        input_path.write_text(mixed_script, encoding="utf-8")

        count = translate_file(str(input_path), str(output_path), "mysql", "postgres")

        assert count == 2
        content = output_path.read_text(encoding="utf-8")
        assert content.startswith("-- Auto-translated from MYSQL to POSTGRESQL\n-- Review carefully before executing\n")
        assert '"orders"' in content


# ═══════════════════════════════════════════════════════════════════════════
# CLI
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.integration
class TestCLI:

    def test_inline(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "-s", "mysql", "-t", "sqlite", "--inline", "CREATE TABLE t (id INT AUTO_INCREMENT PRIMARY KEY)",
        ])
        assert result.exit_code == 0
        assert '"id" INTEGER PRIMARY KEY AUTOINCREMENT' in result.output

    def test_inline_malformed(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--inline", "CREATE TABLE t (id INT("])
        assert result.exit_code != 0
        assert "Unbalanced parentheses" in result.output

    def test_file(self, tmp_output, mysql_orders_ddl):
        input_path = tmp_output / "orders.sql"
        output_path = tmp_output / "orders_mssql.sql"
        input_path.write_text(mysql_orders_ddl, encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, ["-s", "mysql", "-t", "mssql", "-i", str(input_path), "-o", str(output_path)])

        assert result.exit_code == 0
        assert "IDENTITY(1,1)" in output_path.read_text(encoding="utf-8")

    def test_config_environment(self, translator_config_file):
        runner = CliRunner()
        result = runner.invoke(main, [
            "-s", "postgresql", "-t", "mysql",
            "--config", str(translator_config_file), "--env", "prod",
            "--inline", "CREATE TABLE t (id SERIAL PRIMARY KEY)",
        ])
        assert result.exit_code == 0
        assert "\n  `id` INT NOT NULL AUTO_INCREMENT PRIMARY KEY\n" in result.output
        assert "COLLATE=utf8mb4_unicode_ci;" in result.output

    def test_nothing_to_do(self):
        runner = CliRunner()
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "--inline" in result.output
