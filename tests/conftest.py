"""
Shared pytest fixtures for the CREATE TABLE dialect translator tests.
"""

import sys
import json
from pathlib import Path
from typing import Dict, Any

import pytest

# ── Ensure project modules importable ───────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "translator"))
sys.path.insert(0, str(PROJECT_ROOT / "validation"))


# ── Temporary directory ─────────────────────────────────────────────────────

@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory."""
    return tmp_path


# ── Sample DDL per dialect ──────────────────────────────────────────────────

@pytest.fixture
def mysql_users_ddl() -> str:
    return """
CREATE TABLE IF NOT EXISTS `users` (
  `id` INT(11) NOT NULL AUTO_INCREMENT,
  `username` VARCHAR(50) NOT NULL,
  `email` VARCHAR(100) DEFAULT NULL,
  `is_active` TINYINT(1) NOT NULL DEFAULT '1',
  `role` ENUM('admin','editor','viewer') NOT NULL DEFAULT 'viewer',
  `balance` DECIMAL(10,2) DEFAULT '0.00',
  `created_at` DATETIME DEFAULT CURRENT_TIMESTAMP,
  `updated_at` TIMESTAMP NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
  PRIMARY KEY (`id`),
  UNIQUE KEY `uq_users_username` (`username`),
  KEY `idx_users_email` (`email`)
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COMMENT='application users';
"""


@pytest.fixture
def mysql_orders_ddl() -> str:
    return """
CREATE TABLE `orders` (
  `order_id` BIGINT UNSIGNED NOT NULL AUTO_INCREMENT,
  `user_id` INT(11) NOT NULL,
  `note` TEXT COMMENT 'free text, may contain ''quotes''',
  `total` DECIMAL(12,4) NOT NULL DEFAULT 0,
  PRIMARY KEY (`order_id`),
  CONSTRAINT `fk_orders_user` FOREIGN KEY (`user_id`) REFERENCES `users` (`id`) ON DELETE CASCADE ON UPDATE RESTRICT
) ENGINE=InnoDB;
"""


@pytest.fixture
def postgresql_accounts_ddl() -> str:
    return """
CREATE TABLE public.accounts (
    id SERIAL PRIMARY KEY,
    name CHARACTER VARYING(120) NOT NULL,
    active BOOLEAN DEFAULT TRUE,
    settings JSONB,
    tags TEXT[],
    created_at TIMESTAMP WITH TIME ZONE DEFAULT now(),
    code VARCHAR(10) DEFAULT 'abc'::character varying
);
"""


@pytest.fixture
def sqlite_notes_ddl() -> str:
    return """
CREATE TABLE "notes" (
    "id" INTEGER PRIMARY KEY AUTOINCREMENT,
    "title" TEXT NOT NULL,
    "pinned" BOOLEAN DEFAULT 0,
    "created" DATETIME DEFAULT (datetime('now'))
)
"""


@pytest.fixture
def sqlserver_products_ddl() -> str:
    return """
CREATE TABLE [dbo].[products] (
    [product_id] INT IDENTITY(1,1) NOT NULL,
    [name] NVARCHAR(200) NOT NULL,
    [description] NVARCHAR(MAX) NULL,
    [in_stock] BIT NOT NULL DEFAULT ((1)),
    [price] DECIMAL(10,2) NOT NULL DEFAULT ((0)),
    [added_on] DATETIME2 DEFAULT (GETDATE()),
    CONSTRAINT [PK_products] PRIMARY KEY ([product_id])
)
"""


@pytest.fixture
def mixed_script(mysql_users_ddl, mysql_orders_ddl) -> str:
    """A MySQL dump fragment with non-DDL statements mixed in."""
    return (
        "SET NAMES utf8mb4;\n"
        + mysql_users_ddl
        + "\nINSERT INTO `users` (`username`) VALUES ('a;b');\n"
        + mysql_orders_ddl
    )


# ── Config helpers ──────────────────────────────────────────────────────────

@pytest.fixture
def translator_config_file(tmp_path) -> Path:
    """A config file with a custom MySQL table option and a 2-space indent in prod."""
    config: Dict[str, Any] = {
        "default": {"output": {"indent": 4}},
        "prod": {
            "mysql": {"table_options": "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci"},
            "output": {"indent": 2},
            "logging": {"log_level": "debug"},
        },
    }
    path = tmp_path / "translator_config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path
