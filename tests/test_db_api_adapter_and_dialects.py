from __future__ import annotations

import importlib.util
import os
import sqlite3
import tempfile
import unittest
from decimal import Decimal
from unittest import mock

from projects_dao import (
    DataAccessError,
    apply_schema,
    connect_mysql,
    connect_sqlite,
    create_schema_sql,
)
from projects_dao.ports.db_api.database import Database, as_mapping
from projects_dao.ports.db_api.dialects import Dialect, MySQLDialect, SQLiteDialect
from projects_dao.schema import drop_schema_sql

HAS_PYMYSQL = importlib.util.find_spec("pymysql") is not None


class _FormatDialect(Dialect):
    paramstyle = "format"


class _InvalidDialect(Dialect):
    paramstyle = "invalid"


class _FakeConn:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def begin(self) -> None:
        self.calls.append("begin")

    def commit(self) -> None:
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")

    def close(self) -> None:
        self.calls.append("close")


class _FailingCommitConn(_FakeConn):
    def commit(self) -> None:
        self.calls.append("commit")
        raise RuntimeError("commit failed")


class DialectTests(unittest.TestCase):
    def test_builtin_dialect_properties(self) -> None:
        self.assertEqual(SQLiteDialect().placeholder(), "?")
        self.assertEqual(MySQLDialect().placeholder(), "%s")
        self.assertEqual(_FormatDialect().placeholder(), "%s")
        self.assertEqual(SQLiteDialect().placeholders(3), "?, ?, ?")
        self.assertEqual(MySQLDialect().placeholders(2), "%s, %s")
        self.assertEqual(SQLiteDialect().q("project"), '"project"')
        self.assertEqual(MySQLDialect().q("project"), "`project`")

    def test_auto_pk_sql(self) -> None:
        self.assertEqual(
            SQLiteDialect().auto_pk_sql("id"), '"id" INTEGER PRIMARY KEY AUTOINCREMENT'
        )
        self.assertEqual(
            MySQLDialect().auto_pk_sql("id"), "`id` INT AUTO_INCREMENT PRIMARY KEY"
        )

    def test_invalid_paramstyle_raises(self) -> None:
        with self.assertRaises(ValueError):
            _InvalidDialect().placeholder()

    def test_last_insert_id_sql(self) -> None:
        self.assertEqual(
            MySQLDialect().last_insert_id_sql("project"),
            "SELECT LAST_INSERT_ID() FROM `project` LIMIT 1",
        )
        self.assertEqual(
            SQLiteDialect().last_insert_id_sql("project"),
            'SELECT last_insert_rowid() FROM "project" LIMIT 1',
        )
        with self.assertRaises(NotImplementedError):
            Dialect().last_insert_id_sql("project")


class DatabaseAdapterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.conn = sqlite3.connect(":memory:", isolation_level=None)
        self.db = Database(self.conn, SQLiteDialect())

    def tearDown(self) -> None:
        self.db.close()

    def test_execute_fetchone_fetchall(self) -> None:
        db = self.db
        db.execute('CREATE TABLE "t" ("id" INTEGER, "name" TEXT);')
        self.assertEqual(db.execute_update('INSERT INTO "t" VALUES (?, ?);', [1, "a"]), 1)
        db.execute_update('INSERT INTO "t" VALUES (?, ?);', (2, "b"))

        row = db.fetchone('SELECT * FROM "t" WHERE "id" = ?;', [1])
        rows = db.fetchall('SELECT * FROM "t" ORDER BY "id" ASC;')

        self.assertEqual(row, {"id": 1, "name": "a"})
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1]["name"], "b")
        self.assertIsNone(db.fetchone('SELECT * FROM "t" WHERE "id" = ?;', [3]))

    def test_row_factory_mapping_is_supported(self) -> None:
        self.conn.row_factory = sqlite3.Row
        self.db.execute('CREATE TABLE "t" ("id" INTEGER);')
        self.db.execute('INSERT INTO "t" ("id") VALUES (1);')
        row = self.db.fetchone('SELECT * FROM "t";')
        self.assertEqual(row["id"], 1)

    def test_transaction_commits_on_success(self) -> None:
        self.db.execute('CREATE TABLE "t" ("id" INTEGER);')
        with self.db.transaction():
            self.assertTrue(self.conn.in_transaction)
            self.db.execute('INSERT INTO "t" ("id") VALUES (1);')
        self.assertFalse(self.conn.in_transaction)
        count = self.db.fetchone('SELECT COUNT(*) AS "count" FROM "t";')
        self.assertEqual(count["count"], 1)

    def test_transaction_rolls_back_on_error(self) -> None:
        self.db.execute('CREATE TABLE "t" ("id" INTEGER);')

        with self.assertRaises(RuntimeError):
            with self.db.transaction():
                self.db.execute('INSERT INTO "t" ("id") VALUES (1);')
                raise RuntimeError("boom")

        count = self.db.fetchone('SELECT COUNT(*) AS "count" FROM "t";')
        self.assertEqual(count["count"], 0)

    def test_transaction_uses_driver_begin_when_available(self) -> None:
        conn = _FakeConn()
        db = Database(conn, MySQLDialect())

        with db.transaction():
            pass
        with self.assertRaises(KeyError):
            with db.transaction():
                raise KeyError("x")
        db.close()
        db.close()

        self.assertEqual(
            conn.calls, ["begin", "commit", "begin", "rollback", "close"]
        )

    def test_closed_database_rejects_statements(self) -> None:
        self.db.close()
        with self.assertRaises(RuntimeError):
            self.db.execute("SELECT 1")

    def test_commit_failure_rolls_back(self) -> None:
        conn = _FailingCommitConn()
        db = Database(conn, MySQLDialect())

        with self.assertRaises(RuntimeError):
            with db.transaction():
                pass

        self.assertEqual(conn.calls, ["begin", "commit", "rollback"])

    def test_context_manager_closes_connection(self) -> None:
        conn = _FakeConn()
        with Database(conn, SQLiteDialect()):
            pass
        self.assertEqual(conn.calls, ["close"])

    def test_tuple_row_without_description_raises(self) -> None:
        with self.assertRaises(TypeError):
            as_mapping(None, (1,))

    def test_keyed_row_and_unsupported_type(self) -> None:
        self.conn.row_factory = sqlite3.Row
        row = self.conn.execute("SELECT 1 AS id").fetchone()
        self.assertEqual(dict(as_mapping(None, row)), {"id": 1})
        self.assertEqual(as_mapping([("id",), ("name",)], [1, "a"]), {"id": 1, "name": "a"})

        with self.assertRaises(TypeError):
            as_mapping(None, 12345)


class ConnectionFactoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmpdir.name, "schema.db")

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def test_connect_sqlite_round_trips_decimal_columns(self) -> None:
        with connect_sqlite(self.path) as db:
            apply_schema(db)
            with db.transaction():
                db.execute_update(
                    'INSERT INTO "project" ("project_name", "estimated_hours") VALUES (?, ?)',
                    ["Shed", Decimal("12.50")],
                )
            row = db.fetchone('SELECT "estimated_hours" FROM "project"')

        self.assertIsInstance(row["estimated_hours"], Decimal)
        self.assertEqual(row["estimated_hours"], Decimal("12.50"))

    def test_connect_sqlite_enables_foreign_keys(self) -> None:
        with connect_sqlite(self.path) as db:
            row = db.fetchone("PRAGMA foreign_keys")
        self.assertEqual(next(iter(row.values())), 1)

    @unittest.skipUnless(HAS_PYMYSQL, "PyMySQL is not installed")
    def test_connect_mysql_counts_matched_rows(self) -> None:
        from pymysql.constants import CLIENT

        with mock.patch("pymysql.connect") as connect:
            db = connect_mysql(
                host="db", port=3306, database="projects", user="u", password="p"
            )

        flags = connect.call_args.kwargs["client_flag"]
        self.assertTrue(flags & CLIENT.FOUND_ROWS)
        self.assertFalse(connect.call_args.kwargs["autocommit"])
        self.assertIsInstance(db.dialect, MySQLDialect)

    def test_connect_sqlite_bad_path_raises_data_access_error(self) -> None:
        missing = os.path.join(self._tmpdir.name, "missing", "dir", "x.db")
        with self.assertRaises(DataAccessError):
            connect_sqlite(missing)

    def test_apply_schema_creates_and_drops_tables(self) -> None:
        with connect_sqlite(self.path) as db:
            apply_schema(db)
            apply_schema(db, drop_existing=True)
            rows = db.fetchall(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' "
                "ORDER BY name"
            )
        self.assertEqual(
            [r["name"] for r in rows],
            ["category", "material", "project", "project_category", "step"],
        )

    def test_schema_sql_per_dialect(self) -> None:
        mysql = create_schema_sql(MySQLDialect())
        self.assertEqual(len(mysql), 5)
        self.assertIn("`project_id` INT AUTO_INCREMENT PRIMARY KEY", mysql[0])
        self.assertEqual(drop_schema_sql(MySQLDialect())[0], "DROP TABLE IF EXISTS `project_category`")
