"""SQL dialects: identifier quoting, placeholders, and generated-key queries."""

from __future__ import annotations


class Dialect:
    """Base dialect that defines SQL quoting and positional placeholders."""

    name: str = "generic"
    paramstyle: str = "qmark"
    quote_char: str = '"'

    def q(self, ident: str) -> str:
        """Quote a table or column name."""

        return f"{self.quote_char}{ident}{self.quote_char}"

    def placeholder(self) -> str:
        """Return one positional parameter placeholder for the param style."""

        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "format":
            return "%s"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def placeholders(self, count: int) -> str:
        """Return `count` comma-separated placeholders."""

        return ", ".join(self.placeholder() for _ in range(count))

    def auto_pk_sql(self, pk_name: str) -> str:
        """Column definition for a generated integer primary key."""

        return f"{self.q(pk_name)} INTEGER PRIMARY KEY"

    def last_insert_id_sql(self, table: str) -> str:
        """Return the session-scoped "last generated identity" query."""

        raise NotImplementedError(f"{self.name} dialect has no last insert id query.")


class SQLiteDialect(Dialect):
    """SQLite dialect (`?` parameters)."""

    name = "sqlite"
    paramstyle = "qmark"
    quote_char = '"'

    def auto_pk_sql(self, pk_name: str) -> str:
        return f"{self.q(pk_name)} INTEGER PRIMARY KEY AUTOINCREMENT"

    def last_insert_id_sql(self, table: str) -> str:
        return f"SELECT last_insert_rowid() FROM {self.q(table)} LIMIT 1"


class MySQLDialect(Dialect):
    """MySQL dialect (`%s` positional parameters)."""

    name = "mysql"
    paramstyle = "format"
    quote_char = "`"

    def auto_pk_sql(self, pk_name: str) -> str:
        return f"{self.q(pk_name)} INT AUTO_INCREMENT PRIMARY KEY"

    def last_insert_id_sql(self, table: str) -> str:
        return f"SELECT LAST_INSERT_ID() FROM {self.q(table)} LIMIT 1"
