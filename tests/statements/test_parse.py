"""Test the statement parser adapter."""

import json
import logging

import pytest

from sqlgate.errors import SqlSyntaxError
from sqlgate.source import read_sql
from sqlgate.statements import ParseResult, parse_statements


class TestSingleStatement:
    def test_delete_round_trip(self) -> None:
        records = parse_statements("DELETE FROM test")
        assert len(records) == 1
        record = records[0]
        assert record.query == "DELETE FROM test"
        assert record.kind == "Delete"

        delete = record.ast["Delete"]
        assert delete["where"] is None
        assert delete["this"]["Table"]["this"]["Identifier"]["this"] == "test"

    def test_query_is_rerendered(self) -> None:
        records = parse_statements("select   a,b\nfrom   tbl")
        assert records[0].query == "SELECT a, b FROM tbl"

    def test_insert_kind(self) -> None:
        records = parse_statements("INSERT INTO t (a) VALUES (1)")
        assert records[0].kind == "Insert"

    def test_update_with_where(self) -> None:
        records = parse_statements("UPDATE t SET a = 1 WHERE id = 2")
        assert records[0].kind == "Update"
        assert "Where" in records[0].ast["Update"]["where"]

    def test_records_are_immutable(self) -> None:
        record = parse_statements("SELECT 1")[0]
        with pytest.raises(AttributeError):
            record.query = "SELECT 2"  # type: ignore[misc]


class TestMultipleStatements:
    def test_source_order(self) -> None:
        records = parse_statements("SELECT 1; SELECT 2;")
        assert [r.query for r in records] == ["SELECT 1", "SELECT 2"]

    def test_mixed_kinds(self) -> None:
        records = parse_statements("SELECT * FROM a; DELETE FROM b; DROP TABLE c")
        assert [r.kind for r in records] == ["Select", "Delete", "Drop"]

    def test_trailing_semicolons_ignored(self) -> None:
        assert len(parse_statements("SELECT 1;;")) == 1


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   \n\t", ";"])
    def test_no_statements(self, text: str) -> None:
        assert parse_statements(text) == []


class TestSyntaxErrors:
    def test_unbalanced_parenthesis(self) -> None:
        with pytest.raises(SqlSyntaxError):
            parse_statements("SELECT (1 + 2")

    def test_unclosed_string(self) -> None:
        with pytest.raises(SqlSyntaxError):
            parse_statements("SELECT 'unclosed")

    def test_no_partial_result(self) -> None:
        with pytest.raises(SqlSyntaxError):
            parse_statements("SELECT 1; SELECT (1 +")

    @pytest.mark.parametrize("text", ["foo", "hello world", "1 + 1", "'abc'"])
    def test_bare_expression_is_not_a_statement(self, text: str) -> None:
        with pytest.raises(SqlSyntaxError, match="expected a SQL statement"):
            parse_statements(text)

    def test_bare_expression_after_valid_statement(self) -> None:
        with pytest.raises(SqlSyntaxError):
            parse_statements("SELECT 1; foo")


class TestOpaqueCommands:
    def test_show_is_kept_as_command(self) -> None:
        records = parse_statements("SHOW TABLES")
        assert len(records) == 1
        assert records[0].kind == "Command"

    def test_command_logs_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="sqlgate"):
            parse_statements("SHOW TABLES")
        assert "not fully modelled" in caplog.text

    @pytest.mark.parametrize("text", ["EXPLAIN ((( garbage", "SHOW )))((("])
    def test_unbalanced_command_rejected(self, text: str) -> None:
        with pytest.raises(SqlSyntaxError, match="unbalanced"):
            parse_statements(text)


class TestBomHasNoEffect:
    def test_file_and_literal_parse_identically(self, tmp_path) -> None:
        sql = "SELECT a, b FROM tbl LIMIT 10;"
        path = tmp_path / "bom.sql"
        path.write_bytes(("\ufeff" + sql).encode("utf-8"))

        from_file = parse_statements(read_sql(str(path), is_file=True))
        from_literal = parse_statements(read_sql(sql))
        assert from_file == from_literal
        assert from_file[0].query == "SELECT a, b FROM tbl LIMIT 10"


class TestDebugDump:
    def test_debug_echoes_parse_result(self, capsys) -> None:
        records = parse_statements("DELETE FROM test", debug=True)
        out = capsys.readouterr().out
        assert out.startswith("Parse Result: ")
        dumped = json.loads(out[len("Parse Result: "):])
        assert dumped == [records[0].ast]

    def test_debug_does_not_change_result(self, capsys) -> None:
        assert parse_statements("SELECT 1", debug=True) == parse_statements("SELECT 1")

    def test_no_output_without_debug(self, capsys) -> None:
        parse_statements("SELECT 1")
        assert capsys.readouterr().out == ""


def test_to_dict() -> None:
    record = ParseResult(query="SELECT 1", ast={"Select": {}})
    assert record.to_dict() == {"query": "SELECT 1", "ast": {"Select": {}}}
