"""Tests for CLI interface."""

import json

from click.testing import CliRunner

from bitlayout.cli import cli

STATUS = "status.h"
BROKEN = "broken.h"


def describe_info_command():
    def shows_layout(expect, fixture_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", fixture_file(STATUS)])
        expect(result.exit_code) == 0
        expect("Struct Status" in result.output) == True
        expect("counter" in result.output) == True

    def outputs_json(expect, fixture_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", fixture_file(STATUS), "--json"])
        expect(result.exit_code) == 0
        data = json.loads(result.output)
        expect(data["name"]) == "Status"
        expect(data["total_size"]) == 6
        expect([f["name"] for f in data["fields"]]) == ["mode", "flags", "level", "counter"]

    def fails_on_malformed_declaration(expect, fixture_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", fixture_file(BROKEN)])
        expect(result.exit_code) == 1
        expect("Error" in result.output) == True


def describe_size_command():
    def prints_total_size(expect, fixture_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["size", "-i", fixture_file(STATUS)])
        expect(result.exit_code) == 0
        expect(result.output.strip()) == "6"

    def honours_tail_padding(expect, tmp_path):
        decl = tmp_path / "open.h"
        decl.write_text("struct Open { uint32 flags:3; };")
        runner = CliRunner()
        result = runner.invoke(cli, ["size", "-i", str(decl), "--tail-padding", "byte"])
        expect(result.output.strip()) == "1"
        result = runner.invoke(cli, ["size", "-i", str(decl), "--tail-padding", "unit"])
        expect(result.output.strip()) == "4"


def describe_read_write_commands():
    def writes_then_reads_field(expect, fixture_file, record_bin):
        runner = CliRunner()

        args = ["write", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "counter", "-V", "1000"])
        expect(result.exit_code) == 0
        expect(record_bin.read_bytes()) == bytes.fromhex("0000e8030000")

        args = ["read", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "counter"])
        expect(result.exit_code) == 0
        expect(result.output.strip()) == "1000"

    def writes_bit_field_with_hex_value(expect, fixture_file, record_bin):
        runner = CliRunner()

        args = ["write", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "level", "-V", "0x1f"])
        expect(result.exit_code) == 0
        expect(record_bin.read_bytes()[1]) == 0x1F << 3

    def uses_big_endian(expect, fixture_file, record_bin):
        runner = CliRunner()

        args = ["--byteorder", "big", "write", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "counter", "-V", "1"])
        expect(result.exit_code) == 0
        expect(record_bin.read_bytes()) == bytes.fromhex("000000000001")

    def reads_as_other_type(expect, fixture_file, record_bin):
        record_bin.write_bytes(bytes.fromhex("ff0000000000"))
        runner = CliRunner()

        args = ["read", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "mode", "--as", "int8"])
        expect(result.output.strip()) == "-1"

    def fails_on_missing_field(expect, fixture_file, record_bin):
        runner = CliRunner()

        args = ["read", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "nope"])
        expect(result.exit_code) == 1
        expect("Field not found" in result.output) == True

    def rejects_invalid_value(expect, fixture_file, record_bin):
        runner = CliRunner()

        args = ["write", "-i", fixture_file(STATUS), "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "mode", "-V", "abc"])
        expect(result.exit_code) == 1
        expect(record_bin.read_bytes()) == bytes(6)

    def rejects_missing_binary_file(expect, fixture_file, tmp_path):
        runner = CliRunner()

        args = ["read", "-i", fixture_file(STATUS), "-b", str(tmp_path / "missing.bin")]
        result = runner.invoke(cli, [*args, "-f", "mode"])
        expect(result.exit_code) == 2
        expect("does not exist" in result.output) == True
        expect(result.exception is None or isinstance(result.exception, SystemExit)) == True

    def rejects_missing_declaration_file(expect, record_bin):
        runner = CliRunner()

        args = ["write", "-i", "/nonexistent/status.h", "-b", str(record_bin)]
        result = runner.invoke(cli, [*args, "-f", "mode", "-V", "1"])
        expect(result.exit_code) == 2
        expect(record_bin.read_bytes()) == bytes(6)
