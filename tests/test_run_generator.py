"""Tests for the command line entry point."""

import pytest

from run_generator import build_parser, config_from_args, main
from src.config import GeneratorConfig, config_to_json


class TestArgs:
    """Flags map onto a GeneratorConfig."""

    def test_minimal(self):
        args = build_parser().parse_args(["-n", "5", "-p", "0.5"])
        config = config_from_args(args)
        assert config == GeneratorConfig(n=5, p=0.5)

    def test_all_flags(self):
        args = build_parser().parse_args(
            ["-n", "5", "-p", "0.5", "-l", "-d", "-m",
             "-o", "GraphViz", "-w", "1", "2", "-s", "7"]
        )
        config = config_from_args(args)
        assert config == GeneratorConfig(
            n=5, p=0.5, digraph=True, self_loops=True, mode="max2sat",
            output="graphviz", weights=(1, 2), seed=7,
        )

    def test_max_clique(self):
        args = build_parser().parse_args(["-n", "5", "-p", "0.5", "-c"])
        assert config_from_args(args).mode == "max-clique"

    def test_modes_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-n", "5", "-p", "0.5", "-c", "-m"])

    def test_unknown_output(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-n", "5", "-p", "0.5", "-o", "json"])


class TestMain:
    """main() prints the instance on stdout and reports errors."""

    def test_prints_dimacs(self, capsys):
        assert main(["-n", "4", "-p", "1.0", "-s", "1", "--quiet"]) == 0
        out = capsys.readouterr().out
        assert out.endswith("\n")
        assert "4 6" in out.splitlines()

    def test_prints_dot(self, capsys):
        assert main(["-n", "3", "-p", "0", "-o", "dot", "--quiet"]) == 0
        out = capsys.readouterr().out
        assert out == "graph g {\n  1;\n  2;\n  3;\n}\n"

    def test_missing_required(self):
        with pytest.raises(SystemExit):
            main(["-n", "4"])

    def test_invalid_model(self, capsys):
        assert main(["-n", "1", "-p", "0.5", "--quiet"]) == 1
        assert capsys.readouterr().out == ""

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(config_to_json(
            GeneratorConfig(n=3, p=1.0, mode="max2sat", seed=5)
        ))
        assert main(["--config", str(path), "--quiet"]) == 0
        assert "p wcnf 3 15" in capsys.readouterr().out.splitlines()

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.json")]) == 1
        assert "config file not found" in capsys.readouterr().err

    def test_bad_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"n": 3, "p": 0.5, "unknown": true}')
        assert main(["--config", str(path), "--quiet"]) == 1
