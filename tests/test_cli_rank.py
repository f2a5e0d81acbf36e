import json
from pathlib import Path

import pytest
from apps.cli.rank import main


@pytest.fixture
def lists(tmp_path: Path):
    ans = tmp_path / "possible_answers.json"
    dic = tmp_path / "possible_guesses.json"
    ans.write_text(json.dumps(["stare", "arise", "crane", "crate", "slate"]), encoding="utf-8")
    dic.write_text(json.dumps(["roate", "fjord"]), encoding="utf-8")
    return str(ans), str(dic)


def _argv(lists, *extra):
    ans, dic = lists
    return ["--answers", ans, "--dictionary", dic, "--backend", "serial",
            "--progress", "off", *extra]


def test_cli_prints_top_candidates(lists, capsys):
    assert main(_argv(lists, "--top", "3")) == 0
    out = capsys.readouterr().out
    assert "Top 3 candidates:" in out
    assert out.count("\t * ") == 3


def test_cli_user_constraints_prefilter(lists, capsys):
    assert main(_argv(lists, "--without-letters", "o", "--with-letters-at-position", "a=2")) == 0
    out = capsys.readouterr().out
    assert "Without letter o" in out
    assert "With letter a at position 2" in out
    assert "roate" not in out and "arise" not in out


def test_cli_writes_outputs(lists, tmp_path: Path, capsys):
    outdir = tmp_path / "reports"
    assert main(_argv(lists, "--outdir", str(outdir))) == 0
    assert len(list(outdir.glob("rank_*.csv"))) == 1
    manifest = json.loads(next(outdir.glob("rank_*_manifest.json")).read_text(encoding="utf-8"))
    assert manifest["num_scored"] == 7
    assert manifest["wordlists"]["passed"] is True


@pytest.mark.parametrize("extra", [
    ["--with-letters-at-position", "a=9"],
    ["--with-letters-not-at-position", "1=2"],
    ["--without-letters", "z", "--with-letters-at-position", "z=0"],  # nothing survives
])
def test_cli_rejects_bad_constraints(lists, extra):
    with pytest.raises(SystemExit):
        main(_argv(lists, *extra))


def test_cli_rejects_malformed_corpus(lists, tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text('["crane", "cranes"]', encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["--answers", str(bad), "--dictionary", lists[1], "--backend", "serial"])


@pytest.mark.parametrize("extra", [
    ["--workers", "0"],
    ["--workers", "-1"],
    ["--workers", "two"],
    ["--top", "-1"],
    ["--sample", "-3"],
])
def test_cli_rejects_bad_numeric_flags(lists, extra, capsys):
    with pytest.raises(SystemExit) as exc:
        main(_argv(lists, *extra))
    assert exc.value.code == 2
    assert "argument --" in capsys.readouterr().err
