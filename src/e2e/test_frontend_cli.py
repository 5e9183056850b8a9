import json
from pathlib import Path
import pytest
from frontend.__main__ import main as cli_main
from frontend.web import main as web_main


@pytest.mark.e2e
def test_cli_single_query_json(works_file: str, capsys):
    assert cli_main(["--corpus", works_file, "--q", "question", "-s", "100", "--json", "--key", ""]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["query"] == "question"
    assert data["results"][0]["attribution"].endswith("ACT III")


@pytest.mark.e2e
def test_cli_table_output(works_file: str, capsys):
    assert cli_main(["--corpus", works_file, "--q", "Castle", "--key", ""]) == 0
    out = capsys.readouterr().out
    assert 'You searched for "Castle"' in out
    assert "THE TRAGEDY OF HAMLET" in out
    assert "<br>" not in out


@pytest.mark.e2e
def test_unreadable_corpus_is_fatal(tmp_path: Path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert cli_main(["--corpus", missing, "--q", "x"]) == 1
    assert web_main(["--corpus", missing]) == 1
