import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "extract_keywords.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("extract_keywords", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def files(tmp_path):
    idf = tmp_path / "idf.utf8"
    idf.write_text("机器 5.0\n学习 3.0\n", encoding="utf-8")
    stopwords = tmp_path / "stop_words.utf8"
    stopwords.write_text("的\n", encoding="utf-8")
    tagged = tmp_path / "doc.tsv"
    tagged.write_text("我\tr\n爱\tv\n机器\tn\n学习\tv\n的\tuj\n机器\tn\n", encoding="utf-8")
    return idf, stopwords, tagged


def test_plain_output(script, files, capsys):
    idf, stopwords, tagged = files
    status = script.main(["--idf", str(idf), "--stopwords", str(stopwords), "--tagged", str(tagged)])
    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["机器\t10.000000", "学习\t3.000000"]


def test_json_output(script, files, capsys):
    idf, stopwords, tagged = files
    status = script.main(
        ["--idf", str(idf), "--stopwords", str(stopwords), "--tagged", str(tagged), "--json", "--top-n", "1"]
    )
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line) for line in lines] == [{"word": "机器", "offset": [6, 21], "weight": 10.0, "pos": "n"}]


def test_text_mismatch_prints_nothing(script, files, tmp_path, capsys):
    idf, stopwords, tagged = files
    text = tmp_path / "doc.txt"
    text.write_text("我爱机器学习", encoding="utf-8")
    status = script.main(
        ["--idf", str(idf), "--stopwords", str(stopwords), "--tagged", str(tagged), "--text", str(text)]
    )
    assert status == 0
    assert capsys.readouterr().out == ""


def test_missing_dictionary(script, files, tmp_path, capsys):
    _, stopwords, tagged = files
    status = script.main(
        ["--idf", str(tmp_path / "missing"), "--stopwords", str(stopwords), "--tagged", str(tagged)]
    )
    assert status == 2
    assert capsys.readouterr().err.startswith("error:")
