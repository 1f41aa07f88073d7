from markov import main
from markov_lib import MAXGEN


def test_cli_prints_generated_words(tmp_path, capsys):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("the cat\n  sat\n", encoding="utf-8")
    assert main([str(corpus), "-n", "10"]) == 0
    assert capsys.readouterr().out == "the cat sat\n"


def test_cli_word_limit_and_prefix_len(tmp_path, capsys):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("one two three four five", encoding="utf-8")
    assert main([str(corpus), "-n", "2", "-k", "3", "--seed", "1"]) == 0
    assert capsys.readouterr().out == "one two\n"


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().out == ""


def test_cli_rejects_bad_prefix_len(tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("a b", encoding="utf-8")
    assert main([str(corpus), "-k", "0"]) == 2


def test_cli_non_utf8_corpus(tmp_path, capsys):
    corpus = tmp_path / "corpus.txt"
    corpus.write_bytes("caf\xe9 au lait".encode("latin-1"))
    assert main([str(corpus), "-n", "10"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_rejects_word_limit_above_cap(tmp_path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("a b", encoding="utf-8")
    assert main([str(corpus), "-n", str(MAXGEN + 1)]) == 2
