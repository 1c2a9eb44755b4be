import logging
from pathlib import Path

import pytest
from zuniq import ConflictingInputs, InvalidPath, UniqOptions, run_uniq, uniq
from zuniq.runner import MODE_CONFLICT_WARNING


def _write(p: Path, text: str):
    p.write_bytes(text.encode("utf-8"))


# --- scenarios ---
def test_default_mode_removes_adjacent_duplicates():
    assert uniq(content="a\na\nb\n").out == "a\nb\n"


def test_default_mode_keeps_non_adjacent_duplicates():
    assert uniq(content="x\ny\nx\n").out == "x\ny\nx\n"


def test_repeated_mode_lists_each_repeated_line_once():
    # joined with "\n", no trailing newline restored
    assert uniq(content="a\na\nb\nb\nb\n", repeated=True).out == "a\nb"


def test_ignore_case_default_mode():
    assert uniq(content="A\na\nB\n", ignore_case=True).out == "A\nB\n"


def test_missing_path_with_content_warns_and_uses_content(tmp_path: Path, caplog):
    with caplog.at_level(logging.WARNING, logger="zuniq.runner"):
        r = uniq(file_path=str(tmp_path / "nope.txt"), content="z\n")
    assert r.out == "z\n"
    assert len(r.warnings) == 1
    assert "Using provided content" in caplog.text


# --- count ---
def test_count_uses_raw_input_counts():
    r = uniq(content="a\na\nb\na\n", count=True)
    assert r.out == "3 a\n1 b\n3 a\n"


def test_count_ignore_case():
    r = uniq(content="Go\ngo\nstop\nGO\n", count=True, ignore_case=True)
    assert r.out == "3 Go\n1 stop\n3 GO\n"


def test_repeated_with_count():
    r = uniq(content="a\nb\na\nc\nb\na\n", repeated=True, count=True)
    assert r.out == "3 a\n2 b"


def test_repeated_ignore_case_keeps_first_spelling():
    r = uniq(content="Cat\ndog\nCAT\ncat\ndog\nemu\n", repeated=True, ignore_case=True, count=True)
    assert r.out == "3 Cat\n2 dog"


def test_repeated_is_case_sensitive_by_default():
    assert uniq(content="Cat\ncat\n", repeated=True).out == ""


# --- mode conflict ---
def test_repeated_and_unique_returns_empty_with_warning(tmp_path: Path, caplog):
    out = tmp_path / "out.txt"
    with caplog.at_level(logging.WARNING, logger="zuniq.runner"):
        r = uniq(content="a\na\n", repeated=True, unique=True, output_path=str(out))
    assert r.out == ""
    assert r.warnings == [MODE_CONFLICT_WARNING]
    assert MODE_CONFLICT_WARNING in caplog.text
    assert not out.exists()


def test_unique_alone_has_no_filtering_effect():
    assert uniq(content="a\na\nb\n", unique=True).out == "a\nb\n"


# --- files ---
def test_reads_file_and_writes_output(tmp_path: Path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    _write(src, "k\nk\nk\nv\n")
    r = run_uniq(UniqOptions(file_path=src, output_path=dst))
    assert r.out == "k\nv\n"
    assert dst.read_text(encoding="utf-8") == "k\nv\n"


def test_repeated_mode_also_writes_output(tmp_path: Path):
    dst = tmp_path / "out.txt"
    _write(dst, "stale contents that must be replaced\n")
    uniq(content="p\np\n", repeated=True, output_path=str(dst))
    assert dst.read_text(encoding="utf-8") == "p"


def test_existing_file_and_content_conflict(tmp_path: Path):
    src = tmp_path / "in.txt"
    _write(src, "a\n")
    with pytest.raises(ConflictingInputs):
        uniq(file_path=str(src), content="a\n")
    with pytest.raises(ConflictingInputs):
        uniq(file_path=str(src), content="a\n", repeated=True)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(InvalidPath):
        uniq(file_path=str(tmp_path / "missing.txt"))


def test_no_input_raises():
    with pytest.raises(InvalidPath):
        uniq()


def test_error_before_write_leaves_sink_untouched(tmp_path: Path):
    dst = tmp_path / "out.txt"
    with pytest.raises(InvalidPath):
        uniq(file_path=str(tmp_path / "missing.txt"), output_path=str(dst))
    assert not dst.exists()


def test_uncreatable_output_path(tmp_path: Path):
    with pytest.raises(InvalidPath):
        uniq(content="a\n", output_path=str(tmp_path / "nodir" / "out.txt"))


# --- options boundary ---
def test_unknown_option_rejected():
    with pytest.raises(ValueError):
        uniq(content="a\n", sorted=True)


def test_non_bool_flag_rejected():
    with pytest.raises(TypeError):
        UniqOptions(content="a\n", count="yes")


def test_injected_logger_receives_warnings(tmp_path: Path, caplog):
    custom = logging.getLogger("test.zuniq.injected")
    with caplog.at_level(logging.WARNING, logger="test.zuniq.injected"):
        uniq(content="a\n", repeated=True, unique=True, logger=custom)
    assert [rec.name for rec in caplog.records] == ["test.zuniq.injected"]


def test_crlf_blank_line_tail_becomes_one_lf():
    assert uniq(content="a\r\n\r\n").out == "a\n"
    assert uniq(content="a\n\r\n").out == "a\n"
