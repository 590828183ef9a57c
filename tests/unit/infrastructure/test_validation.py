import pytest

from lrcwpm.exceptions import ValidationError
from lrcwpm.utils import validation


def test_validate_db_path(tmp_path):
    db = tmp_path / "db.sqlite3"
    db.write_bytes(b"")
    assert validation.validate_db_path(str(db)) == db
    with pytest.raises(ValidationError):
        validation.validate_db_path(str(tmp_path / "missing.sqlite3"))
    with pytest.raises(ValidationError):
        validation.validate_db_path("")


def test_validate_window_size_and_tries():
    assert validation.validate_window_size(10) == 10
    assert validation.validate_max_tries(1) == 1
    with pytest.raises(ValidationError):
        validation.validate_window_size(0)
    with pytest.raises(ValidationError):
        validation.validate_max_tries(-1)


def test_validate_window_size_warns_on_large_window(caplog):
    assert validation.validate_window_size(5_000_000) == 5_000_000
    assert "GB of memory" in caplog.text


def test_validate_wpm_range():
    assert validation.validate_wpm_range(15, 500) == (15, 500)
    with pytest.raises(ValidationError):
        validation.validate_wpm_range(500, 15)
    with pytest.raises(ValidationError):
        validation.validate_wpm_range(-1, 15)


def test_validate_threshold_and_lookahead():
    assert validation.validate_threshold(1.0) == 1.0
    assert validation.validate_lookahead(2) == 2
    with pytest.raises(ValidationError):
        validation.validate_threshold(0.0)
    with pytest.raises(ValidationError):
        validation.validate_lookahead(1)


def test_validate_report_path_creates_parent(tmp_path):
    path = validation.validate_report_path(str(tmp_path / "nested" / "result.txt"))
    assert path.parent.is_dir()


def test_validate_report_path_rejects_directory(tmp_path):
    with pytest.raises(ValidationError):
        validation.validate_report_path(str(tmp_path))
