import pytest

from jobpare_cv.exceptions import InputError, InputLoadError, InputMalformed, InputNotFound
from jobpare_cv.loader import load_document, parse_document


def test_load_valid_json(input_path, cv_data):
    """
    Test loading a well-formed CV file.
    """
    assert load_document(input_path) == cv_data


def test_load_missing_file(tmp_path):
    """
    Test that a missing input file is reported as not found.
    """
    with pytest.raises(InputNotFound) as exc:
        load_document(tmp_path / "nope.json")
    assert "not found" in str(exc.value)


def test_load_directory_is_not_found(tmp_path):
    with pytest.raises(InputNotFound):
        load_document(tmp_path)


def test_load_invalid_json(tmp_path):
    """
    Test that a syntactically invalid file is reported as malformed.
    """
    path = tmp_path / "broken.json"
    path.write_text('{"personal_info": {"name": "Jane"', encoding="utf-8")
    with pytest.raises(InputMalformed) as exc:
        load_document(path)
    assert "Invalid JSON" in str(exc.value)
    assert str(path) in str(exc.value)


def test_load_undecodable_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"name": "Jos\xe9"}')
    with pytest.raises(InputLoadError):
        load_document(path)


def test_all_load_errors_share_a_base():
    assert issubclass(InputNotFound, InputError)
    assert issubclass(InputMalformed, InputError)
    assert issubclass(InputLoadError, InputError)


def test_parse_document_from_text():
    assert parse_document('{"summary": {}}') == {"summary": {}}
    with pytest.raises(InputMalformed):
        parse_document("not json", source="editor")
