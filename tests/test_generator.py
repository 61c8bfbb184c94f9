import json

import pytest

from jobpare_cv.dispatcher import OutputDispatcher, OutputMode
from jobpare_cv.exceptions import InputMalformed, InputNotFound, RenderError, TemplateNotFound
from jobpare_cv.generator import CVGenerator, GenerationState
from jobpare_cv.pdf import PdfConversionResult


@pytest.fixture
def failing_generator(fake_renderer):
    renderer = fake_renderer(PdfConversionResult.failure("Failed to launch browser"))
    return CVGenerator(dispatcher=OutputDispatcher(renderer))


def test_generate_html(template_path, input_path, tmp_path):
    """
    Test generating an HTML CV from typical data.
    """
    output = tmp_path / "cv.html"
    result = CVGenerator().generate(template_path, input_path, output)

    assert result.state == GenerationState.DONE
    assert result.warnings == []
    assert result.outcome.mode == OutputMode.HTML
    assert output.read_text(encoding="utf-8") == result.html
    assert "Jane Doe" in result.html


def test_generate_twice_is_identical(template_path, input_path, tmp_path):
    generator = CVGenerator()
    generator.generate(template_path, input_path, tmp_path / "a.html")
    generator.generate(template_path, input_path, tmp_path / "b.html")
    assert (tmp_path / "a.html").read_bytes() == (tmp_path / "b.html").read_bytes()


def test_pdf_failure_still_succeeds(template_path, input_path, tmp_path, failing_generator):
    """
    Test that an unavailable browser degrades to HTML instead of failing the run.
    """
    result = failing_generator.generate(template_path, input_path, tmp_path / "out" / "cv.pdf")

    assert result.state == GenerationState.DONE
    assert result.outcome.mode == OutputMode.PDF_FALLBACK_HTML
    assert (tmp_path / "out" / "cv.html").read_text(encoding="utf-8") == result.html
    assert not (tmp_path / "out" / "cv.pdf").exists()


def test_validate_only_writes_nothing(input_path, tmp_path):
    """
    Test that validation stops before the template is even read.
    """
    output = tmp_path / "cv.html"
    result = CVGenerator().generate(tmp_path / "no-template.html", input_path, output,
                                    validate_only=True)
    assert result.state == GenerationState.VALIDATED
    assert result.warnings == []
    assert result.outcome is None
    assert not output.exists()


def test_partial_data_warns_and_renders(template_path, tmp_path, caplog):
    """
    Test that missing sections produce warnings but rendering still happens.
    """
    input_path = tmp_path / "partial.json"
    input_path.write_text(json.dumps({"personal_info": {"email": "x@example.com"}}), encoding="utf-8")

    result = CVGenerator().generate(template_path, input_path, tmp_path / "cv.html")

    assert result.warnings == ["Missing 'summary' in data", "Missing 'name' in personal_info"]
    assert result.state == GenerationState.DONE
    assert (tmp_path / "cv.html").exists()
    assert "Warning: Missing 'summary' in data" in caplog.text


def test_no_output_renders_only(template_path, input_path, tmp_path):
    result = CVGenerator().generate(template_path, input_path)
    assert result.outcome.mode == OutputMode.NONE
    assert "Jane Doe" in result.html
    assert sorted(p.name for p in tmp_path.iterdir()) == ["cv.json", "template.html"]


def test_missing_input(template_path, tmp_path):
    with pytest.raises(InputNotFound):
        CVGenerator().generate(template_path, tmp_path / "missing.json", tmp_path / "cv.html")
    assert not (tmp_path / "cv.html").exists()


def test_malformed_input(template_path, tmp_path):
    input_path = tmp_path / "bad.json"
    input_path.write_text("{oops}", encoding="utf-8")
    with pytest.raises(InputMalformed):
        CVGenerator().generate(template_path, input_path, tmp_path / "cv.html")


def test_missing_template(input_path, tmp_path):
    with pytest.raises(TemplateNotFound):
        CVGenerator().generate(tmp_path / "missing.html", input_path, tmp_path / "cv.html")


def test_render_failure_writes_nothing(input_path, tmp_path):
    template = tmp_path / "bad.html"
    template.write_text("{{ no_such_helper(personal_info) }}", encoding="utf-8")
    with pytest.raises(RenderError):
        CVGenerator().generate(template, input_path, tmp_path / "cv.html")
    assert not (tmp_path / "cv.html").exists()


def test_bundled_template(input_path, tmp_path):
    """
    Test that the template shipped with the package renders sample data.
    """
    from jobpare_cv.editor import DEFAULT_TEMPLATE

    result = CVGenerator().generate(DEFAULT_TEMPLATE, input_path, tmp_path / "cv.html")
    assert "Jane Doe" in result.html
    assert "Python, Go, SQL" in result.html
    assert "Acme Corp" in result.html
