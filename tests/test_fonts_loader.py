import pytest
from pydantic import ValidationError
from helpers import write_fonts_file

from adapters.fonts_loader import build_stylesheet_url, load_font_requests
from core.config import AppSettings
from core.errors import FontsFileError


def test_open_sans_stylesheet_url(settings, tmp_path):
    path = write_fonts_file(tmp_path / "fonts.json", ["Open Sans"])

    fonts = load_font_requests(path, settings)

    assert list(fonts) == ["Open Sans"]
    [request] = fonts["Open Sans"]
    assert request.family == "Open Sans"
    assert "family=Open+Sans:wght@400;700&display=swap" in request.stylesheet_url
    assert request.stylesheet_url == (
        "https://fonts.googleapis.com/css2?family=Open+Sans:wght@400;700&display=swap"
    )


def test_whitespace_runs_collapse_to_single_plus(settings):
    url = build_stylesheet_url("Noto   Sans\tJP", settings)

    assert "family=Noto+Sans+JP:" in url


def test_custom_weights_and_display(tmp_path):
    settings = AppSettings(font_weights=[300, 500, 900], font_display="block")

    url = build_stylesheet_url("Inter", settings)

    assert url.endswith("family=Inter:wght@300;500;900&display=block")


def test_one_request_per_family_in_input_order(settings, tmp_path):
    path = write_fonts_file(tmp_path / "fonts.json", ["Roboto", "Inter", "Lato"])

    fonts = load_font_requests(path, settings)

    assert list(fonts) == ["Roboto", "Inter", "Lato"]
    assert all(len(requests) == 1 for requests in fonts.values())


def test_request_is_immutable(settings, tmp_path):
    path = write_fonts_file(tmp_path / "fonts.json", ["Roboto"])
    [request] = load_font_requests(path, settings)["Roboto"]

    with pytest.raises(ValidationError):
        request.family = "Other"


def test_missing_file_is_fatal(settings, tmp_path):
    with pytest.raises(FontsFileError):
        load_font_requests(tmp_path / "nope.json", settings)


def test_invalid_json_is_fatal(settings, tmp_path):
    path = tmp_path / "fonts.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FontsFileError):
        load_font_requests(path, settings)


@pytest.mark.parametrize(
    "payload",
    [
        "[]",
        '{"families": ["Roboto"]}',
        '{"fonts": "Roboto"}',
        '{"fonts": [1, 2]}',
        '{"fonts": [""]}',
    ],
)
def test_wrong_shape_is_fatal(settings, tmp_path, payload):
    path = tmp_path / "fonts.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(FontsFileError):
        load_font_requests(path, settings)
