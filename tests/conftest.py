import pytest

from core.config import AppSettings

_ENV_VARS = (
    "HTTPS_PROXY",
    "HTTP_PROXY",
    "https_proxy",
    "http_proxy",
    "FONTGRAB_FONTS_FILE",
    "FONTGRAB_OUTPUT_DIR",
    "FONTGRAB_URLS_OUTPUT_PATH",
    "FONTGRAB_MAX_CONCURRENCY",
    "FONTGRAB_CSS_BASE_URL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # AppSettings also reads ./.env
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path):
    return AppSettings(
        proxy_url="http://proxy.test:3128",
        fonts_file=tmp_path / "fonts.json",
        output_dir=tmp_path / "downloaded-fonts",
        urls_output_path=tmp_path / "font-urls.json",
    )
