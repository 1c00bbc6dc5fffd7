from adapters.css_extractor import (
    extract_font_urls,
    family_slug,
    font_file_name,
    pick_extension,
)


def test_extract_two_urls_in_order():
    css = "a{src:url(https://x/f-1.woff2)} b{src:url(https://x/f-2.ttf)}"

    assert extract_font_urls(css) == ["https://x/f-1.woff2", "https://x/f-2.ttf"]


def test_extract_keeps_duplicates():
    css = (
        "@font-face{src:url(https://x/a.woff)}"
        "@font-face{src:url(https://x/b.otf)}"
        "@font-face{src:url(https://x/a.woff)}"
    )

    assert extract_font_urls(css) == ["https://x/a.woff", "https://x/b.otf", "https://x/a.woff"]


def test_extract_all_four_formats():
    css = " ".join(
        f"src:url(https://cdn.test/font.{ext}) format('x');"
        for ext in ("woff2", "woff", "ttf", "otf")
    )

    assert extract_font_urls(css) == [
        "https://cdn.test/font.woff2",
        "https://cdn.test/font.woff",
        "https://cdn.test/font.ttf",
        "https://cdn.test/font.otf",
    ]


def test_extract_empty_when_nothing_matches():
    assert extract_font_urls("") == []
    assert extract_font_urls("body { color: red; }") == []


def test_extract_ignores_plain_http():
    assert extract_font_urls("src:url(http://x/f.woff2)") == []


def test_extract_ignores_quoted_urls():
    assert extract_font_urls("src:url('https://x/f.woff2')") == []
    assert extract_font_urls('src:url("https://x/f.woff2")') == []


def test_extract_ignores_query_after_extension():
    assert extract_font_urls("src:url(https://x/f.woff2?v=3)") == []


def test_extract_ignores_other_extensions():
    assert extract_font_urls("src:url(https://x/f.eot) src:url(https://x/logo.svg)") == []


def test_extract_match_boundary_stops_at_first_paren():
    css = "src:url(https://x/a.ttf) format('truetype'), url(https://x/b.woff2)"

    assert extract_font_urls(css) == ["https://x/a.ttf", "https://x/b.woff2"]


def test_pick_extension_simple():
    assert pick_extension("https://x/f.ttf") == ".ttf"
    assert pick_extension("https://x/f.woff2") == ".woff2"
    assert pick_extension("https://x/f.woff") == ".woff"
    assert pick_extension("https://x/f.otf") == ".otf"


def test_pick_extension_ttf_wins_over_woff2():
    assert pick_extension("https://x/f.woff2/mirror/f.ttf") == ".ttf"
    assert pick_extension("https://x/f.ttf.woff2") == ".ttf"


def test_pick_extension_woff2_wins_over_woff():
    # ".woff" is a substring of ".woff2"
    assert pick_extension("https://x/f.woff2") == ".woff2"


def test_pick_extension_woff_wins_over_otf():
    assert pick_extension("https://x/f.otf.woff") == ".woff"


def test_pick_extension_defaults_to_woff2():
    assert pick_extension("https://x/font") == ".woff2"


def test_family_slug_and_file_name():
    assert family_slug("Open Sans") == "Open-Sans"
    assert family_slug("Noto  Sans\tJP") == "Noto-Sans-JP"
    assert font_file_name("Open Sans", 3, ".ttf") == "Open-Sans-3.ttf"
