from bs4 import BeautifulSoup

from tutorial_site.chapters import CHAPTERS
from tutorial_site.page_renderer import render_banner, render_page_html, validate_output_safety
from tutorial_site.sidebar import active_filenames, build_sidebar, sync_active_marker


def test_sidebar_lists_every_chapter():
    soup = BeautifulSoup(build_sidebar(CHAPTERS), "html.parser")
    links = soup.select("#toc-list li > a")
    assert [a["href"] for a in links] == [f"#{ch.id}" for ch in CHAPTERS]
    assert links[1]["data-filename"] == "tutorial-01-introduction-to-python.md"
    assert "Introduction to Python" in links[1].get_text()
    assert links[1].select_one(".emoji").get_text() == CHAPTERS[1].emoji


def test_sidebar_without_active_chapter():
    assert active_filenames(build_sidebar(CHAPTERS)) == []


def test_build_sidebar_marks_initial_active():
    html = build_sidebar(CHAPTERS, active_filename=CHAPTERS[3].filename)
    assert active_filenames(html) == [CHAPTERS[3].filename]


def test_sync_moves_marker():
    html = sync_active_marker(build_sidebar(CHAPTERS), CHAPTERS[1].filename)
    assert active_filenames(html) == [CHAPTERS[1].filename]

    html = sync_active_marker(html, CHAPTERS[5].filename)
    assert active_filenames(html) == [CHAPTERS[5].filename]
    assert "chapter-item" in BeautifulSoup(html, "html.parser").select_one("li")["class"]


def test_sync_with_unknown_filename_clears_all():
    html = sync_active_marker(build_sidebar(CHAPTERS, CHAPTERS[2].filename), "nope.md")
    assert active_filenames(html) == []


def test_banner_visibility():
    assert "display:block" in render_banner(True)
    assert "display:none" in render_banner(False)
    assert 'id="banner-close"' in render_banner(True)


def _page(active=CHAPTERS[1].filename, body="<h1>Introduction to Python</h1><p>Hello there, welcome.</p>"):
    return render_page_html(
        "Introduction to Python",
        body,
        build_sidebar(CHAPTERS, active_filename=active),
        banner_html=render_banner(False),
    )


def test_valid_page_passes():
    assert validate_output_safety(_page(), "index.html") == (True, "")


def test_page_without_active_entry_fails():
    ok, msg = validate_output_safety(_page(active=None), "index.html")
    assert not ok and "active" in msg


def test_page_without_heading_fails():
    ok, msg = validate_output_safety(_page(body="<p>" + "text " * 20 + "</p>"), "index.html")
    assert not ok and "heading" in msg


def test_short_page_fails():
    ok, msg = validate_output_safety(_page(body="<h1>x</h1>"), "index.html")
    assert not ok and "too short" in msg


def test_empty_page_fails():
    assert validate_output_safety("", "index.html")[0] is False


def test_page_title():
    soup = BeautifulSoup(_page(), "html.parser")
    assert soup.title.get_text() == "Introduction to Python - Python Tutorial"


def test_empty_chapter_with_footer_fails():
    from tutorial_site.renderer import wrap_article

    ok, msg = validate_output_safety(_page(body=wrap_article("<h1>Hi</h1>")), "index.html")
    assert not ok and "too short" in msg
