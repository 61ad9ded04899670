from pathlib import Path

from bs4 import BeautifulSoup

from tutorial_site import config, run_with_args, site_builder
from tutorial_site.chapters import CHAPTERS
from tutorial_site.site_builder import build_site, write_page


def test_single_page_build(chapter_sources, make_fetcher, run_async, tmp_path):
    failures = run_async(build_site(output_dir=tmp_path, fragment="#1",
                                    fetcher=make_fetcher(chapter_sources)))
    assert failures == 0

    soup = BeautifulSoup((tmp_path / "index.html").read_text(encoding="utf-8"), "html.parser")
    assert soup.select_one("#tutorial-content h1").get_text() == "Introduction to Python"
    assert [li.a["data-filename"] for li in soup.select("li.active")] == [
        "tutorial-01-introduction-to-python.md"
    ]


def test_build_all_writes_every_chapter(chapter_sources, make_fetcher, run_async, tmp_path, capsys):
    del chapter_sources[CHAPTERS[9].filename]
    failures = run_async(build_site(output_dir=tmp_path, build_all=True,
                                    fetcher=make_fetcher(chapter_sources)))
    assert failures == 0

    written = sorted(p.name for p in tmp_path.glob("*.html"))
    assert written == sorted(f"{Path(ch.filename).stem}.html" for ch in CHAPTERS)

    failed_page = (tmp_path / "tutorial-09-errors-and-exceptions.html").read_text(encoding="utf-8")
    assert 'style="display:block;"' in failed_page
    assert "Failed to load content" in failed_page
    assert "tutorial-09-errors-and-exceptions.md failed to load" in capsys.readouterr().err


def test_write_page_rejects_invalid_html(tmp_path, capsys):
    out_file = tmp_path / "index.html"
    assert write_page("<html></html>", out_file) is False
    assert not out_file.exists()
    assert "SAFETY CHECK FAILED" in capsys.readouterr().err


def test_cli(chapter_sources, make_fetcher, monkeypatch, tmp_path):
    monkeypatch.setattr(config, "BASE_URL", config.BASE_URL)
    monkeypatch.setattr(site_builder, "ContentFetcher", lambda base_url: make_fetcher(chapter_sources))

    status = run_with_args(["--base-url", "http://localhost:9000", "--fragment", "#5",
                            "--output-dir", str(tmp_path)])
    assert status == 0
    assert config.get_base_url() == "http://localhost:9000/"
    soup = BeautifulSoup((tmp_path / "index.html").read_text(encoding="utf-8"), "html.parser")
    assert soup.select_one("#tutorial-content h1").get_text() == "Loops"


def test_injected_fetcher_is_left_open(chapter_sources, make_fetcher, run_async, tmp_path):
    fetcher = make_fetcher(chapter_sources)

    async def scenario():
        await build_site(output_dir=tmp_path, fragment="#2", fetcher=fetcher)
        still_open = not fetcher._client.is_closed
        text = await fetcher.fetch(CHAPTERS[2].filename)
        return still_open, text

    still_open, text = run_async(scenario())
    assert still_open
    assert text == chapter_sources[CHAPTERS[2].filename]
