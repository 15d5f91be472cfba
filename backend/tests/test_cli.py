import io
import json
from unittest.mock import AsyncMock, patch

from outliner.cli import main
from outliner.services.fetcher import FetchError


def test_parse_file_prints_outline(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<p>Alpha</p><div>(1) Beta</div>", encoding="utf-8")
    assert main(["parse", str(page)]) == 0
    assert capsys.readouterr().out == "Alpha\n  (1) Beta\n"


def test_parse_stdin(capsys):
    with patch("sys.stdin", io.StringIO("<p>From stdin</p>")):
        assert main(["parse", "-"]) == 0
    assert capsys.readouterr().out == "From stdin\n"


def test_parse_json_output(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<div>(1) a<p>(a) b</p></div>", encoding="utf-8")
    assert main(["parse", str(page), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total_items"] == 3
    assert data["max_depth"] == 2


def test_parse_custom_tags_and_mode(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<h1><em>Title</em></h1><p>Body</p>", encoding="utf-8")
    assert main(["parse", str(page), "--tags", "h1", "--mode", "raw-markup"]) == 0
    # The ineligible <em> and <p> still contribute their text as leaves.
    assert capsys.readouterr().out == "<em>Title</em>\nTitle\nBody\n"


def test_parse_empty_file_prints_nothing(tmp_path, capsys):
    page = tmp_path / "empty.html"
    page.write_text("  \n", encoding="utf-8")
    assert main(["parse", str(page)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["parse", str(tmp_path / "nope.html")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_parse_url(capsys):
    fetch = AsyncMock(return_value="<p>Remote</p>")
    with patch("outliner.cli.fetch_markup", fetch):
        assert main(["parse", "--url", "https://example.com/"]) == 0
    assert capsys.readouterr().out == "Remote\n"
    fetch.assert_awaited_once_with("https://example.com/")


def test_parse_url_failure(capsys):
    fetch = AsyncMock(side_effect=FetchError("Upstream returned HTTP 500"))
    with patch("outliner.cli.fetch_markup", fetch):
        assert main(["parse", "--url", "https://example.com/"]) == 1
    assert "HTTP 500" in capsys.readouterr().err


def test_serve_runs_uvicorn():
    with patch("uvicorn.run") as run:
        assert main(["serve", "--port", "9876"]) == 0
    _, kwargs = run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9876
