from unittest.mock import patch

import pytest

from directus_pages.__main__ import build, parse_args

ROUTES = {
    ("/items/ssg_page", None): (200, {"data": [{"id": 7, "title": "Launch"}]}),
    ("/items/ssg_page/7", None): (200, {"data": {"id": 7, "title": "Launch"}}),
    ("/items/ssg_section", "7"): (200, {"data": []}),
}


class TestParseArgs:
    def test_build(self):
        args = parse_args(["build", "--export-path", "out"])
        assert args.command == "build"
        assert args.export_path == "out"

    def test_serve(self):
        args = parse_args(["serve", "--port", "9000", "--no-build"])
        assert args.command == "serve"
        assert args.port == 9000
        assert args.build_on_startup is False

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestBuild:
    @pytest.mark.asyncio
    async def test_build_exports_pages(self, make_client, tmp_path):
        with patch("directus_pages.__main__.DirectusClient", return_value=make_client(ROUTES)):
            exit_code = await build(str(tmp_path))

        assert exit_code == 0
        html = (tmp_path / "ssg_page" / "7" / "index.html").read_text(encoding="utf-8")
        assert "Launch (SSG)" in html

    @pytest.mark.asyncio
    async def test_build_failure_writes_nothing(self, make_client, tmp_path):
        client = make_client({("/items/ssg_page", None): (500, {"errors": []})})
        with patch("directus_pages.__main__.DirectusClient", return_value=client):
            exit_code = await build(str(tmp_path))

        assert exit_code == 1
        assert not (tmp_path / "ssg_page").exists()
