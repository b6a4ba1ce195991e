import pytest

from directus_pages.common.error_codes import BUILD_ERRORS, StaticBuildError
from directus_pages.handlers.ssg import SSG_NOT_FOUND, SSGPageHandler, StaticPageStore

LAUNCH_ROUTES = {
    ("/items/ssg_page", None): (
        200,
        {
            "data": [
                {"id": 7, "title": "Launch", "date_created": "2024-01-01T00:00:00Z", "ssg_sections": [1, 2]},
                {"id": 12, "title": "Roadmap", "date_created": "2024-02-01T00:00:00Z", "ssg_sections": []},
            ]
        },
    ),
    ("/items/ssg_page/7", None): (
        200,
        {
            "data": {
                "id": 7,
                "title": "Launch",
                "date_created": "2024-01-01T00:00:00Z",
                "ssg_sections": [1, 2],
            }
        },
    ),
    ("/items/ssg_section", "7"): (
        200,
        {
            "data": [
                {"id": 1, "radio_button": "A", "page_id": 7, "date_created": "2024-01-02T00:00:00Z"},
                {
                    "id": 2,
                    "radio_button": "B",
                    "page_id": 7,
                    "date_created": "2024-01-03T00:00:00Z",
                    "date_updated": "2024-01-04T00:00:00Z",
                },
            ]
        },
    ),
    ("/items/ssg_page/12", None): (
        200,
        {
            "data": {
                "id": 12,
                "title": "Roadmap",
                "date_created": "2024-02-01T00:00:00Z",
                "date_updated": "2024-02-10T00:00:00Z",
            }
        },
    ),
    ("/items/ssg_section", "12"): (200, {"data": []}),
}


class TestSSGPageHandler:
    @pytest.mark.asyncio
    async def test_generate_static_params(self, make_client):
        handler = SSGPageHandler(make_client(LAUNCH_ROUTES))

        params = await handler.generate_static_params()

        assert params == [{"id": "7"}, {"id": "12"}]

    @pytest.mark.asyncio
    async def test_load_fetches_page_and_sections(self, make_client):
        requests = []
        handler = SSGPageHandler(make_client(LAUNCH_ROUTES, requests))

        data = await handler.load("7")

        assert data.page.title == "Launch"
        assert [s.radio_button for s in data.sections] == ["A", "B"]
        assert sorted(r.url.path for r in requests) == [
            "/items/ssg_page/7",
            "/items/ssg_section",
        ]

    @pytest.mark.asyncio
    async def test_render_launch_page(self, make_client):
        handler = SSGPageHandler(make_client(LAUNCH_ROUTES))

        html = await handler.render_page("7")

        assert "Launch (SSG)" in html
        assert "Type: Static Site Generation" in html
        assert "SSG Sections (2)" in html
        assert "Created: 1/1/2024" in html
        assert "Updated:" in html  # only section 2 has an update date
        assert "Section #1" in html and "Section #2" in html
        tag_a = html.index('<span class="ssg-radio-tag">A</span>')
        tag_b = html.index('<span class="ssg-radio-tag">B</span>')
        assert tag_a < tag_b

    @pytest.mark.asyncio
    async def test_updated_date_only_when_present(self, make_client):
        handler = SSGPageHandler(make_client(LAUNCH_ROUTES))

        launch = await handler.render_page("7")
        roadmap = await handler.render_page("12")

        assert '<span class="ssg-date">Updated:' not in launch
        assert '<span class="ssg-date">Updated: 2/10/2024</span>' in roadmap
        assert "SSG Sections (0)" in roadmap

    @pytest.mark.asyncio
    async def test_null_page_renders_not_found(self, make_client):
        routes = {
            ("/items/ssg_page/99", None): (200, {"data": None}),
            ("/items/ssg_section", "99"): (200, {"data": []}),
        }
        handler = SSGPageHandler(make_client(routes))

        html = await handler.render_page("99")

        assert SSG_NOT_FOUND in html
        assert 'class="ssg-error"' in html

    @pytest.mark.asyncio
    async def test_radio_value_is_escaped(self, make_client):
        routes = {
            ("/items/ssg_page/5", None): (200, {"data": {"id": 5, "title": "<b>T</b>"}}),
            ("/items/ssg_section", "5"): (
                200,
                {"data": [{"id": 1, "radio_button": "<script>x</script>", "page_id": 5}]},
            ),
        }
        html = await SSGPageHandler(make_client(routes)).render_page("5")

        assert "<script>x</script>" not in html
        assert "&lt;script&gt;x&lt;/script&gt;" in html
        assert "&lt;b&gt;T&lt;/b&gt; (SSG)" in html

    @pytest.mark.asyncio
    async def test_null_title_and_numeric_choice(self, make_client):
        routes = {
            ("/items/ssg_page", None): (200, {"data": [{"id": 7, "title": None}]}),
            ("/items/ssg_page/7", None): (200, {"data": {"id": 7, "title": None}}),
            ("/items/ssg_section", "7"): (
                200,
                {"data": [{"id": 1, "radio_button": 2, "page_id": 7}]},
            ),
        }

        store = await SSGPageHandler(make_client(routes)).build()

        html = store.get("7")
        assert "<h1> (SSG)</h1>" in html
        assert '<span class="ssg-radio-tag">2</span>' in html
        assert "None" not in html

    @pytest.mark.asyncio
    async def test_build_renders_every_enumerated_page(self, make_client):
        store = await SSGPageHandler(make_client(LAUNCH_ROUTES)).build()

        assert store.ids == ["7", "12"]
        assert "Launch (SSG)" in store.get("7")
        assert "Roadmap (SSG)" in store.get("12")
        assert store.get("8") is None

    @pytest.mark.asyncio
    async def test_build_is_repeatable(self, make_client):
        first = await SSGPageHandler(make_client(LAUNCH_ROUTES)).build()
        second = await SSGPageHandler(make_client(LAUNCH_ROUTES)).build()

        assert first.pages == second.pages

    @pytest.mark.asyncio
    async def test_enumeration_failure_fails_build(self, make_client):
        routes = {("/items/ssg_page", None): (401, {"errors": [{"message": "Invalid token"}]})}

        with pytest.raises(StaticBuildError) as exc_info:
            await SSGPageHandler(make_client(routes)).build()

        assert exc_info.value.error_code is BUILD_ERRORS["ENUMERATION_ERROR"]

    @pytest.mark.asyncio
    async def test_page_failure_fails_build(self, make_client):
        routes = dict(LAUNCH_ROUTES)
        routes[("/items/ssg_section", "12")] = (500, {"errors": [{"message": "boom"}]})

        with pytest.raises(StaticBuildError) as exc_info:
            await SSGPageHandler(make_client(routes)).build()

        assert exc_info.value.error_code is BUILD_ERRORS["RENDER_ERROR"]


class TestStaticPageStore:
    def test_export_and_load(self, tmp_path):
        store = StaticPageStore({"7": "<p>seven</p>", "12": "<p>twelve</p>"})

        written = store.export(str(tmp_path))
        loaded = StaticPageStore.load(str(tmp_path))

        assert len(written) == 2
        assert (tmp_path / "ssg_page" / "7" / "index.html").read_text(encoding="utf-8") == "<p>seven</p>"
        assert loaded.pages == store.pages

    def test_load_missing_directory(self, tmp_path):
        assert len(StaticPageStore.load(str(tmp_path / "nowhere"))) == 0

    def test_contains(self):
        store = StaticPageStore({"1": "x"})
        assert "1" in store
        assert "2" not in store
