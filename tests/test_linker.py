from pathlib import Path

from html_linker.core.linker import AssetKind, Page, link_assets, link_page
from html_linker.core.tags import SCRIPT_TAG, STYLESHEET_TAG

OUT = Path("/srv/site/out")


def make_page(rel: str, content: str) -> Page:
    return Page(output_path=OUT / rel, content=content)


class TestAssetKind:
    def test_marker_pairs(self):
        assert AssetKind.SCRIPT.tag_spec == SCRIPT_TAG
        assert AssetKind.STYLESHEET.tag_spec == STYLESHEET_TAG

    def test_formatters(self):
        assert AssetKind.SCRIPT.formatter("a.js") == '<script src="a.js"></script>'
        assert AssetKind.STYLESHEET.formatter("a.css") == '<link rel="stylesheet" href="a.css">'


class TestLinkAssets:
    def test_no_assets_leaves_page_untouched(self):
        page = make_page("index.html", '<head><script src="old.js"></script></head>')
        assert link_assets(page, [], AssetKind.SCRIPT) is page

    def test_replaces_stale_scripts(self):
        page = make_page("pages/about/index.html", '<head><script src="old.js"></script></head><body></body>')
        result = link_assets(page, [OUT / "js" / "bundle.js"], AssetKind.SCRIPT)
        assert result.content == '<head><script src="../../js/bundle.js"></script></head><body></body>'
        assert result.output_path == page.output_path

    def test_original_page_is_not_mutated(self):
        content = '<head><script src="old.js"></script></head>'
        page = make_page("index.html", content)
        link_assets(page, [OUT / "app.js"], AssetKind.SCRIPT)
        assert page.content == content

    def test_tag_order_follows_asset_order(self):
        page = make_page("index.html", "<head><title>t</title></head>")
        assets = [OUT / "js" / "vendor.js", OUT / "js" / "app.js"]
        result = link_assets(page, assets, AssetKind.SCRIPT)
        assert result.content == (
            '<head><title>t</title><script src="./js/vendor.js"></script>'
            '<script src="./js/app.js"></script></head>'
        )

    def test_stylesheets_keep_scripts(self):
        page = make_page(
            "blog/post.html",
            '<head><link rel="stylesheet" href="old.css"><script src="x.js"></script></head>',
        )
        result = link_assets(page, [OUT / "css" / "site.css"], AssetKind.STYLESHEET)
        assert result.content == (
            '<head><script src="x.js"></script><link rel="stylesheet" href="../css/site.css"></head>'
        )

    def test_asset_paths_as_strings(self):
        page = make_page("index.html", "<head></head>")
        result = link_assets(page, ["/srv/site/out/main.js"], AssetKind.SCRIPT)
        assert result.content == '<head><script src="./main.js"></script></head>'

    def test_missing_head_close_warns_and_appends(self, log_messages):
        page = make_page("index.html", "<p>no head</p>")
        result = link_assets(page, [OUT / "app.js"], AssetKind.SCRIPT)
        assert result.content == '<p>no head</p><script src="./app.js"></script>'
        assert any("No </head>" in m for m in log_messages)


class TestLinkPage:
    def test_stylesheets_then_scripts(self):
        page = make_page(
            "docs/index.html",
            '<head><script src="old.js"></script><link rel="stylesheet" href="old.css"></head>',
        )
        result = link_page(page, js_paths=[OUT / "js" / "app.js"], css_paths=[OUT / "css" / "app.css"])
        assert result.content == (
            '<head><link rel="stylesheet" href="../css/app.css">'
            '<script src="../js/app.js"></script></head>'
        )

    def test_scripts_only(self):
        page = make_page("index.html", '<head><link rel="stylesheet" href="keep.css"></head>')
        result = link_page(page, js_paths=[OUT / "app.js"])
        assert result.content == (
            '<head><link rel="stylesheet" href="keep.css"><script src="./app.js"></script></head>'
        )

    def test_nothing_to_link(self):
        page = make_page("index.html", "<head></head>")
        assert link_page(page) is page
