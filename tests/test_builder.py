"""Tests for patternlab.builder: the static export."""

from pathlib import Path

import pytest

from patternlab.builder import FILE_PATH_DATA, StaticBuilder


@pytest.fixture
def built(provider):
    result = StaticBuilder(provider).build()
    return result, provider.public_path


def _page(public: Path, path_dash: str, suffix: str = ".html") -> Path:
    return public / "patterns" / path_dash / f"{path_dash}{suffix}"


class TestPatternPages:
    def test_build_succeeds(self, built):
        result, _ = built

        assert result.success
        assert result.errors == []
        # colors, button, button~emphasis, search, homepage, draft
        assert result.patterns_rendered == 6
        assert result.bytes_written > 0

    def test_page_wrapped_with_head_and_foot(self, built):
        _, public = built

        html = _page(public, "00-atoms-01-forms-00-button").read_text()

        assert html == '<html><body class="atoms-button"><button>Go</button></body></html>'

    def test_escaped_copy_and_template_copy(self, built, provider):
        _, public = built
        button = provider.get_pattern("atoms-button")

        escaped = _page(public, button.path_dash, ".escaped.html").read_text()
        template = _page(public, button.path_dash, ".jinja").read_text()

        assert escaped == "&lt;button&gt;Go&lt;/button&gt;"
        assert template == button.template

    def test_pseudo_variant_page(self, built):
        _, public = built

        html = _page(public, "00-atoms-01-forms-00-button~emphasis").read_text()

        assert "<strong>!</strong>" in html

    def test_hidden_pattern_still_rendered(self, built):
        _, public = built

        assert _page(public, "02-pages-_01-draft").is_file()

    def test_meta_patterns_not_exported_as_pages(self, built):
        _, public = built

        assert not (public / "patterns" / "_meta-_00-head").exists()


class TestViewAllPages:
    def test_view_all_pages_written(self, built):
        result, public = built

        assert result.view_all_pages == 5
        assert (public / "patterns" / "00-atoms" / "index.html").is_file()
        assert (public / "patterns" / "00-atoms-01-forms" / "index.html").is_file()
        assert (public / "patterns" / "01-molecules-00-forms" / "index.html").is_file()
        assert not (public / "patterns" / "02-pages" / "index.html").exists()

    def test_view_all_contains_subtype_patterns(self, built):
        _, public = built

        html = (public / "patterns" / "00-atoms-01-forms" / "index.html").read_text()

        assert "<button>Go</button>" in html
        assert "<button>Go<strong>!</strong></button>" in html
        assert "colors" not in html


class TestFrontEndData:
    def test_data_file(self, built):
        _, public = built

        text = (public / FILE_PATH_DATA).read_text()

        assert text.startswith("var config = ")
        for name in ("ishControls", "navItems", "patternPaths", "viewAllPaths", "plugins"):
            assert f"var {name} = " in text
        assert '"mqs": ["480px", "768px"]' in text
        assert '"patternTypeLC": "atoms"' in text


class TestAssets:
    def test_assets_copied(self, built):
        result, public = built

        assert (public / "css" / "style.css").is_file()
        assert (public / "images" / "logo.png").read_bytes() == b"\x89PNG\r\n"
        assert result.assets_copied == 2

    def test_ignored_assets_skipped(self, built):
        _, public = built

        assert not (public / "scss").exists()
        assert not (public / "README").exists()
        assert not (public / "_data").exists()
        assert not (public / "_patterns").exists()

    def test_is_exported_asset(self, provider):
        builder = StaticBuilder(provider)

        assert builder.is_exported_asset(Path("css/style.css"))
        assert not builder.is_exported_asset(Path("scss/a.css"))
        assert not builder.is_exported_asset(Path("css/_partial.css"))
        assert not builder.is_exported_asset(Path("css/main.scss"))
        assert not builder.is_exported_asset(Path(".DS_Store"))
        assert not builder.is_exported_asset(Path("LICENSE"))


class TestFailures:
    def test_render_error_recorded_and_build_continues(self, provider, project_root):
        broken = project_root / "source/_patterns/00-atoms/00-global/09-broken.jinja"
        broken.write_text("{% if %}")

        result = StaticBuilder(provider).build()

        assert not result.success
        assert len(result.errors) == 1
        assert result.errors[0].startswith("atoms-broken:")
        assert result.patterns_rendered == 6

    def test_custom_output_dir(self, provider, tmp_path):
        output = tmp_path / "export"

        result = StaticBuilder(provider, output).build()

        assert result.output_dir == output.resolve()
        assert (output / FILE_PATH_DATA).is_file()
