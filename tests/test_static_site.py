from synapse_docs.static_site import StaticSiteGenerator


def test_generate_writes_all_pages(service, tmp_path):
    written = StaticSiteGenerator(service, tmp_path).generate()

    names = {path.relative_to(tmp_path).as_posix() for path in written}
    assert {"index.html", "examples.html", "tutorials.html", "patterns.html",
            "api.html", "getting-started.html"} <= names
    assert "core.html" in names
    assert "packages/core.html" in names
    assert len(written) == 6 + len(service.published_pages()) + len(service.packages())
    assert all(path.is_file() for path in written)


def test_generated_files_match_rendered_pages(service, tmp_path):
    StaticSiteGenerator(service, tmp_path).generate()

    assert (tmp_path / "index.html").read_text(encoding="utf-8") == service.render_home()
    package = service.get_package("ai")
    assert (tmp_path / "packages" / "ai.html").read_text(encoding="utf-8") == service.render_package(package)


def test_generate_creates_output_dir(service, tmp_path):
    out = tmp_path / "nested" / "public"
    StaticSiteGenerator(service, out).generate()
    assert (out / "index.html").exists()
