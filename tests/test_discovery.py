from pathlib import Path
import pytest
from rdfsite.core.config_loader import parse_site_data
from rdfsite.core.discovery import compare_with_docs, discover_pages
from rdfsite.core.errors import DiscoveryError


def _make_docs(root: Path) -> Path:
    rdf = root / "rdf-ex"
    rdf.mkdir(parents=True)
    for name in ("README.md", "installation.md", "iris.md"):
        (rdf / name).write_text("# page\n")
    (root / ".vuepress").mkdir()
    (root / ".vuepress" / "notes.md").write_text("hidden\n")
    (root / "empty").mkdir()
    return root


def test_discover_pages(tmp_path: Path):
    docs = _make_docs(tmp_path / "content")
    assert discover_pages(docs) == {"/rdf-ex/": ["", "installation", "iris"]}


def test_discover_missing_dir(tmp_path: Path):
    with pytest.raises(DiscoveryError):
        discover_pages(tmp_path / "missing")


def test_compare_with_docs(tmp_path: Path):
    docs = _make_docs(tmp_path / "content")
    data = parse_site_data({
        "projects": [
            {"name": "RDF.ex", "root": "/rdf-ex/", "pages": ["", "installation", "lists"]},
            {"name": "Grax", "root": "/grax/", "pages": [""]},
        ]
    })
    problems = compare_with_docs(data, docs)
    assert problems == [
        "page /rdf-ex/lists is listed but missing",
        "page /rdf-ex/iris exists but is not in the sidebar",
        f"section '/grax/' has no directory in {docs}",
    ]


def test_compare_clean(tmp_path: Path):
    docs = _make_docs(tmp_path / "content")
    data = parse_site_data({"projects": [{"name": "RDF.ex", "root": "/rdf-ex/", "pages": ["", "installation", "iris"]}]})
    assert compare_with_docs(data, docs) == []
