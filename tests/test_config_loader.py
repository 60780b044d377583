from pathlib import Path
import pydantic
import pytest
from rdfsite.core.config_loader import (
    PACKAGED_DATA_FILE,
    ConfigError,
    default_data_path,
    load_site_data,
    parse_site_file,
)
from rdfsite.core.models import SidebarSection


def test_packaged_data_loads():
    site = load_site_data(PACKAGED_DATA_FILE)
    assert [p.root for p in site.projects] == ["/rdf-ex/", "/sparql-ex/", "/shex-ex/", "/grax/"]
    assert site.projects[0].pages[0] == ""
    assert len(site.api_docs) == 6


def test_parse_yaml(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.write_text("""
projects:
  - name: Grax
    root: /grax/
    pages: ['', installation]
api_docs:
  - {text: Grax, link: 'https://hexdocs.pm/grax/'}
""")
    site = parse_site_file(cfg)
    assert site.projects[0].pages == ("", "installation")
    assert site.api_group == "API Documentation"
    assert site.extra_nav == ()


def test_parse_python_get_config(tmp_path: Path):
    cfg = tmp_path / "site.py"
    cfg.write_text(
        "def get_config():\n"
        "    return {'projects': [{'name': 'ShEx.ex', 'root': '/shex-ex/', 'pages': ['']}]}\n"
    )
    site = parse_site_file(cfg)
    assert site.projects[0].name == "ShEx.ex"


def test_parse_python_site_constant(tmp_path: Path):
    cfg = tmp_path / "site.py"
    cfg.write_text("SITE = {'projects': [], 'extra_nav': [{'text': 'Links', 'link': '/links'}]}\n")
    site = parse_site_file(cfg)
    assert site.extra_nav[0].link == "/links"


def test_python_without_entry(tmp_path: Path):
    cfg = tmp_path / "site.py"
    cfg.write_text("X = 1\n")
    with pytest.raises(ConfigError):
        parse_site_file(cfg)


def test_invalid_yaml(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.write_text("projects: [\n")
    with pytest.raises(ConfigError):
        parse_site_file(cfg)


def test_unknown_key_rejected(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.write_text("projects:\n  - {name: A, root: /a/, colapsable: true}\n")
    with pytest.raises(ConfigError):
        parse_site_file(cfg)


def test_duplicate_roots_rejected(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.write_text("projects:\n  - {name: A, root: /a/}\n  - {name: B, root: /a/}\n")
    with pytest.raises(ConfigError, match="Duplicate project root"):
        parse_site_file(cfg)


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        parse_site_file(tmp_path / "nope.yaml")


def test_env_data_file(monkeypatch, tmp_path: Path):
    cfg = tmp_path / "other.yaml"
    cfg.write_text("projects:\n  - {name: Grax, root: /grax/}\n")
    monkeypatch.setenv("RDFSITE_DATA_FILE", str(cfg))
    assert default_data_path() == cfg
    assert load_site_data().projects[0].root == "/grax/"


def test_directory_path(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.mkdir()
    with pytest.raises(ConfigError, match="Cannot read"):
        parse_site_file(cfg)


def test_undecodable_yaml(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.write_bytes(b"projects: [\xff\xfe]\n")
    with pytest.raises(ConfigError):
        parse_site_file(cfg)


def test_unsupported_suffix(tmp_path: Path):
    cfg = tmp_path / "site.json"
    cfg.write_text('{"projects": [], "extra_nav": [{"text": "x", "link": "/x", "hidden": true}]}')
    with pytest.raises(ConfigError, match="Unsupported data file type"):
        parse_site_file(cfg)


def test_python_syntax_error(tmp_path: Path):
    cfg = tmp_path / "site.py"
    cfg.write_text("def get_config(:\n")
    with pytest.raises(ConfigError, match="Failed to run"):
        parse_site_file(cfg)


def test_python_get_config_raises(tmp_path: Path):
    cfg = tmp_path / "site.py"
    cfg.write_text("def get_config():\n    return {}['projects']\n")
    with pytest.raises(ConfigError):
        parse_site_file(cfg)


def test_unknown_nav_key_rejected(tmp_path: Path):
    cfg = tmp_path / "site.yaml"
    cfg.write_text("extra_nav:\n  - text: Links\n    link: /links\n    items: []\n")
    with pytest.raises(ConfigError):
        parse_site_file(cfg)


def test_unknown_section_key_rejected():
    with pytest.raises(pydantic.ValidationError):
        SidebarSection(title="A", collapsible=True)
