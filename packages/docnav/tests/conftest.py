"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from docnav.config import Config, ContentConfig, ServerConfig
from docnav.core.types import MenuTree


@pytest.fixture
def sample_tree() -> MenuTree:
    """Menu tree with a linkable category, a structural group and nesting."""
    return [
        {"text": "Introduction", "href": "/docs/intro"},
        {
            "text": "Guides",
            "href": "/docs/guides",
            "items": [
                {"text": "Installation", "href": "/docs/guides/install"},
                {"text": "Configuration", "href": "/docs/guides/config/"},
            ],
        },
        {
            "label": "Reference",
            "icon": "book",
            "items": [
                {
                    "label": "API",
                    "items": [
                        {"text": "Client", "href": "/docs/api/client"},
                        {"text": "Server", "href": "/docs/api/server"},
                    ],
                },
            ],
        },
        {"text": "FAQ", "href": "/docs/faq"},
    ]


@pytest.fixture
def content_dir(tmp_path: Path, sample_tree: MenuTree) -> Path:
    """Create content directory with menus, shared definitions and snippets."""
    content = tmp_path / "content"

    menus = content / "menus"
    menus.mkdir(parents=True)
    (menus / "docs_sidebar.json").write_text(json.dumps(sample_tree))
    (menus / "wrapped.json").write_text(
        json.dumps({"title": "Wrapped", "items": [{"text": "X", "href": "/x"}]})
    )
    (menus / "api_sidebar.toml").write_text(
        '[[items]]\ntext = "Overview"\nhref = "/api"\n\n'
        '[[items]]\ntext = "Auth"\nhref = "/api/auth"\n'
    )

    shared = content / "shared"
    shared.mkdir()
    (shared / "footer.json").write_text(json.dumps([{"text": "Home", "href": "/"}]))

    snippets = content / "snippets"
    snippets.mkdir()
    (snippets / "client.py").write_text(
        "import docnav\n"
        "// @snippet:start setup\n"
        "client = Client()\n"
        "// @snippet:end setup\n"
    )

    return content


@pytest.fixture
def test_config(tmp_path: Path, content_dir: Path) -> Config:
    """Create a test configuration pointing at the sample content."""
    return Config(
        server=ServerConfig(),
        content=ContentConfig(
            content_dir=content_dir,
            snippets_dir=content_dir / "snippets",
        ),
    )
