"""Shared fixtures: a fake frontend build directory."""

import pytest

SHELL_HTML = (
    "<!doctype html>\n"
    "<html>\n"
    "\t<head>\n"
    "\t\t<title>App</title>\n"
    "\t</head>\n"
    '\t<body><div id="root"></div><script src="/assets/app.js"></script></body>\n'
    "</html>\n"
)


@pytest.fixture
def build_dir(tmp_path):
    """A build output with index.html and a few assets."""
    dist = tmp_path / "dist"
    assets = dist / "assets"
    assets.mkdir(parents=True)

    (dist / "index.html").write_text(SHELL_HTML)
    (dist / "secret.txt").write_text("not an asset")
    (assets / "app.js").write_text("console.log('app');")
    (assets / "style.css").write_text("body { margin: 0; }")
    (assets / "logo.bin").write_bytes(bytes(range(256)) * 1024)

    nested = assets / "chunks"
    nested.mkdir()
    (nested / "vendor.js").write_text("export default 1;")

    return dist
