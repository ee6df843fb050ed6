"""Shared fixtures for bundle-hooks tests."""

import pytest

INDEX_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>App</title>
  </head>
  <body>
    <div id="app"></div>
  </body>
</html>
"""


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A minimal web project with one entry point and one HTML page, used as cwd."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "index.ts").write_text("console.log('hi');\n", encoding="utf-8")
    (src / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
