"""Tests for artifact set derivation."""

import pytest

from bundle_cli.artifacts import EntryPoint, derive_artifact_set, normalize_entry_points
from bundle_cli.config import BuildConfig
from bundle_cli.errors import ConfigurationError


def pairs(files):
    return [(file.src_path, file.dst_path) for file in files]


def test_default_layout(project):
    (project / "src" / "pages").mkdir()
    (project / "src" / "pages" / "about.html").write_text("<html></html>", encoding="utf-8")
    (project / "src" / "styles.css").write_text("", encoding="utf-8")

    files = derive_artifact_set(BuildConfig())

    assert pairs(files) == [
        ("out/index.ts", "out/index.js"),
        ("out/index.ts", "out/index.js.map"),
        ("src/index.html", "out/index.html"),
        ("src/pages/about.html", "out/pages/about.html"),
    ]
    assert all(file.content == "" for file in files)


@pytest.mark.parametrize("sourcemap", [False, None, "none"])
def test_sourcemaps_disabled(project, sourcemap):
    files = derive_artifact_set(BuildConfig(sourcemap=sourcemap))
    assert [file.dst_path for file in files] == ["out/index.js", "out/index.html"]


@pytest.mark.parametrize("sourcemap", [True, "inline", "linked", "external", "both"])
def test_sourcemaps_follow_their_primary(project, sourcemap):
    config = BuildConfig(entry_points=["src/a.ts", "src/b.tsx"], sourcemap=sourcemap)
    files = derive_artifact_set(config)

    assert [file.dst_path for file in files] == [
        "out/a.js", "out/a.js.map", "out/b.js", "out/b.js.map", "out/index.html"
    ]
    primaries = [file for file in files if file.dst_path.endswith(".js")]
    maps = [file for file in files if file.dst_path.endswith(".map")]
    assert len(maps) == len(primaries)
    for primary, sourcemap_file in zip(primaries, maps):
        assert sourcemap_file.dst_path == primary.dst_path + ".map"
        assert sourcemap_file.src_path == primary.src_path


def test_mapping_entry_points_use_values_and_object_outputs(project):
    config = BuildConfig(
        entry_points={
            "main": "src/index.ts",
            "admin": EntryPoint(in_path="src/admin.ts", out="src/admin/main.ts"),
        },
        sourcemap=False,
    )
    files = derive_artifact_set(config)
    assert [file.dst_path for file in files] == ["out/index.js", "out/admin/main.js", "out/index.html"]


def test_normalize_accepts_dict_objects():
    assert normalize_entry_points(["a.ts", {"in": "b.ts", "out": "c"}]) == ["a.ts", "c"]
    assert normalize_entry_points(None) == []


def test_outbase_computed_from_entry_points(project):
    config = BuildConfig(outbase="", entry_points=["web/app/main.ts", "web/app/sub/x.ts"], sourcemap=False)
    assert [file.dst_path for file in derive_artifact_set(config)] == ["out/main.js", "out/sub/x.js"]


def test_outbase_and_outdir_get_trailing_slash(project):
    config = BuildConfig(outbase="src", outdir="dist", sourcemap=False)
    assert pairs(derive_artifact_set(config)) == [
        ("dist/index.ts", "dist/index.js"),
        ("src/index.html", "dist/index.html"),
    ]


def test_single_file_mode(project):
    config = BuildConfig(outdir="", outfile="dist/bundle.js")
    assert pairs(derive_artifact_set(config)) == [
        ("dist/bundle.js", "dist/bundle.js"),
        ("dist/bundle.js", "dist/bundle.js.map"),
        ("src/index.html", "dist/index.html"),
    ]


def test_output_location_required(project):
    with pytest.raises(ConfigurationError):
        derive_artifact_set(BuildConfig(outdir="", outfile=None))


def test_empty_outbase_prepends_outdir(project):
    # Entry points without a shared directory leave nothing to replace, so
    # outdir is prepended to every path.
    (project / "page.html").write_text("<html></html>", encoding="utf-8")
    (project / "out").mkdir()
    (project / "out" / "stale.html").write_text("", encoding="utf-8")

    config = BuildConfig(outbase="", entry_points=["main.ts"], sourcemap=False)
    files = derive_artifact_set(config)

    assert pairs(files) == [
        ("out/main.ts", "out/main.js"),
        ("page.html", "out/page.html"),
        ("src/index.html", "out/src/index.html"),
    ]


def test_destinations_are_unique(project):
    (project / "src" / "nested").mkdir()
    (project / "src" / "nested" / "index.html").write_text("", encoding="utf-8")
    config = BuildConfig(entry_points=["src/index.ts", "src/nested/index.ts"])

    destinations = [file.dst_path for file in derive_artifact_set(config)]
    assert len(destinations) == len(set(destinations))


def test_rederived_on_every_call(project):
    config = BuildConfig(sourcemap=False)
    first = derive_artifact_set(config)
    (project / "src" / "extra.html").write_text("", encoding="utf-8")
    second = derive_artifact_set(config)

    assert len(second) == len(first) + 1
    assert first[0] is not second[0]
