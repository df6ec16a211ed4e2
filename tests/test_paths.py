from pathlib import Path

import pytest

from dxm.manifest.paths import relative_path


def test_strips_base_from_nested_path():
    assert relative_path("/test/dir", "/test/dir/nested") == Path("nested")


def test_accepts_path_objects(tmp_path):
    nested = tmp_path / "a" / "b"
    assert relative_path(tmp_path, nested) == Path("a") / "b"


def test_same_path_gives_empty_path(tmp_path):
    assert relative_path(tmp_path, tmp_path) == Path("")


def test_unrelated_path_raises():
    with pytest.raises(ValueError):
        relative_path("/test/dir", "/other/dir")


def test_prefix_is_matched_by_component():
    with pytest.raises(ValueError):
        relative_path("/test/di", "/test/dir")


def test_round_trip_with_join(tmp_path):
    target = tmp_path / "x" / "y" / "z"
    assert tmp_path / relative_path(tmp_path, target) == target