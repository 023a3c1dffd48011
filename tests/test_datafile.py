import pytest

from stageeditor.datafile import (
    FILE_LINE_END,
    DataFileError,
    read_resource_data,
    read_sprite_data,
    read_texture_data,
)
from stageeditor.definitions import CollisionType, ObjectType
from stageeditor.geometry import Vec3


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_resource_record_is_parsed(tmp_path):
    path = _write(
        tmp_path,
        "res.csv",
        "type,collision,name,x,y,z,rot,sx,sy\n"
        "0, 1, wall.png, 10.5,20,1, 0,1,2\n",
    )
    [param] = read_resource_data(path)
    assert param.object_type is ObjectType.RESOURCE
    assert param.collision_type is CollisionType.RECT
    assert param.sprite_name == "wall.png"
    assert param.pos == Vec3(10.5, 20.0, 1.0)
    assert (param.rot, param.scale_x, param.scale_y) == (0.0, 1.0, 2.0)


def test_resource_reads_at_most_three_records(tmp_path):
    rows = "".join(f"0, 1, r{n}.png, {n},0,1, 0,1,1\n" for n in range(5))
    path = _write(tmp_path, "res.csv", "header\n" + rows)
    params = read_resource_data(path)
    assert len(params) == FILE_LINE_END
    assert [p.sprite_name for p in params] == ["r0.png", "r1.png", "r2.png"]


def test_blank_lines_are_skipped(tmp_path):
    path = _write(tmp_path, "res.csv", "header\n\n  \n2, 3, a.png, 1,2,3, 4,5,6\n")
    [param] = read_resource_data(path)
    assert param.object_type is ObjectType.MAP
    assert param.collision_type is CollisionType.POINT


def test_header_only_gives_empty_list(tmp_path):
    path = _write(tmp_path, "res.csv", "header\n")
    assert read_resource_data(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(DataFileError):
        read_resource_data(tmp_path / "absent.csv")
    with pytest.raises(DataFileError):
        read_sprite_data(tmp_path / "absent.csv")
    with pytest.raises(DataFileError):
        read_texture_data(tmp_path / "absent.csv")


@pytest.mark.parametrize(
    "row",
    [
        "0, 1, a.png, 1,2\n",
        "0, 1, a.png, x,2,3, 4,5,6\n",
        "7, 1, a.png, 1,2,3, 4,5,6\n",
        "0, 0, a.png, 1,2,3, 4,5,6\n",
        "0, 1, , 1,2,3, 4,5,6\n",
    ],
)
def test_malformed_resource_rows_raise(tmp_path, row):
    path = _write(tmp_path, "res.csv", "header\n" + row)
    with pytest.raises(DataFileError):
        read_resource_data(path)


def test_sprite_record_is_parsed(tmp_path):
    path = _write(
        tmp_path, "spr.csv", "name,x,y,z,rot,sx,sy\n bg.png, 1, 2, 0.5, 45, 2, 3\n"
    )
    [param] = read_sprite_data(path)
    assert param.sprite_name == "bg.png"
    assert param.pos == Vec3(1.0, 2.0, 0.5)
    assert (param.rot, param.scale_x, param.scale_y) == (45.0, 2.0, 3.0)


def test_sprite_row_too_short_raises(tmp_path):
    path = _write(tmp_path, "spr.csv", "header\nbg.png, 1, 2\n")
    with pytest.raises(DataFileError):
        read_sprite_data(path)


def test_texture_names_are_whitespace_separated(tmp_path):
    path = _write(tmp_path, "tex.csv", "a.png b.png\nc.png\n")
    assert read_texture_data(path) == ["a.png", "b.png", "c.png"]


def test_texture_name_too_long_raises(tmp_path):
    path = _write(tmp_path, "tex.csv", "x" * 56 + "\n")
    with pytest.raises(DataFileError):
        read_texture_data(path)


def test_empty_texture_table(tmp_path):
    path = _write(tmp_path, "tex.csv", "")
    assert read_texture_data(path) == []