# -*- coding: utf-8 -*-
import json

import numpy as np
import pytest

from wavefront3d import Config, ObjLoader, load_obj
from wavefront3d.assets.material import DEFAULT_MATERIAL_NAME
from wavefront3d.errors import FormatError, ModelIOError, OutOfRangeError

TRIANGLE = """
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
"""

MATERIALS = """
newmtl Red
Kd 1 0 0
newmtl Glass
Kd 0.8 0.9 1
d 0.3
newmtl Wood
Kd 0.6 0.4 0.2
map_Kd wood.png
"""

SCENE = """
# two boxes worth of faces, kept small
mtllib scene.mtl
o Floor
v -1 0 -1
v 1 0 -1
v 1 0 1
v -1 0 1
vt 0 0
vt 1 0
vt 1 1
vt 0 1
usemtl Wood
f 1/1 2/2 3/3 4/4
o Window
v 0 1 0
v 1 1 0
v 1 2 0
vt 0.25 0.25
vt 0.75 0.25
vt 0.75 0.75
usemtl Glass
f 5/5 6/6 7/7
o Wall
v 0 0 0
v 0 1 0
v 0 0 1
usemtl Red
f 8 9 10
o Empty
v 9 9 9
usemtl Red
"""


def test_single_triangle(write_file):
    model = load_obj(write_file("tri.obj", TRIANGLE))
    assert len(model) == 1
    mesh = model[0]
    assert mesh.vertex_count == 3
    assert mesh.indices.tolist() == [0, 1, 2]
    assert mesh.texcoords is None
    assert np.allclose(mesh.normals, [[0, 0, 1]] * 3)
    assert mesh.material.name == DEFAULT_MATERIAL_NAME
    assert mesh.name == "tri"


def test_scene_objects_and_materials(write_file, write_png):
    write_png("wood.png")
    write_file("scene.mtl", MATERIALS)
    model = load_obj(write_file("scene.obj", SCENE))

    assert [m.name for m in model] == ["Floor", "Window", "Wall"]
    floor, window, wall = model.meshes

    assert floor.indices.tolist() == [0, 1, 2, 0, 2, 3]
    assert floor.material.name == "Wood"
    assert floor.material.has_texture
    assert np.allclose(floor.normals, [[0, -1, 0]] * 4) or np.allclose(floor.normals, [[0, 1, 0]] * 4)

    # смещения индексов: второй объект начинается с 5-й вершины и 5-го UV
    assert window.vertex_count == 3
    assert np.allclose(window.vertices[0], [0, 1, 0])
    assert np.allclose(window.texcoords, [[0.25, 0.25], [0.75, 0.25], [0.75, 0.75]])
    assert window.material.transparency == pytest.approx(0.3)

    assert wall.material.diffuse == (1.0, 0.0, 0.0)
    assert wall.texcoords is None
    assert model.find("Empty") is None


def test_draw_order_puts_transparent_last(write_file, write_png):
    write_png("wood.png")
    write_file("scene.mtl", MATERIALS)
    model = load_obj(write_file("scene.obj", SCENE))
    assert [m.name for m in model.draw_order()] == ["Floor", "Wall", "Window"]


def test_unknown_material_falls_back_to_default(write_file):
    write_file("m.mtl", MATERIALS)
    model = load_obj(write_file("m.obj", "mtllib m.mtl\n" + TRIANGLE + "usemtl Unknown\n"))
    assert model[0].material is model.materials.default
    assert model[0].material.diffuse == (1.0, 1.0, 1.0)


def test_last_usemtl_wins_for_whole_object(write_file):
    write_file("m.mtl", MATERIALS)
    model = load_obj(write_file("m.obj", """
        mtllib m.mtl
        o Thing
        v 0 0 0
        v 1 0 0
        v 0 1 0
        v 1 1 0
        usemtl Glass
        f 1 2 3
        usemtl Red
        f 2 4 3
    """))
    assert len(model) == 1
    assert model[0].material.name == "Red"
    assert model[0].triangle_count == 2


def test_groups_reuse_object_vertices(write_file):
    model = load_obj(write_file("g.obj", """
        o Box
        v 0 0 0
        v 1 0 0
        v 0 1 0
        v 1 1 0
        g top
        f 1 2 3
        g bottom
        f 2 4 3
    """))
    assert [m.name for m in model] == ["top", "bottom"]
    assert all(m.vertex_count == 4 for m in model)
    assert model[1].indices.tolist() == [1, 3, 2]


def test_reload_is_deterministic(write_file, write_png):
    write_png("wood.png")
    write_file("scene.mtl", MATERIALS)
    path = write_file("scene.obj", SCENE)
    first, second = load_obj(path), load_obj(path)
    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert a.name == b.name
        assert a.material.name == b.material.name
        for attr in ("vertices", "normals", "indices"):
            assert np.array_equal(getattr(a, attr), getattr(b, attr))
        assert (a.texcoords is None) == (b.texcoords is None)


def test_mesh_buffers_are_read_only(write_file):
    mesh = load_obj(write_file("tri.obj", TRIANGLE))[0]
    with pytest.raises(ValueError):
        mesh.vertices[0, 0] = 5.0
    with pytest.raises(ValueError):
        mesh.indices[0] = 2


def test_missing_model_file(tmp_path):
    with pytest.raises(ModelIOError) as err:
        load_obj(tmp_path / "absent.obj")
    assert err.value.path == str(tmp_path / "absent.obj")


def test_missing_material_library(write_file):
    with pytest.raises(ModelIOError):
        load_obj(write_file("m.obj", "mtllib nowhere.mtl\n" + TRIANGLE))


def test_face_errors_report_line(write_file):
    path = write_file("bad.obj", TRIANGLE + "f 1 2 3 1 2\n")
    with pytest.raises(FormatError) as err:
        load_obj(path)
    assert f"{path}:5:" in str(err.value)

    with pytest.raises(OutOfRangeError):
        load_obj(write_file("oob.obj", TRIANGLE + "f 1 2 9\n"))


def test_second_object_cannot_reach_previous_vertices(write_file):
    doc = TRIANGLE + "o Next\nv 5 5 5\nv 6 5 5\nv 5 6 5\nf 1 2 3\n"
    with pytest.raises(OutOfRangeError):
        load_obj(write_file("prev.obj", doc))


def test_failed_load_releases_textures(write_file, texture_loader, write_png):
    write_png("wood.png")
    write_file("scene.mtl", MATERIALS)
    path = write_file("bad.obj", "mtllib scene.mtl\n" + TRIANGLE + "f 1 2\n")
    with pytest.raises(FormatError):
        ObjLoader(path, texture_loader=texture_loader).load()
    assert texture_loader.loaded
    assert all(t.released for t in texture_loader.loaded)


def test_model_context_manager_disposes(write_file, texture_loader, write_png):
    write_png("wood.png")
    write_file("scene.mtl", MATERIALS)
    loader = ObjLoader(write_file("scene.obj", SCENE), texture_loader=texture_loader)
    with loader.load() as model:
        assert len(model) == 3
    assert model.meshes == []
    assert all(t.released for t in texture_loader.loaded)


def test_program_reaches_default_material(write_file):
    program = object()
    model = load_obj(write_file("tri.obj", TRIANGLE), program=program)
    assert model[0].material.program is program


ZERO_UV_OBJ = """
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vt 0.5 0.5
f 1/1 2/2 3/3
f 1/4 3/3 2/2
"""


def test_zero_uv_sentinel_is_configurable(write_file, tmp_path):
    path = write_file("zero.obj", ZERO_UV_OBJ)
    assert load_obj(path)[0].vertex_count == 3

    config_path = tmp_path / "loader.json"
    config_path.write_text(json.dumps({"loader": {"zero_uv_sentinel": False}}))
    config = Config(config_path)
    assert config.loader_option("load_textures") is True
    assert load_obj(path, config=config)[0].vertex_count == 4


def test_config_file_created_with_defaults(tmp_path):
    path = tmp_path / "fresh.json"
    config = Config(path)
    assert path.is_file()
    assert json.loads(path.read_text())["loader"]["zero_uv_sentinel"] is True
    assert config["log_level"] == "INFO"


def test_textures_disabled_via_config(write_file, write_png, texture_loader):
    write_png("wood.png")
    write_file("scene.mtl", MATERIALS)
    model = ObjLoader(write_file("scene.obj", SCENE), config=Config(load_textures=False),
                      texture_loader=texture_loader).load()
    assert texture_loader.loaded == []
    assert model.find("Floor").material.diffuse_map_path.name == "wood.png"


def test_interleaved_layout_and_bounds(write_file):
    doc = TRIANGLE.replace("f 1 2 3", "vt 0 0\nvt 1 0\nvt 0 1\nf 1/1 2/2 3/3")
    mesh = load_obj(write_file("uv.obj", doc))[0]
    buffer = mesh.interleaved()
    assert buffer.shape == (3, 8)
    assert np.allclose(buffer[1], [1, 0, 0, 0, 0, 1, 1, 0])
    centre, radius = mesh.bounding_sphere
    assert np.allclose(centre, [1 / 3, 1 / 3, 0])
    assert radius == pytest.approx(np.linalg.norm([2 / 3, -1 / 3, 0]), rel=1e-5)


def test_byte_order_mark_in_model(tmp_path):
    path = tmp_path / "bom.obj"
    path.write_text(TRIANGLE.lstrip("\n"), encoding="utf-8-sig")
    model = load_obj(path)
    assert model[0].indices.tolist() == [0, 1, 2]


def test_non_utf8_model_reports_line(tmp_path):
    path = tmp_path / "legacy.obj"
    path.write_bytes(b"v 0 0 0\nv 1 0 0\nv 0 1 0\no Caf\xe9\nf 1 2 3\n")
    with pytest.raises(FormatError) as err:
        load_obj(path)
    assert f"{path}:4:" in str(err.value)


def test_mtllib_with_several_libraries(write_file):
    write_file("a.mtl", "newmtl Red\nKd 1 0 0\n")
    write_file("b.mtl", "newmtl Blue\nKd 0 0 1\n")
    model = load_obj(write_file("two.obj", """
        mtllib a.mtl b.mtl
        o First
        v 0 0 0
        v 1 0 0
        v 0 1 0
        usemtl Blue
        f 1 2 3
    """))
    assert sorted(model.materials) == ["Blue", "Red"]
    assert model[0].material.diffuse == (0.0, 0.0, 1.0)


def test_mtllib_name_with_spaces(write_file):
    write_file("my materials.mtl", "newmtl Red\nKd 1 0 0\n")
    model = load_obj(write_file("spaced.obj", "mtllib my materials.mtl\n" + TRIANGLE + "usemtl Red\n"))
    assert model[0].material.name == "Red"


def test_loader_leaves_log_level_alone(write_file):
    import logging
    from wavefront3d.utils import logger

    before = logger.level
    config = Config()
    config.data["log_level"] = "DEBUG"
    load_obj(write_file("tri.obj", TRIANGLE), config=config)
    assert logger.level == before

    try:
        config.apply_logging()
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(before)
