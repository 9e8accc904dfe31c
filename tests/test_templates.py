import json

from ilmeeproject.templates import (
    project_config,
    scene_document,
    script_header,
    script_source,
)


def test_script_source_includes_its_header():
    text = script_source("Player")
    assert text.startswith('#include "Player.hpp"\n\n')
    assert text.endswith("};\n")


def test_script_source_defines_lifecycle():
    text = script_source("Player")
    assert "class Player {" in text
    assert "    Player() {" in text
    assert "    void Start() {" in text
    assert "    void Update() {" in text
    assert "    ~Player() {" in text


def test_script_header_declares_class():
    text = script_header("Enemy")
    assert text.startswith("#pragma once\n\n")
    lines = text.splitlines()
    assert "class Enemy {" in lines
    assert "    Enemy();" in lines
    assert "    ~Enemy();" in lines
    assert lines[-1] == "};"


def test_scene_document_is_json():
    doc = json.loads(scene_document("Level1"))
    assert doc == {"sceneName": "Level1", "objects": []}


def test_scene_document_layout():
    assert scene_document("Main").startswith('{\n\t"sceneName": "Main",')
    assert scene_document("Main").endswith("}")


def test_project_config_is_json():
    doc = json.loads(project_config("Demo", "2024-01-02 03:04:05"))
    assert doc["projectName"] == "Demo"
    assert doc["version"] == "1.0.0"
    assert doc["createdAt"] == "2024-01-02 03:04:05"


def test_project_config_key_order_and_trailing_newline():
    text = project_config("Demo", "now")
    assert text.endswith("}\n")
    assert list(json.loads(text)) == ["projectName", "version", "createdAt"]