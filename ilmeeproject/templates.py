"""Text templates for new scripts, scenes and project configuration files."""

from __future__ import annotations

PROJECT_VERSION = "1.0.0"


def script_source(name: str) -> str:
    """Body of a new C++ script with Start and Update hooks."""
    return (
        f'#include "{name}.hpp"\n\n'
        f"class {name} {{\n"
        "private:\n"
        "    // Add private members here\n\n"
        "public:\n"
        f"    {name}() {{\n"
        "        // Constructor\n"
        "    }\n\n"
        "    void Start() {\n"
        "        // Called when script instance is being loaded\n"
        "    }\n\n"
        "    void Update() {\n"
        "        // Called every frame\n"
        "    }\n\n"
        f"    ~{name}() {{\n"
        "        // Destructor\n"
        "    }\n"
        "};\n"
    )


def script_header(name: str) -> str:
    """Header declaring the class of a new script."""
    return (
        "#pragma once\n\n"
        f"class {name} {{\n"
        "public:\n"
        f"    {name}();\n"
        "    void Start();\n"
        "    void Update();\n"
        f"    ~{name}();\n"
        "};\n"
    )


def scene_document(name: str) -> str:
    """Contents of an empty scene file."""
    return f'{{\n\t"sceneName": "{name}",\n\t"objects": []\n}}'


def project_config(name: str, created_at: str) -> str:
    """Default project configuration written when a project has none."""
    return (
        "{\n"
        f'    "projectName": "{name}",\n'
        f'    "version": "{PROJECT_VERSION}",\n'
        f'    "createdAt": "{created_at}"\n'
        "}\n"
    )