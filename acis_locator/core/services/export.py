"""
Export — turn a LocateResult into build variables and target definitions.

Three renderings of the same variable namespace:

    json    machine-readable dump of variables and targets
    env     ``NAME=value`` lines, lists joined with ``;``
    cmake   ``set()`` lines, ``mark_as_advanced()`` and one
            ``add_library(... IMPORTED)`` block per target
"""

from __future__ import annotations

import json
from typing import Any

from acis_locator.core.models.result import ImportedTarget, LibraryResult, LocateResult

FORMATS = ("json", "env", "cmake")

# Internal names hidden from casual consumers
ADVANCED_SUFFIXES = ("ARCH", "LIBRARY_RELEASE", "LIBRARY_DEBUG", "INCLUDE_DIR")


def advanced_variables(prefix: str) -> list[str]:
    return [f"{prefix}_{s}" for s in ADVANCED_SUFFIXES]


def build_variables(result: LocateResult) -> dict[str, Any]:
    """Flatten a result into the ``<PREFIX>_*`` variable namespace."""
    p = result.prefix
    lib = result.library or LibraryResult(p)

    variables: dict[str, Any] = {
        f"{p}_FOUND": result.found,
        f"{p}_INCLUDE_DIR": _path(result.include_dir),
        f"{p}_INCLUDE_DIRS": result.include_dirs if result.found else [],
        f"{p}_LIBRARY": _path(lib.library),
        f"{p}_LIBRARY_RELEASE": _path(lib.release),
        f"{p}_LIBRARY_DEBUG": _path(lib.debug),
        f"{p}_LIBRARIES": lib.libraries,
        f"{p}_LINK_LIBRARIES": result.link_libraries,
        f"{p}_REDIST_DEBUG": _path(result.redist_debug),
        f"{p}_REDIST_RELEASE": _path(result.redist_release),
        f"{p}_ARCH": result.version_string,
        f"{p}_VERSION_STRING": result.version_string,
    }

    for name, comp in result.components.items():
        cp = f"{p}_{name}"
        variables[f"{cp}_FOUND"] = comp.found
        variables[f"{cp}_LIBRARY"] = _path(comp.library)
        variables[f"{cp}_LIBRARY_RELEASE"] = _path(comp.release)
        variables[f"{cp}_LIBRARY_DEBUG"] = _path(comp.debug)
        variables[f"{cp}_LIBRARIES"] = comp.libraries
        variables[f"{cp}_REDIST_DEBUG"] = _path(comp.redist_debug)
        variables[f"{cp}_REDIST_RELEASE"] = _path(comp.redist_release)

    return variables


# ── Renderers ───────────────────────────────────────────────────


def render(result: LocateResult, fmt: str) -> str:
    """Render in one of ``FORMATS``."""
    if fmt == "json":
        return render_json(result)
    if fmt == "env":
        return render_env(result)
    if fmt == "cmake":
        return render_cmake(result)
    raise ValueError(f"Unknown format '{fmt}' (expected one of: {', '.join(FORMATS)})")


def render_json(result: LocateResult) -> str:
    data = {
        "variables": build_variables(result),
        "advanced": advanced_variables(result.prefix),
        "targets": [t.model_dump(mode="json") for t in result.targets],
        "message": result.failure_message,
    }
    return json.dumps(data, indent=2)


def render_env(result: LocateResult) -> str:
    lines = [f"{name}={_scalar(value)}" for name, value in build_variables(result).items()]
    return "\n".join(lines) + "\n"


def render_cmake(result: LocateResult) -> str:
    lines: list[str] = [f"# Generated by acis-locate for {result.prefix}"]

    for name, value in build_variables(result).items():
        lines.append(f'set({name} "{_cmake_escape(_scalar(value))}")')

    lines.append(f"mark_as_advanced({' '.join(advanced_variables(result.prefix))})")

    for target in result.targets:
        lines.append("")
        lines.extend(_cmake_target(target))

    return "\n".join(lines) + "\n"


def _cmake_target(target: ImportedTarget) -> list[str]:
    lines = [
        f"if(NOT TARGET {target.name})",
        f"  add_library({target.name} {target.kind} IMPORTED)",
    ]
    props: list[tuple[str, str]] = []
    if target.configurations:
        props.append(("IMPORTED_CONFIGURATIONS", ";".join(target.configurations)))
    for config in ("RELEASE", "DEBUG"):
        location = getattr(target, f"location_{config.lower()}")
        implib = getattr(target, f"implib_{config.lower()}")
        if location:
            props.append((f"IMPORTED_LOCATION_{config}", location))
        if implib:
            props.append((f"IMPORTED_IMPLIB_{config}", implib))
    if target.include_dirs:
        props.append(("INTERFACE_INCLUDE_DIRECTORIES", ";".join(target.include_dirs)))
    if target.link_libraries:
        props.append(("INTERFACE_LINK_LIBRARIES", ";".join(target.link_libraries)))
    if target.compile_options:
        props.append(("INTERFACE_COMPILE_OPTIONS", ";".join(target.compile_options)))

    if props:
        lines.append(f"  set_target_properties({target.name} PROPERTIES")
        for key, value in props:
            lines.append(f'    {key} "{_cmake_escape(value)}"')
        lines.append("  )")
    lines.append("endif()")
    return lines


# ── Helpers ─────────────────────────────────────────────────────


def _path(value: object) -> str:
    return str(value) if value is not None else ""


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (list, tuple)):
        return ";".join(str(v) for v in value)
    if value is None:
        return ""
    return str(value)


def _cmake_escape(value: str) -> str:
    return value.replace("\\", "/").replace('"', '\\"').replace("$", "\\$")
