"""
Shared test fixtures and configuration.

Most tests build a fake ACIS installation under ``tmp_path`` with
``make_install`` and point the locator at it.  Descriptors come from the
built-in acis toolkit with its hint list redirected into ``tmp_path`` so
nothing outside the test directory is ever probed.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from acis_locator.core.config.toolkit_loader import resolve_toolkit
from acis_locator.core.models.platform import PlatformVariant
from acis_locator.core.models.toolkit import ToolkitDescriptor
from acis_locator.core.services.locator import LocateRequest

LINUX_ARCH = "linux_a64"
WINDOWS_ARCH = "NT_VC14_64_DLL"


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def build_install(
    base: Path,
    platform: PlatformVariant = PlatformVariant.LINUX,
    arch: str | None = None,
    components: tuple[str, ...] = (),
    library: bool = True,
    debug: bool = True,
) -> Path:
    """Create a fake ACIS tree under ``base`` and return ``base``.

    Components are given by their bare library name (``SpaPhlV5``).
    """
    _touch(base / "include" / "acis.hxx")

    if platform is PlatformVariant.WINDOWS:
        arch = arch or WINDOWS_ARCH
        names = (["SpaACIS"] if library else []) + list(components)
        for name in names:
            _touch(base / arch / "code" / "lib" / f"{name}.lib")
            _touch(base / arch / "code" / "bin" / f"{name}.dll")
            if debug:
                _touch(base / f"{arch}D" / "code" / "lib" / f"{name}d.lib")
                _touch(base / f"{arch}D" / "code" / "bin" / f"{name}d.dll")
        return base

    arch = arch or LINUX_ARCH
    if library:
        _touch(base / arch / "code" / "bin" / "libSpaACIS.so")
    for name in components:
        _touch(base / arch / "code" / "bin" / f"lib{name}.so")
    return base


@pytest.fixture
def make_install(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory: ``make_install("opt/acis", components=("SpaPhlV5",))``."""

    def _make(relative: str = "acis", **kwargs) -> Path:
        return build_install(tmp_path / relative, **kwargs)

    return _make


@pytest.fixture
def hint_dir(tmp_path: Path) -> Path:
    """Directory standing in for /opt — the descriptor's hints live here."""
    path = tmp_path / "opt"
    path.mkdir()
    return path


@pytest.fixture
def toolkit(hint_dir: Path) -> ToolkitDescriptor:
    """The built-in acis descriptor with hints redirected to ``hint_dir``."""
    base = resolve_toolkit("acis")
    return base.model_copy(update={"hints": [str(hint_dir / "acis"), str(hint_dir / "r26")]})


@pytest.fixture
def make_request(toolkit: ToolkitDescriptor) -> Callable[..., LocateRequest]:
    """Factory for LocateRequest with a clean environment and no pthread."""

    def _make(**kwargs) -> LocateRequest:
        kwargs.setdefault("toolkit", toolkit)
        kwargs.setdefault("environ", {})
        kwargs.setdefault("platform", PlatformVariant.LINUX)
        kwargs.setdefault("thread_finder", lambda name: None)
        return LocateRequest(**kwargs)

    return _make
