"""
Tests for domain models — platform variants, descriptors, config, results.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from acis_locator.core.models import (
    ComponentDescriptor,
    ImportedTarget,
    LibraryResult,
    LocateResult,
    LocatorConfig,
    PlatformVariant,
    ToolkitDescriptor,
    normalize_components,
)


class TestPlatformVariant:
    @pytest.mark.parametrize(
        "system, expected",
        [
            ("Windows", PlatformVariant.WINDOWS),
            ("CYGWIN", PlatformVariant.WINDOWS),
            ("Darwin", PlatformVariant.MACOS),
            ("Linux", PlatformVariant.LINUX),
            ("FreeBSD", PlatformVariant.LINUX),
        ],
    )
    def test_detect(self, system: str, expected: PlatformVariant):
        assert PlatformVariant.detect(system) is expected

    def test_detect_host(self):
        assert isinstance(PlatformVariant.detect(), PlatformVariant)

    def test_parse(self):
        assert PlatformVariant.parse(" MacOS ") is PlatformVariant.MACOS
        assert PlatformVariant.parse(None) is None
        assert PlatformVariant.parse(PlatformVariant.LINUX) is PlatformVariant.LINUX

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown platform 'beos'"):
            PlatformVariant.parse("beos")

    def test_strategy_filenames(self):
        assert PlatformVariant.WINDOWS.strategy.library_filenames(["SpaACIS"]) == ["SpaACIS.lib"]
        assert PlatformVariant.LINUX.strategy.library_filenames(["SpaACIS"]) == [
            "libSpaACIS.so",
            "libSpaACIS.a",
        ]

    def test_strategy_redist(self):
        assert PlatformVariant.WINDOWS.strategy.separate_debug_redist
        assert not PlatformVariant.LINUX.strategy.separate_debug_redist
        assert not PlatformVariant.MACOS.strategy.separate_debug_redist
        assert PlatformVariant.WINDOWS.strategy.shared_filename("SpaACIS") == "SpaACIS.dll"


class TestToolkitDescriptor:
    def _make(self) -> ToolkitDescriptor:
        return ToolkitDescriptor(
            name="acis",
            header="acis.hxx",
            release_names=["SpaACIS"],
            debug_names=["SpaACISd"],
            components=[ComponentDescriptor(name="phlv5", release_names=["SpaPhlV5"])],
        )

    def test_header_required(self):
        with pytest.raises(ValidationError):
            ToolkitDescriptor(name="x")

    def test_defaults(self):
        t = self._make()
        assert t.include_suffixes == ["include"]
        assert t.layout.release_suffixes == ["{arch}/code/lib", "{arch}/code/bin"]
        assert t.layout.debug_suffixes == ["{arch}D/code/lib", "{arch}/code/bin"]
        assert t.arch.env_var == "ARCH"

    def test_primary_is_component(self):
        primary = self._make().primary
        assert primary.name == "ACIS"
        assert primary.release_names == ["SpaACIS"]
        assert primary.debug_names == ["SpaACISd"]

    def test_component_names_upper(self):
        t = self._make()
        assert t.component_names == ["PHLV5"]
        assert t.get_component("PhlV5") is not None
        assert t.get_component("adm") is None

    def test_target_names(self):
        t = self._make()
        assert t.target_name() == "ACIS::ACIS"
        assert t.target_name("phlv5") == "ACIS::PHLV5"


class TestLocatorConfig:
    def test_defaults(self):
        c = LocatorConfig()
        assert c.toolkit == "acis"
        assert c.platform is None
        assert c.required is False

    def test_normalize(self):
        assert normalize_components(["adm", " ADM", "", "PhlV5"]) == ["ADM", "PHLV5"]
        assert normalize_components(None) == []

    def test_platform_string(self):
        assert LocatorConfig(platform="windows").platform is PlatformVariant.WINDOWS


class TestLibraryResult:
    def test_empty(self):
        lib = LibraryResult("ACIS")
        assert not lib.found
        assert lib.libraries == []
        assert lib.library is None

    def test_release_only(self):
        lib = LibraryResult("ACIS", release=Path("/r/libSpaACIS.so"))
        assert lib.found
        assert lib.libraries == ["/r/libSpaACIS.so"]

    def test_debug_only_serves_both(self):
        lib = LibraryResult("ACIS", debug=Path("/d/SpaACISd.lib"))
        assert lib.library == Path("/d/SpaACISd.lib")
        assert lib.libraries == ["/d/SpaACISd.lib"]

    def test_both(self):
        lib = LibraryResult("ACIS", release=Path("/r.lib"), debug=Path("/d.lib"))
        assert lib.libraries == ["optimized", "/r.lib", "debug", "/d.lib"]

    def test_same_file_for_both(self):
        lib = LibraryResult("ACIS", release=Path("/x.so"), debug=Path("/x.so"))
        assert lib.libraries == ["/x.so"]


class TestLocateResult:
    def test_failure_message_leads_with_fail_message(self):
        r = LocateResult(toolkit="acis", platform=PlatformVariant.LINUX,
                         missing=["ACIS_INCLUDE_DIR"], fail_message="Cannot find ACIS!")
        assert r.failure_message == "Cannot find ACIS! (missing: ACIS_INCLUDE_DIR)"

    def test_failure_message_generic(self):
        r = LocateResult(toolkit="acis", platform=PlatformVariant.LINUX,
                         missing=["ACIS_LIBRARIES"])
        assert r.failure_message == "Could NOT find ACIS (missing: ACIS_LIBRARIES)"

    def test_found_has_no_message(self):
        r = LocateResult(toolkit="acis", platform=PlatformVariant.LINUX, found=True)
        assert r.failure_message == ""

    def test_not_found_has_no_link_libraries(self):
        r = LocateResult(toolkit="acis", platform=PlatformVariant.LINUX,
                         library=LibraryResult("ACIS", release=Path("/x.so")))
        assert r.link_libraries == []
        assert r.redist_release is None

    def test_to_dict(self):
        r = LocateResult(toolkit="acis", platform=PlatformVariant.MACOS)
        d = r.to_dict()
        assert d["platform"] == "macos"
        assert d["found"] is False
        assert d["library"] is None


class TestImportedTarget:
    def test_configurations(self):
        t = ImportedTarget(name="ACIS::ACIS", location_release="/x.so")
        assert t.configurations == ["RELEASE"]
        assert ImportedTarget(name="A::B").configurations == []


class TestPackageExports:
    def test_all_names_resolve(self):
        import acis_locator.core.models as models

        for name in models.__all__:
            assert getattr(models, name) is not None
        assert len(set(models.__all__)) == len(models.__all__)
