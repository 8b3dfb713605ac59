"""Tests for the REST path registry."""

import pytest

from core.domain import paths
from core.domain.paths import RESOURCE_PATHS, resolve_path


class TestConstants:
    def test_api_root(self):
        assert paths.PATH == "/rest"

    def test_session_cookie_name(self):
        assert paths.SESSION_COOKIE_NAME == "vmware-api-session-id"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("SESSION_PATH", "/com/vmware/cis/session"),
            ("CATEGORY_PATH", "/com/vmware/cis/tagging/category"),
            ("TAG_PATH", "/com/vmware/cis/tagging/tag"),
            ("ASSOCIATION_PATH", "/com/vmware/cis/tagging/tag-association"),
            ("LIBRARY_PATH", "/com/vmware/content/library"),
            ("LIBRARY_ITEM_FILE_DATA", "/com/vmware/cis/data"),
            ("LIBRARY_ITEM_PATH", "/com/vmware/content/library/item"),
            ("LIBRARY_ITEM_FILE_PATH", "/com/vmware/content/library/item/file"),
            ("LIBRARY_ITEM_UPDATE_SESSION", "/com/vmware/content/library/item/update-session"),
            ("LIBRARY_ITEM_UPDATE_SESSION_FILE", "/com/vmware/content/library/item/updatesession/file"),
            ("LIBRARY_ITEM_DOWNLOAD_SESSION", "/com/vmware/content/library/item/download-session"),
            ("LIBRARY_ITEM_DOWNLOAD_SESSION_FILE", "/com/vmware/content/library/item/downloadsession/file"),
            ("LOCAL_LIBRARY_PATH", "/com/vmware/content/local-library"),
            ("SUBSCRIBED_LIBRARY_PATH", "/com/vmware/content/subscribed-library"),
            ("VCENTER_OVF_LIBRARY_ITEM", "/com/vmware/vcenter/ovf/library-item"),
        ],
    )
    def test_resource_paths(self, name, expected):
        assert getattr(paths, name) == expected

    def test_registry_covers_every_resource_path(self):
        assert len(RESOURCE_PATHS) == 15
        assert len(set(RESOURCE_PATHS.values())) == 15
        assert paths.PATH not in RESOURCE_PATHS.values()

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            RESOURCE_PATHS["session"] = "/other"  # type: ignore[index]


class TestResolvePath:
    def test_logical_name(self):
        assert resolve_path("tag-association") == paths.ASSOCIATION_PATH

    def test_raw_path_passes_through(self):
        assert resolve_path("/com/vmware/anything") == "/com/vmware/anything"

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown resource 'nope'"):
            resolve_path("nope")
