"""Rutas REST de la familia vAPI (sesión, tagging, content library).

Por qué constantes:
- Los clientes tipados (tagging, library, OVF) componen sus URLs a partir de
  estas rutas; tienen que coincidir byte a byte con las del servidor.
- No hay validación en runtime: son literales fijos.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

PATH = "/rest"

SESSION_PATH = "/com/vmware/cis/session"
CATEGORY_PATH = "/com/vmware/cis/tagging/category"
TAG_PATH = "/com/vmware/cis/tagging/tag"
ASSOCIATION_PATH = "/com/vmware/cis/tagging/tag-association"
LIBRARY_PATH = "/com/vmware/content/library"
LIBRARY_ITEM_FILE_DATA = "/com/vmware/cis/data"
LIBRARY_ITEM_PATH = "/com/vmware/content/library/item"
LIBRARY_ITEM_FILE_PATH = "/com/vmware/content/library/item/file"
LIBRARY_ITEM_UPDATE_SESSION = "/com/vmware/content/library/item/update-session"
LIBRARY_ITEM_UPDATE_SESSION_FILE = "/com/vmware/content/library/item/updatesession/file"
LIBRARY_ITEM_DOWNLOAD_SESSION = "/com/vmware/content/library/item/download-session"
LIBRARY_ITEM_DOWNLOAD_SESSION_FILE = "/com/vmware/content/library/item/downloadsession/file"
LOCAL_LIBRARY_PATH = "/com/vmware/content/local-library"
SUBSCRIBED_LIBRARY_PATH = "/com/vmware/content/subscribed-library"
VCENTER_OVF_LIBRARY_ITEM = "/com/vmware/vcenter/ovf/library-item"

SESSION_COOKIE_NAME = "vmware-api-session-id"

# Nombre lógico -> ruta (sin la raíz `/rest`), para la CLI.
RESOURCE_PATHS: Mapping[str, str] = MappingProxyType(
    {
        "session": SESSION_PATH,
        "category": CATEGORY_PATH,
        "tag": TAG_PATH,
        "tag-association": ASSOCIATION_PATH,
        "library": LIBRARY_PATH,
        "library-item-file-data": LIBRARY_ITEM_FILE_DATA,
        "library-item": LIBRARY_ITEM_PATH,
        "library-item-file": LIBRARY_ITEM_FILE_PATH,
        "library-item-update-session": LIBRARY_ITEM_UPDATE_SESSION,
        "library-item-update-session-file": LIBRARY_ITEM_UPDATE_SESSION_FILE,
        "library-item-download-session": LIBRARY_ITEM_DOWNLOAD_SESSION,
        "library-item-download-session-file": LIBRARY_ITEM_DOWNLOAD_SESSION_FILE,
        "local-library": LOCAL_LIBRARY_PATH,
        "subscribed-library": SUBSCRIBED_LIBRARY_PATH,
        "ovf-library-item": VCENTER_OVF_LIBRARY_ITEM,
    }
)


def resolve_path(name_or_path: str) -> str:
    """Devuelve la ruta para un nombre lógico; si ya es una ruta, la deja tal cual."""

    if name_or_path.startswith("/"):
        return name_or_path
    try:
        return RESOURCE_PATHS[name_or_path]
    except KeyError:
        known = ", ".join(sorted(RESOURCE_PATHS))
        raise KeyError(f"Unknown resource {name_or_path!r} (known: {known})") from None
