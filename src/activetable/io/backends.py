"""
Store factory: turn StoreSettings into a concrete GridStore.
"""

from __future__ import annotations

from .config import StoreSettings
from .errors import StoreConfigError
from .memory import MemoryGridStore
from .store import GridStore
from .workbook import FileGridStore


def open_store(settings: StoreSettings | None = None) -> GridStore:
    """
    Build the GridStore selected by settings.backend.

    Args:
        settings (StoreSettings | None): Store configuration; StoreSettings.load() when None.

    Returns:
        GridStore: MemoryGridStore, FileGridStore, or GoogleSheetsStore.

    Raises:
        StoreConfigError: Unknown backend, or the sheets backend without a spreadsheet key
            or credentials file.
    """
    s = settings or StoreSettings.load()
    if s.backend == "file":
        return FileGridStore(s)
    if s.backend == "memory":
        return MemoryGridStore()
    if s.backend == "sheets":
        if not s.spreadsheet_key or not s.credentials_file:
            raise StoreConfigError(
                "sheets backend needs spreadsheet_key and credentials_file "
                "(ACTIVETABLE_SPREADSHEET_KEY / ACTIVETABLE_CREDENTIALS_FILE)"
            )
        from .sheets import GoogleSheetsStore

        return GoogleSheetsStore.from_service_account(
            s.spreadsheet_key,
            s.credentials_file,
            value_input_option=s.value_input_option,
        )
    raise StoreConfigError(f"unsupported backend {s.backend!r}")
