import pytest

from core.errors import ErrorKind, RepositoryError
from services.platform_service import (
    AndroidCapabilities,
    DesktopCapabilities,
    detect_capabilities,
)


def test_desktop_uses_relative_database_file():
    assert DesktopCapabilities().database_path() == "patients.db"


def test_desktop_printing_is_unsupported():
    with pytest.raises(RepositoryError) as excinfo:
        DesktopCapabilities().print_invoice("Total: 10", "INV-1")
    assert excinfo.value.kind is ErrorKind.UNSUPPORTED


def test_android_database_under_home(monkeypatch):
    monkeypatch.setenv("HOME", "/data/data/app/files")
    assert AndroidCapabilities().database_path() == "/data/data/app/files/patients.db"


def test_android_database_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert AndroidCapabilities().database_path() == "patients.db"


def test_android_print_returns_command_string():
    android = AndroidCapabilities()
    assert android.print_invoice("line1\nline2") == "PRINT:Invoice:line1\nline2"
    assert android.print_invoice("body", "Receipt") == "PRINT:Receipt:body"


def test_detect_capabilities_by_name(monkeypatch):
    monkeypatch.delenv("PATIENTS_PLATFORM", raising=False)
    assert isinstance(detect_capabilities("android"), AndroidCapabilities)
    assert isinstance(detect_capabilities("Desktop"), DesktopCapabilities)


def test_detect_capabilities_from_environment(monkeypatch):
    monkeypatch.setenv("PATIENTS_PLATFORM", "android")
    assert isinstance(detect_capabilities(), AndroidCapabilities)


def test_detect_capabilities_unknown_name_falls_back(monkeypatch):
    monkeypatch.delenv("PATIENTS_PLATFORM", raising=False)
    assert isinstance(detect_capabilities("beos"), DesktopCapabilities)


def test_detect_capabilities_runtime(monkeypatch):
    monkeypatch.delenv("PATIENTS_PLATFORM", raising=False)
    monkeypatch.setattr("services.platform_service.is_android", lambda: True)
    assert isinstance(detect_capabilities(), AndroidCapabilities)

    monkeypatch.setattr("services.platform_service.is_android", lambda: False)
    assert isinstance(detect_capabilities(), DesktopCapabilities)
