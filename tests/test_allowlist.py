import pytest

from warden.policy import is_supported_package, is_unsupported_import


@pytest.mark.parametrize("uri", ["dart:math", "dart:async", "dart:ui", "dart:html", "dart:js_util"])
def test_allowed_dart_libraries(uri):
    assert is_unsupported_import(uri) is False


@pytest.mark.parametrize("uri", ["dart:io", "dart:isolate", "dart:ffi", "dart:mirrors", "dart:math2", "dart:"])
def test_other_dart_libraries_are_denied(uri):
    assert is_unsupported_import(uri) is True


def test_empty_and_missing_uris_are_supported():
    assert is_unsupported_import(None) is False
    assert is_unsupported_import("") is False


def test_supported_packages():
    assert is_unsupported_import("package:flutter/material.dart") is False
    assert is_unsupported_import("package:flutter_test/flutter_test.dart") is False
    assert is_unsupported_import("package:provider/provider.dart") is False
    assert is_unsupported_import("package:http/http.dart") is False
    assert is_unsupported_import("package:yaml_edit/yaml_edit.dart") is False


def test_unknown_packages_are_denied():
    assert is_unsupported_import("package:some_random_pkg/x.dart") is True
    assert is_unsupported_import("package:Flutter/material.dart") is True
    assert is_unsupported_import("package:") is True


def test_cloud_backend_packages_are_not_admitted():
    assert is_unsupported_import("package:firebase_core/firebase_core.dart") is True


def test_known_local_files():
    assert is_unsupported_import("my_sibling.dart", {"my_sibling.dart"}) is False
    assert is_unsupported_import("my_sibling.dart") is True
    assert is_unsupported_import("other.dart", {"my_sibling.dart"}) is True


def test_known_local_set_cannot_allow_dart_libraries():
    assert is_unsupported_import("dart:io", {"dart:io"}) is True


@pytest.mark.parametrize("uri", [
    "file:///etc/passwd",
    "http://example.com/x.dart",
    "https://example.com/x.dart",
    "/etc/passwd",
    "../secrets.dart",
    "DART:io",
])
def test_file_and_network_imports_are_denied(uri):
    assert is_unsupported_import(uri) is True
    assert is_unsupported_import(uri, {"my_sibling.dart"}) is True


def test_unparsable_uri_is_admitted_by_default():
    assert is_unsupported_import("bad%zzescape.dart") is False
    assert is_unsupported_import("http://[::1/x.dart") is False


def test_unparsable_uri_denied_when_hardened():
    assert is_unsupported_import("bad%zzescape.dart", deny_unparsable=True) is True


def test_unparsable_uri_denied_via_env(monkeypatch):
    monkeypatch.setenv("WARDEN_POLICY_DENY_UNPARSABLE", "1")
    assert is_unsupported_import("bad%zzescape.dart") is True
    assert is_unsupported_import("bad%zzescape.dart", deny_unparsable=False) is False


@pytest.mark.parametrize("uri", [
    "not a uri::",
    " file:///etc/passwd",
    "\thttp://evil/x.dart",
    "\nfile:///etc/passwd",
    " package:flutter/material.dart",
])
def test_strings_with_illegal_scheme_characters_are_denied(uri):
    assert is_unsupported_import(uri) is True


@pytest.mark.parametrize("uri", [
    "package:flut\tter/material.dart",
    "package:pro\nvider/provider.dart",
    "package:http\r/http.dart",
    "package:flutter /material.dart",
])
def test_control_characters_cannot_rebuild_a_supported_name(uri):
    assert is_unsupported_import(uri) is True


def test_is_supported_package():
    assert is_supported_package("flutter_riverpod")
    assert is_supported_package("collection")
    assert not is_supported_package("cloud_firestore")


def test_classification_is_repeatable():
    uris = ["dart:io", "package:http/http.dart", "sibling.dart", "bad%zzescape.dart", "not a uri::"]
    first = [is_unsupported_import(u, {"sibling.dart"}) for u in uris]
    second = [is_unsupported_import(u, {"sibling.dart"}) for u in uris]
    assert first == second == [True, False, False, False, True]
