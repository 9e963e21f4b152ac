from warden.policy import (
    ImportDirective,
    is_firebase_package,
    is_flutter_web_import,
    uses_firebase,
    uses_flutter_web,
)


def _imports(*uris):
    return [ImportDirective(uri=u) for u in uris]


def test_dart_ui_denotes_flutter():
    assert uses_flutter_web(_imports("dart:ui")) is True
    assert uses_flutter_web(_imports("dart:math")) is False


def test_flutter_packages_denote_flutter():
    assert uses_flutter_web(_imports("dart:math", "package:flutter/material.dart")) is True
    assert uses_flutter_web(_imports("package:go_router/go_router.dart")) is True
    assert uses_flutter_web(_imports("package:http/http.dart")) is False


def test_flutter_detection_edge_cases():
    assert uses_flutter_web([]) is False
    assert is_flutter_web_import(None) is False
    assert is_flutter_web_import("package:") is False
    # substring matches do not count
    assert is_flutter_web_import("http://example.com/package:flutter/x.dart") is False


def test_firebase_detection():
    assert uses_firebase(_imports("package:cloud_firestore/cloud_firestore.dart")) is True
    assert uses_firebase(_imports("package:http/http.dart", "package:flame/game.dart")) is True
    assert uses_firebase(_imports("package:http/http.dart")) is False
    assert uses_firebase([]) is False
    assert uses_firebase(_imports(None, "")) is False


def test_firebase_family_prefixes():
    assert is_firebase_package("firebase_messaging")
    assert is_firebase_package("flame_audio")
    assert not is_firebase_package("firebase")
    assert not is_firebase_package("flamegraph")


def test_detectors_accept_any_object_with_uri():
    class Directive:
        def __init__(self, uri):
            self.uri = uri

    assert uses_flutter_web([Directive("dart:ui")]) is True
    assert uses_firebase([Directive("package:firebase_auth/firebase_auth.dart")]) is True
