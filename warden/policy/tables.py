from __future__ import annotations

# Shared policy tables for the import classifier.
# Keep this module import-light to avoid cycles; nothing mutates these.

# Curated community packages built on the UI framework
SUPPORTED_FLUTTER_PACKAGES = frozenset({
    "animations",
    "creator",
    "flutter_adaptive_scaffold",
    "flutter_bloc",
    "flutter_hooks",
    "flutter_lints",
    "flutter_map",
    "flutter_processing",
    "flutter_riverpod",
    "flutter_svg",
    "go_router",
    "google_fonts",
    "hooks_riverpod",
    "provider",
    "riverpod_navigator",
    "shared_preferences",
    "video_player",
})

# Any of these marks the submission as a Flutter Web one
PACKAGES_INDICATING_FLUTTER = frozenset({
    "flutter",
    "flutter_test",
    *SUPPORTED_FLUTTER_PACKAGES,
})

# Plain Dart (non-Flutter) packages importable directly from a script
SUPPORTED_BASIC_DART_PACKAGES = frozenset({
    "basics",
    "bloc",
    "characters",
    "collection",
    "cross_file",
    "dartz",
    "english_words",
    "equatable",
    "fast_immutable_collections",
    "http",
    "intl",
    "js",
    "lints",
    "matcher",
    "meta",
    "path",
    "petitparser",
    "quiver",
    "riverpod",
    "rohd",
    "rohd_vf",
    "rxdart",
    "timezone",
    "tuple",
    "vector_math",
    "yaml",
    "yaml_edit",
})

# Runtime-internal libraries: the non-VM `dart:` libraries only.
# Exact matches; new `dart:` libraries stay denied until listed here.
DART_SCHEME_PREFIX = "dart:"
DART_UI_IMPORT = "dart:ui"
ALLOWED_DART_IMPORTS = frozenset({
    "dart:async",
    "dart:collection",
    "dart:convert",
    "dart:core",
    "dart:developer",
    "dart:math",
    "dart:typed_data",
    "dart:html",
    "dart:indexed_db",
    "dart:js",
    "dart:js_util",
    "dart:svg",
    "dart:web_audio",
    "dart:web_gl",
    DART_UI_IMPORT,
})

# Core Firebase packages (flattened table; family prefixes below also count)
FIREBASE_PACKAGES = frozenset({
    "cloud_firestore",
    "firebase_auth",
    "firebase_core",
    "flame",
})
FIREBASE_PACKAGE_PREFIXES = ("firebase_", "flame_")

# Still admitted, but callers get a warning. Must stay a subset of the
# supported tables.
DEPRECATED_PACKAGES = frozenset({
    "js",
    "tuple",
})

PACKAGE_SCHEME = "package"
