"""Import Warden - import policy engine for sandboxed Dart/Flutter submissions"""

__version__ = "0.1.0"
