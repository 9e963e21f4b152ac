"""Project template and compiled-summary paths.

Pure path bookkeeping: nothing here touches the filesystem. The caller hands
these strings to whatever populates and compiles the project.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Optional
import os

from warden.settings import Settings

if TYPE_CHECKING:  # pragma: no cover
    from warden.micro.admission.gate import PlatformProfile


@dataclass(frozen=True, slots=True)
class ProjectTemplates:
    # Plain Dart project template
    dart_path: str
    # Flutter project template
    flutter_path: str
    # Compiled Flutter Web summary
    summary_file_path: str

    @classmethod
    def from_base(cls, base_path: str) -> "ProjectTemplates":
        return cls(
            dart_path=os.path.join(base_path, "dart_project"),
            flutter_path=os.path.join(base_path, "flutter_project"),
            summary_file_path=os.path.join("artifacts", "flutter_web.dill"),
        )

    def template_path_for(self, profile: "PlatformProfile") -> str:
        return self.flutter_path if profile.uses_flutter else self.dart_path

    def summary_path_for(self, profile: "PlatformProfile") -> Optional[str]:
        """Compiled summary to analyze against; plain Dart needs none."""
        return self.summary_file_path if profile.uses_flutter else None


@lru_cache(maxsize=1)
def project_templates() -> ProjectTemplates:
    """Process-wide templates, resolved once from settings."""
    return ProjectTemplates.from_base(Settings.from_env().templates_dir)
