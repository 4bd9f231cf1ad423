"""
Compiles D2 diagrams referenced by case studies into light/dark SVGs.
"""

import logging
import os
import shutil
import subprocess
from typing import List, Tuple

from ..interfaces.content_repository import ContentRepository
from ..interfaces.output_emitter import OutputEmitter
from ..models.emit_result import EmitResult
from ..models.site_config import SiteConfig

# (suffix, d2 theme id)
THEMES: List[Tuple[str, str]] = [("light", "0"), ("dark", "200")]


class DiagramBuilder(OutputEmitter):
    """
    Runs the ``d2`` CLI over ``content/diagrams/*.d2``.

    When d2 is not installed the step is skipped and pre-compiled SVGs in
    the public directory are used as they are.
    """

    name = "diagrams"

    def __init__(self, d2_binary: str = "d2"):
        self.d2_binary = d2_binary
        self.logger = logging.getLogger(__name__)

    def is_d2_installed(self) -> bool:
        return shutil.which(self.d2_binary) is not None

    def emit(self, repository: ContentRepository, config: SiteConfig) -> EmitResult:
        diagrams_dir = os.path.join(config.content_dir, "diagrams")
        output_dir = os.path.join(config.public_dir, "diagrams")

        if not os.path.isdir(diagrams_dir):
            self.logger.info("No content/diagrams directory found, skipping.")
            return EmitResult(emitter=self.name, success=True, skipped=True)

        files = sorted(f for f in os.listdir(diagrams_dir) if f.endswith(".d2"))
        if not files:
            self.logger.info("No .d2 files found, skipping.")
            return EmitResult(emitter=self.name, success=True, skipped=True)

        if not self.is_d2_installed():
            self.logger.warning(
                "d2 CLI not found. Skipping diagram compilation. "
                "Install d2: https://d2lang.com/tour/install"
            )
            return EmitResult(emitter=self.name, success=True, skipped=True)

        os.makedirs(output_dir, exist_ok=True)

        built = 0
        failures = []
        for filename in files:
            name = filename[: -len(".d2")]
            input_path = os.path.join(diagrams_dir, filename)

            for theme, theme_id in THEMES:
                output_path = os.path.join(output_dir, f"{name}-{theme}.svg")
                try:
                    subprocess.run(
                        [self.d2_binary, f"--theme={theme_id}", input_path, output_path],
                        check=True,
                        capture_output=True,
                    )
                except subprocess.CalledProcessError as e:
                    stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
                    self.logger.warning(f"Failed to build {name}-{theme}.svg: {stderr}")
                    failures.append(f"{name}-{theme}")
                    continue

                self.logger.debug(f"Built {name}-{theme}.svg")
                built += 1

        self._warn_missing_references(repository, config, files)

        return EmitResult(
            emitter=self.name,
            success=not failures,
            files_written=built,
            output_path=output_dir,
            error_message=f"Failed: {', '.join(failures)}" if failures else None,
        )

    def _warn_missing_references(
        self, repository: ContentRepository, config: SiteConfig, files: List[str]
    ) -> None:
        """Warn about case studies whose d2Diagram has no source file."""
        available = {f[: -len(".d2")] for f in files}
        for locale in config.locales:
            for study in repository.list_case_studies(locale):
                if study.d2_diagram and study.d2_diagram not in available:
                    self.logger.warning(
                        f"Case study {study.slug} ({locale}) references missing "
                        f"diagram '{study.d2_diagram}'"
                    )
