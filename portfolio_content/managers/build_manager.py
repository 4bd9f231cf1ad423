"""
Build manager for running output emitters against the content repository.
"""

import logging
from typing import List

from ..interfaces.content_repository import ContentRepository
from ..interfaces.output_emitter import OutputEmitter
from ..models.emit_result import EmitResult
from ..models.site_config import SiteConfig
from ..utils.error_handler import ContentError, ErrorHandler


class BuildManager:
    """
    Coordinates the build emitters.

    Emitter failures are isolated: a failing emitter is recorded and the
    remaining emitters still run.
    """

    def __init__(
        self,
        repository: ContentRepository,
        config: SiteConfig,
        emitters: List[OutputEmitter],
    ):
        """
        Initialize the build manager.

        Args:
            repository: Content source shared by all emitters
            config: Site configuration
            emitters: Emitters to run, in order
        """
        self.repository = repository
        self.config = config
        self.emitters = emitters
        self.logger = logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

        self.logger.debug(
            f"BuildManager initialized with emitters: {[e.name for e in emitters]}"
        )

    def run(self) -> List[EmitResult]:
        """
        Run every emitter.

        Returns:
            One EmitResult per emitter
        """
        results = []

        for emitter in self.emitters:
            try:
                self.logger.debug(f"Running {emitter.name}...")
                result = emitter.emit(self.repository, self.config)
            except (ContentError, OSError) as e:
                self.error_handler.log_emitter_error(e, emitter.name)
                result = EmitResult(
                    emitter=emitter.name, success=False, error_message=str(e)
                )

            if result.success and not result.skipped:
                self.error_handler.log_success(
                    emitter.name, result.files_written, result.output_path
                )
            results.append(result)

        successful = [r.emitter for r in results if r.success]
        failed = [
            (r.emitter, r.error_message or "Unknown error")
            for r in results
            if not r.success
        ]
        self.error_handler.log_build_failure_summary(successful, failed)

        return results
