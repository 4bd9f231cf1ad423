"""
Error types and logging helpers for the content layer and build emitters.

Absence (missing files, invalid slugs, partial localization) is never an
error here; those paths return empty results. The exceptions below cover
the failures that should abort or be reported by a build.
"""

import logging
from typing import Dict, List, Optional, Tuple


class ContentError(Exception):
    """Base exception for content-related errors."""

    def __init__(
        self,
        message: str,
        path: str = None,
        slug: str = None,
        locale: str = None,
    ):
        super().__init__(message)
        self.path = path
        self.slug = slug
        self.locale = locale


class DocumentParseError(ContentError):
    """Exception raised when a document's front matter cannot be parsed."""

    pass


class ConfigurationError(ContentError):
    """Exception raised for invalid site configuration values."""

    pass


class EmitterError(ContentError):
    """Exception raised when a build emitter cannot write its output."""

    def __init__(self, message: str, emitter: str = None, path: str = None):
        super().__init__(message, path=path)
        self.emitter = emitter


class ErrorHandler:
    """
    Central place for formatting content and build log messages.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance. If None, creates a new logger.
        """
        self.logger = logger or logging.getLogger(__name__)

    def log_skipped_document(self, kind: str, slug: str, locale: str) -> None:
        """
        Log a slug directory that has no document for the requested locale.

        Partial localization is expected, so this is debug-level only.
        """
        self.logger.debug(f"Skipping {kind}/{slug}: no '{locale}' document")

    def log_dropped_field(self, slug: str, field_name: str, reason: str) -> None:
        """
        Log an optional front matter field that failed validation.

        Args:
            slug: Slug of the entity being assembled
            field_name: Front matter key that was dropped
            reason: Short description of why it was dropped
        """
        self.logger.debug(f"Dropped '{field_name}' from {slug}: {reason}")

    def log_parse_error(self, error: Exception, path: str) -> None:
        """
        Log a front matter parse failure with the offending file.

        Args:
            error: The exception raised by the YAML parser
            path: Path of the document being parsed
        """
        self.logger.error(
            f"Failed to parse front matter in {path}: {str(error)}",
            extra={"error_details": {"path": path, "error_type": type(error).__name__}},
        )

    def log_emitter_error(
        self,
        error: Exception,
        emitter: str,
        additional_context: Dict = None,
    ) -> None:
        """
        Log a build emitter failure with context.

        Args:
            error: The exception that occurred
            emitter: Name of the emitter that failed
            additional_context: Additional context information
        """
        error_details = {
            "emitter": emitter,
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        if additional_context:
            error_details.update(additional_context)

        if getattr(error, "path", None):
            error_details["path"] = error.path

        self.logger.error(
            f"Build error in {emitter}: {str(error)}",
            extra={"error_details": error_details},
            exc_info=True,
        )

    def log_success(
        self,
        emitter: str,
        files_written: int,
        output_path: str = None,
    ) -> None:
        """
        Log a successful emitter run.

        Args:
            emitter: Name of the emitter
            files_written: Number of files written
            output_path: Main output location (if any)
        """
        message = f"SUCCESS: {emitter} wrote {files_written} file(s)"

        if output_path:
            message += f" to {output_path}"

        self.logger.info(message)

    def log_build_failure_summary(
        self,
        successful: List[str],
        failed: List[Tuple[str, str]],
    ) -> None:
        """
        Log summary of failed emitters after a build.

        Args:
            successful: Names of emitters that succeeded
            failed: List of tuples (emitter, error_message)
        """
        if successful and failed:
            self.logger.warning(
                f"PARTIAL BUILD: Succeeded: {', '.join(successful)}; "
                f"Failed: {', '.join([f[0] for f in failed])}"
            )

            for emitter, error_msg in failed:
                self.logger.error(f"  - {emitter}: {error_msg}")

        elif failed and not successful:
            self.logger.error(
                f"BUILD FAILED: all emitters failed: {', '.join([f[0] for f in failed])}"
            )
