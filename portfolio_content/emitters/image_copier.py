"""
Copies project images from the content tree into the public directory.
"""

import logging
import os
import shutil

from ..interfaces.content_repository import ContentRepository
from ..interfaces.output_emitter import OutputEmitter
from ..models.emit_result import EmitResult
from ..models.site_config import SiteConfig
from ..processors.validators import is_valid_slug
from ..utils.error_handler import EmitterError

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".avif", ".svg", ".gif"}


class ImageCopier(OutputEmitter):
    """
    Copies ``projects/<slug>/images/*`` to ``images/projects/<slug>/``.

    These are the files that bare image names in case study front matter
    resolve to.
    """

    name = "images"

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def emit(self, repository: ContentRepository, config: SiteConfig) -> EmitResult:
        source_root = os.path.join(config.content_dir, "projects")
        output_root = os.path.join(config.public_dir, "images", "projects")

        if not os.path.isdir(source_root):
            self.logger.info("No content/projects directory found, skipping.")
            return EmitResult(emitter=self.name, success=True, skipped=True)

        copied = 0
        for slug in sorted(os.listdir(source_root)):
            if not is_valid_slug(slug):
                self.logger.warning(f"Skipping unsafe project directory name: {slug!r}")
                continue

            images_dir = os.path.join(source_root, slug, "images")
            # symlinked image directories are not followed
            if os.path.islink(images_dir) or not os.path.isdir(images_dir):
                continue

            dest_dir = os.path.join(output_root, slug)
            for filename in sorted(os.listdir(images_dir)):
                if os.path.splitext(filename)[1].lower() not in IMAGE_EXTENSIONS:
                    continue

                src = os.path.join(images_dir, filename)
                try:
                    os.makedirs(dest_dir, exist_ok=True)
                    shutil.copyfile(src, os.path.join(dest_dir, filename))
                except OSError as e:
                    raise EmitterError(
                        f"Could not copy {src}: {str(e)}", emitter=self.name, path=src
                    ) from e

                self.logger.debug(f"Copied {slug}/{filename}")
                copied += 1

        if copied == 0:
            self.logger.info("No images found, skipping.")
        else:
            self.logger.info(f"Copied {copied} image(s).")

        return EmitResult(
            emitter=self.name,
            success=True,
            files_written=copied,
            output_path=output_root,
            skipped=copied == 0,
        )
