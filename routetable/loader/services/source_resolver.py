"""
Route source resolution.

Picks the route array text from the route file, or from the inline
fallback content when the file cannot be used.
"""

import logging
import os
from typing import Optional

from ..core.exceptions import RouteSourceUnavailableError
from ..models.route import RouteSource, SourceOrigin

logger = logging.getLogger("routetable.source_resolver")


class RouteSourceResolver:
    def __init__(
        self,
        file_path: Optional[str],
        fallback_content: str,
        encoding: str = "utf-8-sig",
    ):
        """
        Args:
            file_path: Route file path (empty or None disables the file)
            fallback_content: Route array text used when the file is unavailable
            encoding: Route file text encoding
        """
        self.file_path = file_path
        self.fallback_content = fallback_content
        self.encoding = encoding

    def resolve(self) -> RouteSource:
        """
        Return the file content, or the fallback content if the file is
        missing, unreadable or blank.
        """
        try:
            text = self._read_file()
        except RouteSourceUnavailableError as e:
            logger.info(f"Error reading routes from file, falling back to configured routes: {e}")
            return self.fallback()

        return RouteSource(text=text, origin=SourceOrigin.FILE, path=self.file_path)

    def fallback(self) -> RouteSource:
        return RouteSource(text=self.fallback_content or "", origin=SourceOrigin.FALLBACK)

    def _read_file(self) -> str:
        if not self.file_path:
            raise RouteSourceUnavailableError(
                self.file_path, ValueError("no route file configured")
            )
        if not os.path.isfile(self.file_path):
            raise RouteSourceUnavailableError(self.file_path, FileNotFoundError("file not found"))

        try:
            with open(self.file_path, "r", encoding=self.encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise RouteSourceUnavailableError(self.file_path, e) from e

        if not text.strip():
            raise RouteSourceUnavailableError(self.file_path, ValueError("file is empty"))

        return text
