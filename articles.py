import logging
import os

logger = logging.getLogger(__name__)

ARTICLE_EXTENSION = '.md'


class ArticleError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidInput(ArticleError):
    status_code = 400


class NotAllowed(ArticleError):
    # Same message as a missing file so callers can't probe the directory
    status_code = 400


class StorageFailure(ArticleError):
    status_code = 500

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


class ArticleHandler:
    """Looks up allow-listed markdown articles under a fixed base directory.

    Only names that exactly match an allow-list entry are ever turned into a
    filesystem path, so nothing outside the base directory can be read.
    """

    def __init__(self, resource_base_path, allowed_articles):
        if not resource_base_path:
            raise ValueError('resource_base_path must not be empty')
        allowed_articles = tuple(allowed_articles)
        if not allowed_articles:
            raise ValueError('allowed_articles must not be empty')

        self.resource_base_path = resource_base_path
        self.allowed_articles = allowed_articles
        self._allowed = frozenset(allowed_articles)

    def path_for(self, candidate):
        return os.path.join(self.resource_base_path, candidate)

    def missing_articles(self):
        """Allow-listed entries with no regular file behind them."""
        return [name for name in self.allowed_articles
                if not os.path.isfile(self.path_for(name))]

    def handle(self, filename):
        if not filename:
            raise InvalidInput("filename can't be empty")

        candidate = filename + ARTICLE_EXTENSION
        if candidate not in self._allowed:
            raise NotAllowed('file not found')

        path = self.path_for(candidate)
        try:
            with open(path, 'rb') as f:
                content = f.read()
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StorageFailure(e) from e

        logger.debug(f"Read {len(content)} bytes from {path}")
        return content
