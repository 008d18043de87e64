import os


class Config:
    """Application configuration, overridable through environment variables."""

    # Directory holding the article files
    ARTICLES_DIR = os.environ.get('ARTICLES_DIR', './static/markdown')

    # Only these files are ever served
    ALLOWED_ARTICLES = ('article_1.md', 'article_2.md', 'article_3.md')

    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 8859))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
