import pytest

from app import create_app
from articles import ArticleHandler
from config import Config


@pytest.fixture
def articles_dir(tmp_path):
    base = tmp_path / 'markdown'
    base.mkdir()
    (base / 'article_1.md').write_bytes(b'Hello')
    (base / 'article_3.md').write_bytes('# Título\n\n- one\n- two\n'.encode('utf-8'))
    return base


@pytest.fixture
def handler(articles_dir):
    return ArticleHandler(str(articles_dir), Config.ALLOWED_ARTICLES)


@pytest.fixture
def app(articles_dir):
    return create_app({'ARTICLES_DIR': str(articles_dir), 'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()
