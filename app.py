from flask import Flask
import logging

from articles import ArticleError, ArticleHandler
from config import Config


def configure_logging(level):
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def create_app(overrides=None):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    handler = ArticleHandler(app.config['ARTICLES_DIR'], app.config['ALLOWED_ARTICLES'])
    app.extensions['article_handler'] = handler

    app.logger.info(f"Serving articles from {handler.resource_base_path}")
    for name in handler.missing_articles():
        app.logger.warning(f"Allow-listed article missing on disk: {handler.path_for(name)}")

    @app.errorhandler(ArticleError)
    def article_error(e):
        # Storage failures are already logged with the path they tried to read
        if e.status_code < 500:
            app.logger.warning(f"{type(e).__name__}: {e.message}")
        return e.message, e.status_code

    @app.route('/', defaults={'filename': ''})
    @app.route('/<path:filename>')
    def view_article(filename):
        return handler.handle(filename)

    return app


def main():
    configure_logging(Config.LOG_LEVEL)
    app = create_app()
    app.run(host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
