from fastapi import Request

from aia_assess.engine.catalog import QuestionCatalog, default_catalog
from aia_assess.settings import Settings


def load_catalog(settings: Settings) -> QuestionCatalog:
    # a configured catalog file replaces the bundled sample entirely
    if settings.CATALOG_PATH:
        return QuestionCatalog.from_json(settings.CATALOG_PATH)
    return default_catalog()


def get_catalog(request: Request) -> QuestionCatalog:
    return request.app.state.catalog
