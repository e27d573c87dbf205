# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import AppContainer
from services.SemanticSearchService import SemanticSearchService


@lru_cache
def get_app_container() -> AppContainer:
    # built on first request so importing the app needs no credentials
    return AppContainer()


def get_search_service() -> SemanticSearchService:
    # use the singleton service from the container
    return get_app_container().search_service
