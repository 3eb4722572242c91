# api/routes/__init__.py
from . import authors, devmode, libraries, series, stories, volumes

ROUTERS = [
    libraries.router,
    authors.router,
    series.router,
    stories.router,
    volumes.router,
    devmode.router,
]

__all__ = ['ROUTERS']
