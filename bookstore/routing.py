import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from bookstore.logging import logger

# Track registered modules so repeated application() calls log once
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collect the routers of every module in `bookstore/api/http`.

    Each module there exposes a module-level `router`; all of them are
    included in one main router, which becomes the application's entry
    point.
    """
    main_router: APIRouter = APIRouter()

    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{app_name}.api.http")

        main_router.include_router(api.router)

        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
