"""Discovery of the HTTP routers under simplybooks/api/http."""

import pkgutil
from importlib import import_module
from pathlib import Path

from fastapi import APIRouter

from simplybooks.logging import logger

HTTP_PACKAGE = "simplybooks.api.http"


def collect_subrouters() -> APIRouter:
    """
    Build the root router from every module of the ``api/http`` package.

    Each module must expose a module-level ``router``. Modules are included
    in name order (author, book, health, metrics), which keeps the route
    order within a module as it is declared.
    """
    root = APIRouter()
    package_dir = Path(__file__).parent / "api" / "http"

    for module_info in sorted(
        pkgutil.iter_modules([str(package_dir)]), key=lambda m: m.name
    ):
        module = import_module(f"{HTTP_PACKAGE}.{module_info.name}")
        root.include_router(module.router)
        logger.info(f"Registered HTTP routes from {module_info.name!r}")

    return root
