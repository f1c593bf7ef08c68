import importlib
import pkgutil

from fastapi import APIRouter, FastAPI
from loguru import logger


def discover_routers(package_name: str = "standings.api") -> list[APIRouter]:
    """
    Collect the module-level ``router`` of every module in a package.

    Args:
        package_name: The package to scan.

    Returns:
        Routers in module name order.
    """
    package = importlib.import_module(package_name)
    package_path = getattr(package, "__path__", None)
    if not package_path:
        logger.warning(f"Cannot scan {package_name} for routers as it's not a package")
        return []

    routers: list[APIRouter] = []
    for module_info in sorted(pkgutil.iter_modules(package_path), key=lambda m: m.name):
        full_module_name = f"{package_name}.{module_info.name}"
        if module_info.ispkg:
            routers.extend(discover_routers(full_module_name))
            continue

        module = importlib.import_module(full_module_name)
        router = getattr(module, "router", None)
        if isinstance(router, APIRouter):
            routers.append(router)
            logger.info(f"Discovered router {router.prefix or '/'} in {full_module_name}")

    return routers


def register_routers(app: FastAPI, prefix: str = "/api") -> None:
    for router in discover_routers():
        app.include_router(router, prefix=prefix)
