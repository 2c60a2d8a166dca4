"""Component vocabulary API endpoints."""
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from sdui_service.models.schemas.component_catalog import (
    export_component_catalog as export_component_catalog_payload,
    get_available_components,
    get_component_definition,
)

router = APIRouter()


@router.get(
    "/components",
    tags=["Components"],
    summary="Get component vocabulary",
    description="Returns every component type the composer may emit, with aliases and container types."
)
async def get_component_catalog() -> Dict[str, Any]:
    return export_component_catalog_payload()


@router.get(
    "/components/export",
    tags=["Components"],
    summary="Export component vocabulary as JSON",
    description="Downloads the component vocabulary as a JSON file."
)
async def export_component_catalog() -> JSONResponse:
    response = JSONResponse(
        content=export_component_catalog_payload()
    )
    response.headers["Content-Disposition"] = 'attachment; filename="component_catalog.json"'
    return response


@router.get(
    "/components/{name}",
    tags=["Components"],
    summary="Get one component definition",
    description="Looks a component up by canonical name or alias."
)
async def get_component(name: str) -> Dict[str, Any]:
    definition = get_component_definition(name)
    if definition is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "unknown_component",
                "component": name,
                "available": get_available_components(),
            }
        )
    return dict(definition)
