from fastapi import APIRouter
from typing import List

from src.app.config import MODELS
from src.app.schemas import core as core_schema

router = APIRouter()

API_VERSION = "1.0.0"


@router.get("/status", response_model=core_schema.MessageResponse)
async def get_system_status():
    """
    Health check endpoint.
    """
    return {"message": "System OK"}

@router.get("/version", response_model=core_schema.MessageResponse)
async def get_system_version():
    """
    Returns the current API version.
    """
    return {"message": f"LlamaCoder API Version {API_VERSION}"}

@router.get("/models", response_model=List[core_schema.ModelOption], summary="List code-generation models")
async def list_models():
    return MODELS
