"""Provider settings API for the admin settings page and the chat model picker."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from llm_registry.api.deps import get_db, get_identity
from llm_registry.api.envelope import ok
from llm_registry.core.identity import SessionIdentity
from llm_registry.schemas.registry import (
    CustomProviderIn,
    ProviderSettingsUpdate,
    ReorderModelsRequest,
    ReorderProvidersRequest,
)
from llm_registry.services.registry_service import ProviderRegistryService

router = APIRouter(prefix="/api/providers", tags=["providers"])


@router.get("")
def list_provider_summaries(
    db: Session = Depends(get_db), identity: SessionIdentity = Depends(get_identity)
):
    data = ProviderRegistryService(db).list_provider_summaries(identity)
    return ok(data)


@router.get("/settings")
def list_provider_settings(
    db: Session = Depends(get_db), identity: SessionIdentity = Depends(get_identity)
):
    """Full provider rows including endpoint and API key. Admin only."""
    data = ProviderRegistryService(db).list_provider_settings_full(identity)
    return ok(data)


@router.get("/active")
def list_active_providers(
    db: Session = Depends(get_db), identity: SessionIdentity = Depends(get_identity)
):
    data = ProviderRegistryService(db).list_active_providers(identity)
    return ok(data)


@router.put("/order")
async def reorder_providers(
    request: ReorderProvidersRequest,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    await ProviderRegistryService(db).reorder_providers(identity, request.providers)
    return ok({"updated": len(request.providers)})


@router.post("")
def add_custom_provider(
    request: CustomProviderIn,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    result = ProviderRegistryService(db).add_custom_provider(identity, request)
    return ok(result)


@router.put("/{provider_id}/settings")
def upsert_provider_settings(
    provider_id: str,
    request: ProviderSettingsUpdate,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    """Partial update; creates the provider when it does not exist yet."""
    ProviderRegistryService(db).upsert_provider_settings(identity, provider_id, request)
    return ok({"provider": provider_id})


@router.delete("/{provider_id}")
def delete_custom_provider(
    provider_id: str,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    result = ProviderRegistryService(db).delete_custom_provider(identity, provider_id)
    return ok(result)


@router.put("/{provider_id}/models/order")
async def reorder_models(
    provider_id: str,
    request: ReorderModelsRequest,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    await ProviderRegistryService(db).reorder_models(identity, provider_id, request.models)
    return ok({"updated": len(request.models)})
