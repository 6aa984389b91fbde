"""Model list API: per-provider lists, available models, custom model edits."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from llm_registry.api.deps import get_db, get_identity
from llm_registry.api.envelope import ok
from llm_registry.core.identity import SessionIdentity
from llm_registry.schemas.registry import CustomModelIn, SetModelSelectedRequest
from llm_registry.services.registry_service import ProviderRegistryService

router = APIRouter(prefix="/api/models", tags=["models"])


@router.get("")
def list_models(
    provider_id: str | None = Query(default=None, alias="providerId"),
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    data = ProviderRegistryService(db).list_models(identity, provider_id)
    return ok(data)


@router.get("/available")
def list_available_models(
    db: Session = Depends(get_db), identity: SessionIdentity = Depends(get_identity)
):
    data = ProviderRegistryService(db).list_available_models(identity)
    return ok(data)


@router.post("")
def add_custom_model(
    request: CustomModelIn,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    result = ProviderRegistryService(db).add_custom_model(identity, request)
    return ok(result)


# Model names may contain "/" (e.g. "meta-llama/llama-3-70b")
@router.patch("/{model_name:path}/selected")
def set_model_selected(
    model_name: str,
    request: SetModelSelectedRequest,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    ProviderRegistryService(db).set_model_selected(identity, model_name, request.selected)
    return ok({"name": model_name, "selected": request.selected})


@router.put("/{old_model_name:path}")
def update_custom_model(
    old_model_name: str,
    request: CustomModelIn,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    result = ProviderRegistryService(db).update_custom_model(identity, old_model_name, request)
    return ok(result)


@router.delete("/{model_name:path}")
def delete_model(
    model_name: str,
    db: Session = Depends(get_db),
    identity: SessionIdentity = Depends(get_identity),
):
    ProviderRegistryService(db).delete_model(identity, model_name)
    return ok({"name": model_name})
