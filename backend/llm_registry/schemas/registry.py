from typing import Literal

from pydantic import BaseModel, Field

from llm_registry.config.defaults import DEFAULT_API_STYLE

# largest value an INTEGER column holds
MAX_DB_INT = 2**63 - 1


class OperationResult(BaseModel):
    status: Literal["success", "fail"]
    message: str | None = None


class ProviderSummary(BaseModel):
    provider: str
    providerName: str
    isActive: bool
    apiStyle: str
    logo: str | None = None


class ProviderSettingsOut(ProviderSummary):
    endpoint: str | None = None
    apikey: str | None = None
    order: int | None = None
    type: str


class ProviderSettingsUpdate(BaseModel):
    """Partial provider settings; only fields that are set are written."""

    isActive: bool | None = None
    apikey: str | None = None
    providerName: str | None = Field(default=None, min_length=1)
    endpoint: str | None = None
    apiStyle: str | None = Field(default=None, min_length=1)
    logo: str | None = None
    order: int | None = Field(default=None, ge=-MAX_DB_INT, le=MAX_DB_INT)


class CustomProviderIn(BaseModel):
    provider: str = Field(min_length=1, max_length=64)
    providerName: str = Field(min_length=1)
    endpoint: str = ""
    apiStyle: str = Field(default=DEFAULT_API_STYLE, min_length=1)
    apikey: str = ""
    logo: str | None = None


class ModelOut(BaseModel):
    name: str
    providerId: str
    displayName: str
    maxTokens: int | None = None
    supportVision: bool
    selected: bool
    order: int | None = None
    type: str


class AvailableModelOut(ModelOut):
    providerName: str
    providerLogo: str


class CustomModelIn(BaseModel):
    name: str = Field(min_length=1, max_length=500)
    displayName: str = Field(min_length=1)
    maxTokens: int | None = Field(default=None, ge=1, le=MAX_DB_INT)
    supportVision: bool = False
    selected: bool = True
    type: Literal["custom"] = "custom"
    providerId: str = Field(min_length=1)
    # Sent by the front-end alongside the model; not persisted on the model row
    providerName: str | None = None


class SetModelSelectedRequest(BaseModel):
    selected: bool


class ModelOrderItem(BaseModel):
    modelId: str = Field(min_length=1)
    order: int = Field(ge=-MAX_DB_INT, le=MAX_DB_INT)


class ProviderOrderItem(BaseModel):
    providerId: str = Field(min_length=1)
    order: int = Field(ge=-MAX_DB_INT, le=MAX_DB_INT)


class ReorderModelsRequest(BaseModel):
    models: list[ModelOrderItem]


class ReorderProvidersRequest(BaseModel):
    providers: list[ProviderOrderItem]
