from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class DeliveryZoneRead(BaseModel):
    """Visão pública de uma zona de entrega (sem is_active)."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    color: str
    coordinates: Any
    delivery_fee: Optional[float] = Field(default=None, alias="deliveryFee")
    description: Optional[str] = None


class DeliveryZoneListResponse(BaseModel):
    zones: List[DeliveryZoneRead] = Field(default_factory=list)
