from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class MapConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[str] = Field(default=None, alias="apiKey")
    default_lat: float = Field(alias="defaultLat")
    default_lng: float = Field(alias="defaultLng")
    delivery_radius: float = Field(alias="deliveryRadius")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class PublicSettingsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    google_maps_api_key: Optional[str] = Field(default=None, alias="googleMapsApiKey")
    map_default_lat: Optional[float] = Field(default=None, alias="mapDefaultLat")
    map_default_lng: Optional[float] = Field(default=None, alias="mapDefaultLng")
    delivery_radius: Optional[float] = Field(default=None, alias="deliveryRadius")
