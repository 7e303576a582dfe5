import uuid
from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Field, SQLModel


class AppSettings(SQLModel, table=True):
    __tablename__ = "tb_app_settings"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    google_maps_api_key: Optional[str] = None
    map_default_lat: Optional[float] = None
    map_default_lng: Optional[float] = None
    delivery_radius: Optional[float] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default=None)

    class Config:
        from_attributes = True
