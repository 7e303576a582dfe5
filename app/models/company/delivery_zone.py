import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from sqlmodel import Field, SQLModel, JSON, Column


class DeliveryZone(SQLModel, table=True):
    __tablename__ = "tb_delivery_zone"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    name: str = Field(index=True, unique=True)
    color: str
    # lista de pontos {lat, lng}; o formato é responsabilidade do painel administrativo
    coordinates: Any = Field(default=None, sa_column=Column(JSON, nullable=False))
    delivery_fee: Optional[float] = None
    description: Optional[str] = None

    is_active: bool = Field(default=True, index=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default=None)

    class Config:
        from_attributes = True
