import logging
from fastapi import APIRouter, Depends, status
from sqlmodel import Session, select

from app.core.exceptions.app_exception import AppHttpException
from app.database.connection import get_session
from app.models.company.delivery_zone import DeliveryZone
from app.schemas.delivery_zone import DeliveryZoneListResponse, DeliveryZoneRead

db_session = get_session

class ZoneRouter(APIRouter):
    """
    Zonas de entrega públicas, usadas no cadastro e na criação de pedidos.
    Não exige autenticação.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_api_route("/api/zones", self.list_active_zones, methods=["GET"], response_model=DeliveryZoneListResponse)

    def list_active_zones(self, session: Session = Depends(db_session)) -> DeliveryZoneListResponse:
        try:
            rows = session.exec(
                select(
                    DeliveryZone.id,
                    DeliveryZone.name,
                    DeliveryZone.color,
                    DeliveryZone.coordinates,
                    DeliveryZone.delivery_fee,
                    DeliveryZone.description,
                )
                .where(DeliveryZone.is_active == True)
                .order_by(DeliveryZone.name.asc())
            ).all()
        except Exception:
            logging.exception("ZONAS >>> Erro ao buscar zonas de entrega públicas")
            raise AppHttpException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch delivery zones",
            )

        zones = [DeliveryZoneRead.model_validate(row._asdict()) for row in rows]
        logging.info(f"ZONAS >>> {len(zones)} zonas ativas retornadas")
        return DeliveryZoneListResponse(zones=zones)
