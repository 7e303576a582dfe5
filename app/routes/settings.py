import logging
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.exceptions.app_exception import AppHttpException
from app.database.connection import get_session
from app.helpers.maps import DEFAULT_MAP_LAT, DEFAULT_MAP_LNG, first_settings, get_map_config
from app.schemas.app_settings import MapConfig, PublicSettingsRead

db_session = get_session

# raio padrão exibido quando ainda não há configurações salvas
PUBLIC_DEFAULT_DELIVERY_RADIUS = 50  # km

class SettingsRouter(APIRouter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_api_route("/api/settings", self.get_public_settings, methods=["GET"], response_model=PublicSettingsRead)
        self.add_api_route("/api/settings/map", self.get_map_settings, methods=["GET"], response_model=MapConfig)

    def get_public_settings(self, session: Session = Depends(db_session)) -> PublicSettingsRead:
        """
        Retorna as configurações públicas do mapa. Sem registro salvo,
        devolve os padrões sem gravar nada no banco.
        """
        try:
            settings = first_settings(session)
        except Exception:
            logging.exception("CONFIGURAÇÕES >>> Erro ao buscar configurações")
            raise AppHttpException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch settings",
            )

        if settings is None:
            logging.info("CONFIGURAÇÕES >>> Nenhum registro encontrado, retornando padrões")
            return PublicSettingsRead(
                google_maps_api_key=None,
                map_default_lat=DEFAULT_MAP_LAT,
                map_default_lng=DEFAULT_MAP_LNG,
                delivery_radius=PUBLIC_DEFAULT_DELIVERY_RADIUS,
            )
        return PublicSettingsRead.model_validate(settings)

    def get_map_settings(self, session: Session = Depends(db_session)) -> MapConfig:
        return get_map_config(session)
