import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlmodel import Session, select

from app.database.connection import session_scope
from app.models.company.app_settings import AppSettings
from app.schemas.app_settings import MapConfig

# Padrões centrados em Bagdá
DEFAULT_MAP_LAT = 33.3152
DEFAULT_MAP_LNG = 44.3661
DEFAULT_DELIVERY_RADIUS = 25  # km


def default_map_config() -> MapConfig:
    return MapConfig(
        api_key=None,
        default_lat=DEFAULT_MAP_LAT,
        default_lng=DEFAULT_MAP_LNG,
        delivery_radius=DEFAULT_DELIVERY_RADIUS,
    )


@contextmanager
def _use_session(session: Optional[Session]) -> Iterator[Session]:
    # reaproveita a sessão da requisição quando houver
    if session is not None:
        yield session
        return
    with session_scope() as own_session:
        yield own_session


def first_settings(session: Session) -> Optional[AppSettings]:
    """Registro único de configurações; com mais de um, vale o mais antigo."""
    return session.exec(
        select(AppSettings).order_by(AppSettings.created_at.asc())
    ).first()


def get_google_maps_api_key(session: Optional[Session] = None) -> Optional[str]:
    """
    Retorna a chave da API do Google Maps salva nas configurações,
    ou None se não houver registro, chave vazia ou erro no banco.
    """
    try:
        with _use_session(session) as db:
            api_key = db.exec(
                select(AppSettings.google_maps_api_key).order_by(AppSettings.created_at.asc())
            ).first()
        return api_key or None
    except Exception:
        logging.exception("MAPAS >>> Erro ao buscar a chave da API do Google Maps")
        return None


def get_map_config(session: Optional[Session] = None) -> MapConfig:
    """
    Monta a configuração do mapa a partir do registro de configurações.

    Campos ausentes (ou zerados) caem nos padrões. Nunca lança exceção:
    em caso de erro no banco devolve a configuração padrão completa.
    """
    try:
        with _use_session(session) as db:
            settings = first_settings(db)
    except Exception:
        logging.exception("MAPAS >>> Erro ao buscar a configuração do mapa, usando padrões")
        return default_map_config()

    if settings is None:
        logging.debug("MAPAS >>> Nenhum registro de configurações, usando padrões")
        return default_map_config()

    return MapConfig(
        api_key=settings.google_maps_api_key or None,
        default_lat=settings.map_default_lat or DEFAULT_MAP_LAT,
        default_lng=settings.map_default_lng or DEFAULT_MAP_LNG,
        delivery_radius=settings.delivery_radius or DEFAULT_DELIVERY_RADIUS,
    )
