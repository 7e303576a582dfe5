import logging
from fastapi import FastAPI
from app.configuration.settings import Configuration
from fastapi.middleware.cors import CORSMiddleware
from app.core.exceptions.app_exception import AppHttpException, app_http_exception_handler
from app.database import init_db

from app.routes.home import HomeRouter
from app.routes.zones import ZoneRouter
from app.routes.settings import SettingsRouter

configuration = Configuration()

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logging.info(f"SISTEMA >>> Ambiente carregado: {configuration.environment}")

def create_app():
    """
    Cria e configura a aplicação FastAPI, incluindo middlewares e rotas.
    """
    app = FastAPI()

    logging.info("SISTEMA >>> Inicializando o banco de dados...")
    init_db()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=configuration.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppHttpException, app_http_exception_handler)

    app.include_router(HomeRouter())
    app.include_router(ZoneRouter())
    app.include_router(SettingsRouter())

    return app
