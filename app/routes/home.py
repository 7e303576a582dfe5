import logging
from fastapi import APIRouter, status

from app.core.exceptions.app_exception import AppHttpException

class HomeRouter(APIRouter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_api_route("/", self.index, methods=["GET"])

    def index(self):
        try:
            return {"message": "Delivery zones service online"}
        except Exception as e:
            logging.error(f"Erro inesperado: {e}", exc_info=True)
            raise AppHttpException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")
