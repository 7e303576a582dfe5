from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from typing import Optional, Any


class AppHttpException(HTTPException):
    """
    Erro HTTP com corpo no formato {"error": "..."}.
    A mensagem é genérica; detalhes internos ficam apenas no log.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        errors: Optional[Any] = None,
    ):
        content = {
            "error": detail,
        }
        if errors:
            content["errors"] = errors

        super().__init__(status_code=status_code, detail=detail)
        self.status_code = status_code
        self.detail = detail
        self.errors = errors
        self.content = content


async def app_http_exception_handler(request: Request, exc: AppHttpException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.content)
