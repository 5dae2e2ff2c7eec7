"""
Errores de dominio y handlers globales para respuestas de error consistentes.

Forma del cuerpo: {"error": {"code", "message", "details"?}}; `details` solo
aparece en errores de validación.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base de los errores de aplicación; lleva el status HTTP y un código estable."""

    def __init__(self, status_code: int, message: str, code: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(404, message, "NOT_FOUND")


class ValidationError(AppError):
    def __init__(self, message: str, details: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(400, message, "VALIDATION_ERROR")
        self.details = details


class ConflictError(AppError):
    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(409, message, "CONFLICT")



# Prefijos de `loc` que FastAPI agrega según la parte del request
_LOC_SOURCES = {"body", "query", "path", "header", "cookie"}

# (campo, tipo de error pydantic) -> mensaje para el cliente
FieldMessages = Mapping[Tuple[str, str], str]


def _field_key(loc: List[Any]) -> str:
    # Elementos de lista (tags.3) se buscan por el singular ("tag")
    if len(loc) >= 2 and isinstance(loc[-1], int) and isinstance(loc[-2], str):
        return loc[-2].rstrip("s")
    return str(loc[-1]) if loc else ""


def validation_details(errors: List[Dict[str, Any]], messages: Optional[FieldMessages] = None) -> List[Dict[str, str]]:
    """Convierte errores de pydantic/FastAPI en [{path, message}].

    `messages` reemplaza el texto de pydantic por uno propio según campo y tipo
    de error; lo no mapeado conserva el mensaje original.
    """
    out: List[Dict[str, str]] = []
    for e in errors:
        loc = list(e.get("loc") or ())
        if loc and loc[0] in _LOC_SOURCES:
            loc = loc[1:]
        msg = (messages or {}).get((_field_key(loc), str(e.get("type", ""))))
        if msg is None:
            # Errores de nivel modelo: pydantic antepone "Value error, " al mensaje
            msg = str(e.get("msg", "Invalid value"))
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
        out.append({"path": ".".join(str(p) for p in loc), "message": msg})
    return out


def error_body(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    err: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        err["details"] = details
    return {"error": err}


def register_exception_handlers(app: FastAPI, messages: Optional[FieldMessages] = None) -> None:
    log = logging.getLogger("notes.errors")

    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        details = exc.details if isinstance(exc, ValidationError) else None
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.code, exc.message, details))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        err = ValidationError("Request validation failed", validation_details(exc.errors(), messages))
        return JSONResponse(status_code=err.status_code, content=error_body(err.code, err.message, err.details))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        # Ruta inexistente o método no soportado: 404 genérico
        if exc.status_code in (404, 405):
            body = error_body("NOT_FOUND", f"Route {request.method} {request.url.path} not found")
            return JSONResponse(status_code=404, content=body)
        if exc.status_code == 413:
            return JSONResponse(status_code=413, content=error_body("PAYLOAD_TOO_LARGE", str(exc.detail)))
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("HTTP_ERROR", str(exc.detail or "HTTP error")),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        rid = getattr(request.state, "request_id", None)
        log.exception("Unhandled error request_id=%s", rid)
        body = error_body("INTERNAL_SERVER_ERROR", "An unexpected error occurred")
        # Esta respuesta sale fuera de RequestIdMiddleware: el header se pone aquí
        headers = {"X-Request-Id": rid} if rid else None
        return JSONResponse(status_code=500, content=body, headers=headers)
