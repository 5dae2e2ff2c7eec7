"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del proyecto.
- Agrupa ajustes por área: App, Servidor, Logging, CORS.
"""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resuelve el .env ubicado en la raíz del proyecto (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Notes API"
    api_prefix: str = ""

    # Servidor (uvicorn)
    host: str = "0.0.0.0"
    port: int = 3000

    # Límite del cuerpo de las peticiones (1 MiB)
    max_body_bytes: int = 1024 * 1024

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    cors_allow_any: bool = False  # Permite todos los orígenes (usa con cuidado)

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
    )

    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final
        - Si está vacío (o es solo '/'), devuelve ""
        """
        pref = (self.api_prefix or "").strip()
        if not pref or pref == "/":
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        return pref.rstrip('/')


settings = Settings()
