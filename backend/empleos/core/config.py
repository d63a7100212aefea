"""Carga de configuración de la aplicación.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno. Los comentarios aclaran para qué sirve cada campo de forma que
resulte legible para personas sin contexto previo.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    app_name: str = "Empleos API"
    environment: str = "development"

    # CORS
    allowed_origins: list[str] = ["*"]
    allow_credentials: bool = False

    # Nivel de logging raíz (DEBUG, INFO, WARNING...)
    log_level: str = "INFO"

    # Formato de las fechas literales de los datos de ejemplo (dd-MM-yyyy)
    seed_date_format: str = "%d-%m-%Y"

    # Texto que devuelve la portada
    welcome_message: str = "Bienvenidos a Empleos App"

    # Le indicamos a Pydantic que lea automáticamente las variables de entorno
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    """Devuelve la configuración única del proceso.

    La primera llamada lee `.env` y el entorno; las siguientes reutilizan la
    misma instancia, de modo que el almacén de vacantes, la portada y CORS
    comparten formato de fechas, mensaje de bienvenida y orígenes. Los tests
    que cambian variables de entorno deben llamar a `cache_clear()`.
    """

    settings = Settings()
    # ALLOWED_ORIGINS puede llegar como "http://a, http://b"
    ao = settings.allowed_origins
    if isinstance(ao, str):
        settings.allowed_origins = [s.strip() for s in ao.split(",") if s.strip()]
    return settings
