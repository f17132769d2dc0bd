import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = ("http://localhost:3001",)


class ConfigurationError(RuntimeError):
    """Raised when the process cannot be configured to serve traffic."""


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at the asyncpg driver.

    URLs that already name a driver (``postgresql+asyncpg://``,
    ``sqlite+aiosqlite://``, ...) are returned untouched.
    """
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def load_cors_origins(environ=None) -> tuple[str, ...]:
    env = os.environ if environ is None else environ
    return _split_csv(env.get("CORS_ALLOW_ORIGINS", "")) or DEFAULT_CORS_ORIGINS


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str
    cors_allow_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    db_echo: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ

        database_url = env.get("DATABASE_URL", "").strip()
        if not database_url:
            raise ConfigurationError("DATABASE_URL environment variable is not set")

        port = env.get("PORT", "8080")
        try:
            port = int(port)
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {port!r}")

        return cls(
            database_url=normalize_database_url(database_url),
            cors_allow_origins=load_cors_origins(env),
            host=env.get("HOST", "0.0.0.0"),
            port=port,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            db_echo=_as_bool(env.get("DB_ECHO", "false")),
        )
