import os
from dataclasses import dataclass
from typing import Tuple

DEFAULT_CORS_ORIGINS = (
    "http://localhost:4200",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class AppConfig:
    """
    Environment-based application configuration.
    """
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    max_workers: int = 4

    @staticmethod
    def load() -> "AppConfig":
        env = os.getenv("GROWTHCALC_ENV", "production")
        debug_flag = os.getenv("GROWTHCALC_DEBUG", "false").lower() == "true"
        log_level = os.getenv("GROWTHCALC_LOG_LEVEL", "INFO")

        raw_origins = os.getenv("GROWTHCALC_CORS_ORIGINS", "")
        origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

        raw_workers = os.getenv("GROWTHCALC_MAX_WORKERS", "4")
        try:
            max_workers = int(raw_workers)
        except ValueError:
            raise RuntimeError(f"GROWTHCALC_MAX_WORKERS must be an integer, got {raw_workers!r}")
        if max_workers < 1:
            raise RuntimeError("GROWTHCALC_MAX_WORKERS must be at least 1")

        return AppConfig(
            environment=env,
            debug=debug_flag,
            log_level=log_level,
            cors_origins=origins or DEFAULT_CORS_ORIGINS,
            max_workers=max_workers,
        )
