from dataclasses import dataclass
from pathlib import Path

from lib.utils.validation import ensure, ensure_port

from .yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "config/server.yaml"
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass
class ServerConfig:
    """Typed view over ``server.yaml``.

    ``host`` and ``port`` are the address uvicorn binds to.  ``public_host``
    only feeds the startup banner, so that a server bound to ``0.0.0.0``
    still advertises a URL a browser can open.
    """

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    public_host: str = "localhost"

    @property
    def base_url(self) -> str:
        return f"http://{self.public_host}:{self.port}"


def load_server_config(path: str = DEFAULT_CONFIG_PATH) -> ServerConfig:
    """Load ``server.yaml`` and return a validated :class:`ServerConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.  A missing file
        yields the defaults.
    """

    raw = load_yaml(path) if Path(path).exists() else {}
    server = raw.get("server", {}) or {}
    ensure(isinstance(server, dict), "'server' must be a mapping")

    defaults = ServerConfig()
    log_level = str(server.get("log_level", defaults.log_level)).lower()
    ensure(log_level in LOG_LEVELS, f"unknown log level: {log_level!r}")

    return ServerConfig(
        host=str(server.get("host", defaults.host)),
        port=ensure_port(server.get("port", defaults.port)),
        log_level=log_level,
        public_host=str(server.get("public_host", defaults.public_host)),
    )
