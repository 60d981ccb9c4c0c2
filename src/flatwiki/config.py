"""Configuration management for flatwiki.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from flatwiki.core.titles import is_valid_title

CONFIG_FILENAME = "flatwiki.toml"
DEFAULT_MAX_BODY_SIZE = 10 * 1024 * 1024


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080
    max_body_size: int = DEFAULT_MAX_BODY_SIZE


@dataclass
class PagesConfig:
    """Page storage configuration."""

    pages_dir: Path = field(default_factory=lambda: Path("."))
    front_page: str = "FrontPage"


@dataclass
class TemplatesConfig:
    """Template configuration."""

    templates_dir: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    pages: PagesConfig
    templates: TemplatesConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for flatwiki.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            pages=PagesConfig(),
            templates=TemplatesConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            pages=cls._parse_pages(data.get("pages"), config_dir),
            templates=cls._parse_templates(data.get("templates"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        max_body_size = data.get("max_body_size", DEFAULT_MAX_BODY_SIZE)
        if (
            not isinstance(max_body_size, int)
            or isinstance(max_body_size, bool)
            or max_body_size <= 0
        ):
            raise ValueError("server.max_body_size must be a positive integer")

        return ServerConfig(host=host, port=port, max_body_size=max_body_size)

    @classmethod
    def _parse_pages(cls, data: object, config_dir: Path) -> PagesConfig:
        """Parse pages configuration section.

        Args:
            data: Raw pages section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            PagesConfig instance
        """
        if data is None:
            return PagesConfig(pages_dir=config_dir)

        if not isinstance(data, dict):
            raise ValueError("pages section must be a dictionary")

        pages_dir = data.get("dir", ".")
        if not isinstance(pages_dir, str):
            raise ValueError("pages.dir must be a string")

        front_page = data.get("front_page", "FrontPage")
        if not isinstance(front_page, str) or not is_valid_title(front_page):
            raise ValueError("pages.front_page must be a string of letters and digits")

        return PagesConfig(pages_dir=config_dir / pages_dir, front_page=front_page)

    @classmethod
    def _parse_templates(cls, data: object, config_dir: Path) -> TemplatesConfig:
        if data is None:
            return TemplatesConfig()

        if not isinstance(data, dict):
            raise ValueError("templates section must be a dictionary")

        templates_dir = data.get("dir")
        if templates_dir is None:
            return TemplatesConfig()
        if not isinstance(templates_dir, str):
            raise ValueError("templates.dir must be a string")

        return TemplatesConfig(templates_dir=config_dir / templates_dir)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        pages_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            pages_dir: Override pages.pages_dir
            templates_dir: Override templates.templates_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        pages = self.pages
        if pages_dir is not None:
            pages = replace(self.pages, pages_dir=pages_dir)

        templates = self.templates
        if templates_dir is not None:
            templates = replace(self.templates, templates_dir=templates_dir)

        return replace(self, server=server, pages=pages, templates=templates)
