"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``TXT2PDF_FONT_SIZE`` environment variable for ``layout.font_size``
"""

from .schema import ConfigModel, LayoutConfig, OutputSettings, load_config

__all__ = ["ConfigModel", "LayoutConfig", "OutputSettings", "load_config"]
