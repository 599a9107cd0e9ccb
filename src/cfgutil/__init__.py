"""cfgutil — generate identifier policy files from OpenAPI specifications."""

__version__ = "0.1.0"
