"""Data models for parsed API descriptions.

The OpenAPI reader converts its input into these models; the generators
only ever see an ApiSpec.
"""

from pydantic import BaseModel


class Param(BaseModel):
    """A single operation parameter."""

    name: str
    location: str = "query"  # query / path / header / cookie
    required: bool = False


class ApiSpec(BaseModel):
    """An API title and its parameters, keyed by path then HTTP method."""

    title: str
    paths: dict[str, dict[str, list[Param]]] = {}
