"""Base entity class for engine payloads."""

from pydantic import BaseModel, ConfigDict


class BaseEntity(BaseModel):
    """Base class for the response shapes returned by the engine.

    Entities mirror the engine's JSON payloads:
    - Keys starting with an underscore (``_index``, ``_id``...) are mapped
      through field aliases, the Python attribute drops the underscore
    - Fields the engine adds in newer versions are ignored
    - Every field has a default, so partial payloads (error bodies, 404s)
      still decode
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
