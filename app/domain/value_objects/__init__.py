"""Value Objects del dominio."""

from app.domain.value_objects.spot_name import SpotName

__all__ = ["SpotName"]
