"""Interface UUIDGenerator - Puerto para generación de identificadores únicos."""

import uuid
from abc import ABC, abstractmethod


class UUIDGenerator(ABC):
    """
    Puerto para generación de identificadores únicos.

    Permite inyectar implementaciones fake para testing determinista.
    """

    @abstractmethod
    def generate_uuid(self) -> str:
        """
        Genera un UUID v4 único.

        Returns:
            String con UUID en formato estándar (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx).
        """
        raise NotImplementedError


class RealUUIDGenerator(UUIDGenerator):
    """Implementación real que genera UUIDs aleatorios."""

    def generate_uuid(self) -> str:
        """Genera un UUID v4 aleatorio."""
        return str(uuid.uuid4())


class FakeUUIDGenerator(UUIDGenerator):
    """
    Implementación fake para testing.

    Genera valores predecibles para pruebas deterministas.
    """

    def __init__(self, prefix: str = "test"):
        self._prefix = prefix
        self._uuid_counter = 0

    def generate_uuid(self) -> str:
        """Genera un id predecible basado en contador (ej: test-0001)."""
        self._uuid_counter += 1
        return f"{self._prefix}-{self._uuid_counter:04d}"

    def reset(self) -> None:
        """Reinicia el contador."""
        self._uuid_counter = 0
