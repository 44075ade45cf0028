"""Value Object SpotName - nombre de un lugar dentro de un evento."""

from dataclasses import dataclass

from app.domain.errors import InvalidSpotNameError


@dataclass(frozen=True)
class SpotName:
    """
    Value Object inmutable que representa el nombre de un lugar.

    Formato: una letra mayúscula seguida de uno o más dígitos (ej: A1, B12).
    """

    value: str

    MIN_LENGTH = 2

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidSpotNameError(self.value, "el nombre es obligatorio")

        if len(self.value) < self.MIN_LENGTH:
            raise InvalidSpotNameError(
                self.value, f"debe tener al menos {self.MIN_LENGTH} caracteres"
            )

        first = self.value[0]
        if not ("A" <= first <= "Z"):
            raise InvalidSpotNameError(self.value, "debe empezar con una letra mayúscula")

        if not all("0" <= ch <= "9" for ch in self.value[1:]):
            raise InvalidSpotNameError(self.value, "después de la letra solo se permiten dígitos")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def is_valid(cls, value: str) -> bool:
        try:
            cls(value)
        except InvalidSpotNameError:
            return False
        return True
