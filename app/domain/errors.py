"""Excepciones de dominio para la venta de lugares (spots)."""

from typing import Sequence


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        spots: Sequence[str] | None = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.spots = list(spots or [])
        super().__init__(self.message)


# === Categorías ===


class ValidationError(DomainError):
    """Datos de entrada inválidos; se detecta antes de cualquier llamada externa."""


class NotFoundError(DomainError):
    """Evento, lugar o partner inexistente."""


class ConflictError(DomainError):
    """El lugar ya fue vendido."""


class UpstreamError(DomainError):
    """El partner externo no respondió, rechazó o devolvió algo ilegible."""


class PersistenceError(DomainError):
    """Falló una escritura en el almacenamiento."""

    def __init__(
        self,
        message: str,
        spots: Sequence[str] | None = None,
        partner_reservation_ids: Sequence[str] | None = None,
    ):
        super().__init__(message=message, code="PERSISTENCE_ERROR", spots=spots)
        self.partner_reservation_ids = list(partner_reservation_ids or [])


class PurchaseCancelledError(DomainError):
    """El llamador canceló la compra."""

    def __init__(
        self,
        spots: Sequence[str],
        reconciliation_required: bool,
        partner_reservation_ids: Sequence[str] | None = None,
    ):
        suffix = (
            " después de contactar al partner; requiere reconciliación"
            if reconciliation_required
            else ""
        )
        super().__init__(
            message=f"Compra cancelada{suffix}: {', '.join(spots)}",
            code="PURCHASE_CANCELLED",
            spots=spots,
        )
        self.reconciliation_required = reconciliation_required
        self.partner_reservation_ids = list(partner_reservation_ids or [])


# === Errores de Validación ===


class InvalidSpotNameError(ValidationError):
    """El nombre del lugar no cumple el formato letra mayúscula + dígitos."""

    def __init__(self, name: str, reason: str):
        super().__init__(
            message=f"Nombre de lugar inválido '{name}': {reason}",
            code="INVALID_SPOT_NAME",
            spots=[name],
        )
        self.name = name
        self.reason = reason


class InvalidTicketKindError(ValidationError):
    """El tipo de ticket no es 'half' ni 'full'."""

    def __init__(self, ticket_kind: str):
        super().__init__(
            message=f"Tipo de ticket inválido: {ticket_kind}",
            code="INVALID_TICKET_KIND",
        )
        self.ticket_kind = ticket_kind


class NonPositivePriceError(ValidationError):
    """El precio calculado del ticket es cero o negativo."""

    def __init__(self, price: object):
        super().__init__(
            message=f"El precio del ticket debe ser mayor que cero: {price}",
            code="NON_POSITIVE_PRICE",
        )
        self.price = price


class InvalidBatchError(ValidationError):
    """Lote vacío o con lugares repetidos."""

    def __init__(self, message: str, spots: Sequence[str] | None = None):
        super().__init__(message=message, code="INVALID_BATCH", spots=spots)


# === Errores de búsqueda ===


class EventNotFoundError(NotFoundError):
    """El evento no existe."""

    def __init__(self, event_id: str):
        super().__init__(
            message=f"Evento no encontrado: {event_id}",
            code="EVENT_NOT_FOUND",
        )
        self.event_id = event_id


class SpotNotFoundError(NotFoundError):
    """Uno o más lugares del lote no existen en el evento."""

    def __init__(self, event_id: str, missing: Sequence[str]):
        super().__init__(
            message=f"Lugares no encontrados en evento {event_id}: {', '.join(missing)}",
            code="SPOT_NOT_FOUND",
            spots=missing,
        )
        self.event_id = event_id


class PartnerNotFoundError(NotFoundError):
    """No hay gateway configurado para el partner del evento."""

    def __init__(self, partner_id: int):
        super().__init__(
            message=f"Partner no encontrado: {partner_id}",
            code="PARTNER_NOT_FOUND",
        )
        self.partner_id = partner_id


# === Conflictos ===


class SpotAlreadyReservedError(ConflictError):
    """El lugar ya está vendido."""

    def __init__(self, spots: Sequence[str]):
        super().__init__(
            message=f"Lugar ya reservado: {', '.join(spots)}",
            code="SPOT_ALREADY_RESERVED",
            spots=spots,
        )


class DuplicateEventError(ConflictError):
    """Ya existe un evento con ese id."""

    def __init__(self, event_id: str):
        super().__init__(
            message=f"Evento duplicado: {event_id}",
            code="DUPLICATE_EVENT",
        )
        self.event_id = event_id


class DuplicateSpotError(ConflictError):
    """Ya existe un lugar con ese nombre en el evento."""

    def __init__(self, event_id: str, spots: Sequence[str]):
        super().__init__(
            message=f"Lugares duplicados en evento {event_id}: {', '.join(spots)}",
            code="DUPLICATE_SPOT",
            spots=spots,
        )
        self.event_id = event_id


class ReconciliationError(ConflictError):
    """
    El partner confirmó el lote pero otro comprador ganó el lugar localmente.

    El partner considera vendido un lugar que localmente no quedó asociado a
    esta compra; ninguna escritura local de este lote fue confirmada.
    """

    def __init__(
        self,
        event_id: str,
        spots: Sequence[str],
        partner_reservation_ids: Sequence[str],
    ):
        super().__init__(
            message=(
                f"Partner confirmó pero los lugares {', '.join(spots)} del evento "
                f"{event_id} fueron vendidos por otra compra; requiere reconciliación"
            ),
            code="RECONCILIATION_REQUIRED",
            spots=spots,
        )
        self.event_id = event_id
        self.partner_reservation_ids = list(partner_reservation_ids)


# === Errores de Partner ===


class PartnerError(UpstreamError):
    """Falló la confirmación con el partner externo."""

    def __init__(
        self,
        partner: str,
        error_code: str,
        error_message: str | None = None,
        http_status: int | None = None,
        spots: Sequence[str] | None = None,
    ):
        super().__init__(
            message=f"Falló la reserva con partner {partner} ({error_code}): {error_message}",
            code="PARTNER_ERROR",
            spots=spots,
        )
        self.partner = partner
        self.error_code = error_code
        self.error_message = error_message
        self.http_status = http_status
