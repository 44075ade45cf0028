from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

from app.application.dtos.purchase_dto import BuyTicketsInput, PurchaseConfirmation


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    event_id: str
    spots: list[str]
    # unknown kinds are rejected by the domain as INVALID_TICKET_KIND
    ticket_kind: str
    email: EmailStr

    @field_validator("ticket_kind")
    @classmethod
    def normalize_ticket_kind(cls, value: str) -> str:
        return value.strip().lower()

    def to_input(self) -> BuyTicketsInput:
        return BuyTicketsInput(
            event_id=self.event_id,
            spots=list(self.spots),
            ticket_kind=self.ticket_kind,
            email=str(self.email),
        )


class CheckoutItemResponse(BaseModel):
    ticket_id: str
    spot: str
    price: Decimal
    status: str
    reservation_id: str
    partner_status: str

    @classmethod
    def from_confirmation(cls, confirmation: PurchaseConfirmation) -> "CheckoutItemResponse":
        return cls(
            ticket_id=confirmation.ticket_id,
            spot=confirmation.spot,
            price=confirmation.price,
            status=confirmation.status,
            reservation_id=confirmation.reservation_id,
            partner_status=confirmation.partner_status,
        )
