"""Data Transfer Objects de la capa de aplicación."""

from app.application.dtos.purchase_dto import BuyTicketsInput, PurchaseConfirmation

__all__ = [
    "BuyTicketsInput",
    "PurchaseConfirmation",
]
