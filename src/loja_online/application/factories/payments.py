"""Payment factories."""

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Any, Callable

from loja_online.application.config import Config
from loja_online.application.factories.base import RecordFactory
from loja_online.application.factories.products import format_brl
from loja_online.domain.models import BoletoPayment, Payment, PaymentStatus
from loja_online.domain.pipeline import CreationPipeline
from loja_online.domain.validators import (
    is_blank,
    to_decimal,
    validate_boleto_code,
    validate_due_date_format,
    validate_non_negative_if_set,
    validate_status,
)

DUE_DATE_FORMAT = "%d/%m/%Y"
CODE_DISPLAY_LENGTH = 20


def configure_payment(payment: Payment) -> Payment:
    if is_blank(payment.status):
        return replace(payment, status=PaymentStatus.PENDING.value)
    return payment


def validate_payment(payment: Payment) -> None:
    # Unlike product price, the amount is optional and only checked when present
    validate_non_negative_if_set("amount", payment.amount)
    validate_status(payment.status, PaymentStatus.values())


def describe_payment(payment: Payment) -> dict[str, Any]:
    amount = format_brl(payment.amount) if payment.amount is not None else "not informed"
    return {"amount": amount, "status": payment.status}


PAYMENT_PIPELINE: CreationPipeline[Payment] = CreationPipeline(
    event="payment_created",
    configure=(configure_payment,),
    validate=(validate_payment,),
    describe=(describe_payment,),
)


class PaymentFactory(RecordFactory[Payment]):
    """Factory Method for payments."""


def default_due_date(today: date, days: int) -> str:
    """Due date ``days`` after ``today`` as DD/MM/YYYY."""
    return (today + timedelta(days=days)).strftime(DUE_DATE_FORMAT)


@dataclass(frozen=True)
class BoletoFactory(PaymentFactory):
    """Builds ``BoletoPayment`` records.

    A blank due date is replaced by today plus ``BOLETO_DUE_DAYS``; ``today``
    can be swapped for a fixed clock.
    """

    code: str | None = ""
    due_date: str | None = None
    amount: Any = None
    status: str | None = None
    today: Callable[[], date] = field(default=date.today, compare=False, repr=False)
    config: Config | None = field(default=None, compare=False, repr=False)

    def with_due_date(self, due_date: str | None) -> "BoletoFactory":
        return replace(self, due_date=due_date)

    def with_amount(self, amount: Any) -> "BoletoFactory":
        return replace(self, amount=amount)

    def with_status(self, status: str | None) -> "BoletoFactory":
        return replace(self, status=status)

    def create(self) -> BoletoPayment:
        return BoletoPayment(
            amount=to_decimal(self.amount, "amount"),
            status=self.status,
            code=self.code,
            due_date=self.due_date,
        )

    def _configure_boleto(self, boleto: BoletoPayment) -> BoletoPayment:
        if is_blank(boleto.due_date):
            boleto = replace(
                boleto, due_date=default_due_date(self.today(), self.settings().boleto_due_days)
            )
        if self.amount is not None:
            boleto = replace(boleto, amount=to_decimal(self.amount, "amount"))
        return boleto

    @staticmethod
    def _validate_boleto(boleto: BoletoPayment) -> None:
        validate_boleto_code(boleto.code)
        validate_due_date_format(boleto.due_date)

    @staticmethod
    def _describe_boleto(boleto: BoletoPayment) -> dict[str, Any]:
        code = boleto.code
        if len(code) > CODE_DISPLAY_LENGTH:
            code = code[:CODE_DISPLAY_LENGTH] + "..."
        return {"code": code, "due_date": boleto.due_date}

    def pipeline(self) -> CreationPipeline[BoletoPayment]:
        return PAYMENT_PIPELINE.extend(
            configure=self._configure_boleto,
            validate=self._validate_boleto,
            describe=self._describe_boleto,
        )
