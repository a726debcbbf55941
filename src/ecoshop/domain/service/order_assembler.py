"""Domain service: Order Assembler.

Pure computation: turns validated lines into a priced draft using the
unit prices captured during validation, never a client-supplied price.
"""

from __future__ import annotations

from ecoshop.domain.exceptions import ValidationError
from ecoshop.domain.model.order import OrderDraft, OrderLineDraft, OrderStatus
from ecoshop.domain.model.placement import ValidatedLine
from ecoshop.domain.model.value_objects import Money


def assemble_order(user_id: int, validated_lines: list[ValidatedLine]) -> OrderDraft:
    if not validated_lines:
        raise ValidationError("Order must contain at least one item", field="items")

    lines = [
        OrderLineDraft(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=line.quantity,
            price=line.product.price,  # <-- price snapshot
        )
        for line in validated_lines
    ]

    total = Money.zero()
    for line in lines:
        total = total + line.line_total

    return OrderDraft(
        user_id=user_id,
        total_amount=total,
        lines=lines,
        status=OrderStatus.PENDING,
    )
