"""Serializers for purchase requests and responses."""

from rest_framework import serializers

from purchases.domain import TicketType, TicketTypeRequest


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for a single TicketTypeRequest. Null entries are allowed."""

    ticket_type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    no_of_tickets = serializers.IntegerField()

    def to_domain(self, data: dict) -> TicketTypeRequest:
        return TicketTypeRequest(
            ticket_type=TicketType(data["ticket_type"]),
            no_of_tickets=data["no_of_tickets"],
        )


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for the body of POST /api/purchases."""

    account_id = serializers.IntegerField()
    ticket_requests = serializers.ListField(
        child=TicketTypeRequestSerializer(allow_null=True),
        allow_null=True,
    )

    def ticket_type_requests(self) -> list[TicketTypeRequest | None] | None:
        """Return validated ticket requests as domain objects, keeping nulls."""
        raw = self.validated_data["ticket_requests"]
        if raw is None:
            return None
        child = self.fields["ticket_requests"].child
        return [None if item is None else child.to_domain(item) for item in raw]


class PurchaseQuoteSerializer(serializers.Serializer):
    """Serializer for a completed purchase."""

    account_id = serializers.IntegerField()
    total_price = serializers.IntegerField()
    seats_to_reserve = serializers.IntegerField()
