"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
from rest_framework.test import APIClient

from purchases.gateways import SeatReservationService, TicketPaymentService
from purchases.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateways() -> Mock:
    """Payment and reservation doubles attached to one parent to record call order."""
    parent = Mock()
    parent.attach_mock(Mock(spec=TicketPaymentService), "payment")
    parent.attach_mock(Mock(spec=SeatReservationService), "reservation")
    return parent


@pytest.fixture
def ticket_service(gateways: Mock) -> TicketService:
    return TicketService(gateways.payment, gateways.reservation)

