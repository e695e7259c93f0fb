"""Service catalog with durations and prices."""

import logging
from typing import Optional

from booking_timeline.schemas.booking_schema import Service

logger = logging.getLogger(__name__)

SERVICE_CATALOG: dict[int, Service] = {
    1: Service(
        id=1,
        name="Relax Massage",
        duration=30,
        price=60.00,
        description="Gentle relaxation massage to relieve stress and tension",
    ),
    2: Service(
        id=2,
        name="Deep Tissue Massage",
        duration=60,
        price=120.00,
        description="Therapeutic deep tissue work for muscle pain relief",
    ),
    3: Service(
        id=3,
        name="Hot Stone Massage",
        duration=90,
        price=180.00,
        description="Relaxing hot stone therapy for deep muscle relaxation",
    ),
}


def list_services() -> list[Service]:
    """Return all services, shortest first."""
    return sorted(SERVICE_CATALOG.values(), key=lambda s: (s.duration, s.id))


def get_service(service_id: int) -> Optional[Service]:
    """Look up a service by id. Returns None if it does not exist."""
    service = SERVICE_CATALOG.get(service_id)
    if service is None:
        logger.debug("Unknown service id: %s", service_id)
    return service
