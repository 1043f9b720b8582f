"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from gone_links.repositories import RedisEntryRepository
    from gone_links.services import GoneEngine

    # Using factory method (recommended)
    engine = GoneEngine.create(store=RedisEntryRepository.create())

    # Or manual creation with explicit settings
    engine = GoneEngine(store=store, settings=Settings(max_miss_entries=10))
    ```
"""

from .classifier import RequestClassifier, normalize_request_url
from .engine import GoneEngine
from .gone_set_service import GoneSetService
from .miss_log_service import MissLogService
from .reconciliation_service import ReconciliationService
from .site_identity import SiteIdentity

__all__ = [
    "GoneEngine",
    "GoneSetService",
    "MissLogService",
    "ReconciliationService",
    "RequestClassifier",
    "SiteIdentity",
    "normalize_request_url",
]
