"""
KLineChart Services

Service layer containing the chart pipeline.
Each service has a defined interface (contract) and implementation.
"""

from klinechart.services.base import BaseService, ServiceError

__all__ = ["BaseService", "ServiceError"]
