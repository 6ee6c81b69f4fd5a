"""
服务层模块
提供业务逻辑的抽象层，封装简历生命周期流程
"""

from .lifecycle_service import LifecycleManager
from .statistics_service import StatisticsTracker
from .storage_service import StorageService, LocalStorageService
from .printer_service import PrinterService
from .enrichment_service import ProfileEnrichmentClient

__all__ = [
    "LifecycleManager",
    "StatisticsTracker",
    "StorageService",
    "LocalStorageService",
    "PrinterService",
    "ProfileEnrichmentClient"
]
