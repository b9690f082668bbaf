"""
Service layer: concrete data sources, cached dataset access, export and storage.
"""

from .data_source import JsonFileDataSource, UrlDataSource, data_source_from_config
from .export_service import ExportFile, ExportService
from .record_service import RecordService
from .storage import LocalFileSystemStorage, StorageBackend

__all__ = [
    "JsonFileDataSource",
    "UrlDataSource",
    "data_source_from_config",
    "ExportFile",
    "ExportService",
    "RecordService",
    "LocalFileSystemStorage",
    "StorageBackend",
]
