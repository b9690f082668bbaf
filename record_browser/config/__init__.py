from .loader import load_global_config
from .model import GlobalConfig, LocaleFormat, RecordColumns

__all__ = ["load_global_config", "GlobalConfig", "LocaleFormat", "RecordColumns"]
