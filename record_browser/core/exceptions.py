class RecordBrowserError(Exception):
    """Base exception for all record_browser errors"""
    pass

class ConfigError(RecordBrowserError):
    """Missing or inconsistent global.json"""
    pass

class DataSourceError(RecordBrowserError):
    """
    The dataset could not be fetched or decoded:
    unreachable file/URL, non-success response, invalid JSON,
    or a payload that is not a list of objects
    """
    pass
