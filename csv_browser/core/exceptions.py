class CsvBrowserError(Exception):
    """Base exception for all csv_browser errors"""
    pass

class ConfigError(CsvBrowserError):
    """Invalid or inconsistent global.json or environment overrides"""
    pass

class CsvParseError(CsvBrowserError):
    """
    Uploaded file could not be turned into a Dataset:
    bad encoding, malformed rows, missing or duplicate header, etc
    """
    pass

class SnapshotError(CsvBrowserError):
    """Saving to or loading from the snapshot store did not complete"""
    pass

class DatasetSchemaError(CsvBrowserError):
    """
    Rows don't match what Dataset expects:
    non-mapping records, duplicate or blank column names
    """
    pass
