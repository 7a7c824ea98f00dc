from .converter import HTTPErrorConverter, default_converter, from_int, from_status, normalize_status

__all__ = ["HTTPErrorConverter", "default_converter", "from_int", "from_status", "normalize_status"]
