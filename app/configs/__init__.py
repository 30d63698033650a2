from app.configs.settings import file_logger, settings

__all__ = [
    "file_logger",
    "settings",
]
