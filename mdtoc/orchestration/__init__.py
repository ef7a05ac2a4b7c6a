from .config_loader import load_settings
from .document import Document, TocResult, generate_toc
from .writer import insert_toc

__all__ = ["Document", "TocResult", "generate_toc", "insert_toc", "load_settings"]
