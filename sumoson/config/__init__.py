from .scraper_config import ScraperConfig

__all__ = ['ScraperConfig']
