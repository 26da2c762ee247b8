from ._fetch_client import FetchClient

__all__ = ["FetchClient"]
