"""Application listing – list queries and the index-backed lister."""
from orderpay.application.listing.lister import ItemLister
from orderpay.application.listing.query import ListQuery, ListQueryData

__all__ = ["ItemLister", "ListQuery", "ListQueryData"]
