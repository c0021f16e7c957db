"""Postman Docs Sync

Fetch a Postman collection and write it out as Markdown documentation
and JavaScript endpoint modules.
"""

from postman_docs_sync.sync import render_collection, sync_collection

__all__ = ["render_collection", "sync_collection"]
__version__ = "0.1.0"
