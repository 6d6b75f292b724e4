"""
Shared pieces of the Supabase repositories.
"""

from postgrest.exceptions import APIError
from supabase import Client

# PostgreSQL error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError) -> bool:
    return getattr(error, "code", None) == UNIQUE_VIOLATION


class SupabaseRepository:
    """Holds the injected client and the table the repository works on"""

    table_name: str = ""

    def __init__(self, client: Client):
        self.client = client

    def _table(self, name: str = None):
        return self.client.table(name or self.table_name)
