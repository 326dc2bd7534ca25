"""HTTP client for the REST-over-tables data source."""

from typing import Any, Iterable, Optional, Union

import requests

from ..config import Settings

Filter = tuple[str, str, Any]

# Return a single JSON object instead of an array
SINGLE_OBJECT_ACCEPT = "application/vnd.pgrst.object+json"


class DataSourceError(Exception):
    """Raised when a read against the data source fails."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _format_filter(operator: str, value: Any) -> str:
    """Format a filter like 'eq.5' or 'in.(1,2,3)'."""
    if operator == "in":
        return "in.(" + ",".join(_format_value(v) for v in value) + ")"
    if operator == "is":
        return f"is.{_format_value(value)}"
    return f"{operator}.{_format_value(value)}"


def build_params(
    columns: str = "*",
    filters: Iterable[Filter] = (),
    any_of: Iterable[Filter] = (),
    order: Optional[tuple[str, bool]] = None,
    limit: Optional[int] = None,
) -> list[tuple[str, str]]:
    """
    Build query parameters for a table read.

    Args:
        columns: Select expression, including embeddings like
            "*,fighter1:id_fighter_1(id,name)"
        filters: (column, operator, value) tuples that must all match
        any_of: (column, operator, value) tuples of which one must match
        order: (column, ascending) ordering
        limit: Maximum number of rows

    Returns:
        List of (name, value) query parameters
    """
    params = [("select", "".join(columns.split()))]
    for column, operator, value in filters:
        params.append((column, _format_filter(operator, value)))

    alternatives = [f"{column}.{_format_filter(operator, value)}" for column, operator, value in any_of]
    if alternatives:
        params.append(("or", "(" + ",".join(alternatives) + ")"))

    if order:
        column, ascending = order
        params.append(("order", f"{column}.{'asc' if ascending else 'desc'}"))
    if limit is not None:
        params.append(("limit", str(limit)))
    return params


class DataSourceClient:
    """Read-only client for the hosted tables."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """Initialize client with settings and an optional pre-built session."""
        self.base_url = settings.rest_url
        self.timeout = settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "apikey": settings.supabase_key,
                "Authorization": f"Bearer {settings.supabase_key}",
                "Accept": "application/json",
            }
        )

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Iterable[Filter] = (),
        any_of: Iterable[Filter] = (),
        order: Optional[tuple[str, bool]] = None,
        limit: Optional[int] = None,
        single: bool = False,
    ) -> Union[list[dict], dict]:
        """
        Read rows from a table.

        With `single=True` exactly one row is expected and returned as a dict.

        Raises:
            DataSourceError: On connection errors, HTTP errors or bad JSON
        """
        url = f"{self.base_url}/{table}"
        params = build_params(columns, filters, any_of, order, limit)
        headers = {"Accept": SINGLE_OBJECT_ACCEPT} if single else None

        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise DataSourceError(f"{table}: HTTP {status}") from e
        except requests.RequestException as e:
            raise DataSourceError(f"{table}: {e}") from e
        except ValueError as e:
            raise DataSourceError(f"{table}: invalid JSON response") from e

        if single:
            if not isinstance(data, dict):
                raise DataSourceError(f"{table}: expected a single row")
            return data
        if not isinstance(data, list):
            raise DataSourceError(f"{table}: expected a list of rows")
        return data
