"""Todo API client.

This module defines a small client wrapper around the Todo REST API
and a command line interface built on it.  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes one method per API operation:

* :meth:`TodoAPI.list_todos` – return all todos.
* :meth:`TodoAPI.create_todo` – create a todo with the given text.
* :meth:`TodoAPI.complete_todo` – mark a todo as completed.
* :meth:`TodoAPI.delete_todo` – delete a todo.

Every method returns a ``(data, error)`` tuple.  On failure ``error``
is a dictionary with keys ``status_code`` and ``message``; the message
is taken from the ``error`` field the server puts in its responses.

Command line usage::

    python todo_client.py list
    python todo_client.py add "buy milk"
    python todo_client.py done 1
    python todo_client.py rm 1
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("TODO_API_URL", "http://localhost:5000/api")


class TodoAPI:
    """Client for interacting with the Todo API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix,
                e.g. ``http://localhost:5000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Todo operations
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all todos.

        Returns:
            A tuple ``(todos, error)``. ``todos`` is empty on failure.
        """
        data, error = self._request("GET", "/todos")
        if error:
            return [], error
        return data or [], None

    def create_todo(self, body: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a todo with the given text."""
        return self._request("POST", "/todos", json_body={"body": body})

    def complete_todo(self, todo_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Mark a todo as completed.  Returns the updated todo."""
        return self._request("PATCH", f"/todos/{todo_id}")

    def delete_todo(self, todo_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a todo.

        Returns:
            A tuple ``(success, error)``.
        """
        data, error = self._request("DELETE", f"/todos/{todo_id}")
        if error:
            return False, error
        return bool(data and data.get("success")), None


def _format_todo(todo: Dict[str, Any]) -> str:
    mark = "x" if todo.get("completed") else " "
    return f"[{mark}] {todo.get('id')}: {todo.get('body')}"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Command line client for the Todo API.")
    ap.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL (default: %(default)s)")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all todos")
    add = sub.add_parser("add", help="Create a todo")
    add.add_argument("body", help="Text of the todo")
    done = sub.add_parser("done", help="Mark a todo as completed")
    done.add_argument("id", help="Todo identifier")
    rm = sub.add_parser("rm", help="Delete a todo")
    rm.add_argument("id", help="Todo identifier")
    args = ap.parse_args(argv)

    api = TodoAPI(base_url=args.base_url)
    if args.command == "list":
        todos, error = api.list_todos()
        if not error:
            for todo in todos:
                print(_format_todo(todo))
    elif args.command == "add":
        todo, error = api.create_todo(args.body)
        if not error:
            print(_format_todo(todo))
    elif args.command == "done":
        todo, error = api.complete_todo(args.id)
        if not error:
            print(_format_todo(todo))
    else:
        _, error = api.delete_todo(args.id)
        if not error:
            print(f"[+] Deleted todo {args.id}")

    if error:
        print(f"[!] {error['message']}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
