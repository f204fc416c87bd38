"""
Helpers to build appliance responses and inspect sent requests.
"""

import json
from typing import Any, Optional

import requests

BASE_URL = "http://pi.hole.test"


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> requests.Response:
    """Build a requests.Response with a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


def login_response(sid: str = "sid-1", csrf: str = "csrf-1", valid: bool = True) -> requests.Response:
    return make_response(200, {
        "session": {
            "valid": valid,
            "totp": False,
            "sid": sid,
            "csrf": csrf,
            "validity": 1800,
            "message": "password correct" if valid else "password incorrect",
        }
    })


def hosts_response(*entries: str) -> requests.Response:
    return make_response(200, {"config": {"dns": {"hosts": list(entries)}}})


def cname_response(*entries: str) -> requests.Response:
    return make_response(200, {"config": {"dns": {"cnameRecords": list(entries)}}})


def sent_requests(session) -> list:
    """PreparedRequests passed to ``session.send`` in call order."""
    return [c.args[0] for c in session.send.call_args_list]


def json_body(prepared: requests.PreparedRequest) -> Any:
    return json.loads(prepared.body)
