"""
Groups API - Gravity database groups.
"""

import logging
import re
from urllib.parse import quote

from ._http import HTTPClient
from ..exceptions import NotFoundError, ProtocolError, ValidationError
from ..models import Group, GroupList, GroupCreateRequest, GroupUpdateRequest

logger = logging.getLogger(__name__)

GROUPS_PATH = "/api/groups"

_VALID_NAME = re.compile(r"^\S*$")


def valid_group_name(name: str) -> bool:
    """Group names must not contain whitespace."""
    return _VALID_NAME.match(name) is not None


def group_path(name: str) -> str:
    return f"{GROUPS_PATH}/{quote(name, safe='')}"


def parse_groups(data: dict) -> GroupList:
    """
    Decode the ``groups`` array of a ``/api/groups`` response.

    Raises:
        ProtocolError: If the array or one of its entries has the wrong shape.
    """
    entries = data.get("groups") or []
    if not isinstance(entries, list):
        raise ProtocolError("unexpected groups response, 'groups' is not a list")

    groups = []
    for entry in entries:
        try:
            groups.append(Group.from_api(entry))
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            raise ProtocolError(f"failed to parse group {entry!r}: {e}") from e
    return groups


class GroupsAPI:
    """
    API for group management.

    Handles:
    - Listing groups and looking them up by name or ID
    - Group create, update and delete
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Groups API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list(self) -> GroupList:
        """Get all groups."""
        prepared = self._http.request_with_session_json("GET", GROUPS_PATH)
        response = self._http.send(prepared, expected_status=200, action="retrieve groups")
        data = self._http.json_object(response)

        return parse_groups(data)

    def get(self, name: str) -> Group:
        """
        Get a group by name.

        Raises:
            NotFoundError: If no group has that name.
        """
        for group in self.list():
            if group.name == name:
                return group

        raise NotFoundError(f"Group with name {name!r} not found")

    def get_by_id(self, group_id: int) -> Group:
        """Get a group by its numeric ID."""
        for group in self.list():
            if group.id == group_id:
                return group

        raise NotFoundError(f"Group with ID {group_id} not found")

    def create(self, request: GroupCreateRequest) -> Group:
        """
        Create a group and return it as stored by the appliance.

        Args:
            request: Name (no whitespace) and optional description

        Raises:
            ValidationError: If the name contains whitespace. No request is made.
        """
        name = request.name.strip()
        if not valid_group_name(name):
            raise ValidationError("group names must not contain spaces")

        prepared = self._http.request_with_session_json(
            "POST",
            GROUPS_PATH,
            {"name": name, "comment": request.description},
        )
        self._http.send(prepared, expected_status=201, action="create group")

        logger.debug("Created group %s", name)
        return self.get(name)

    def update(self, request: GroupUpdateRequest) -> Group:
        """
        Update a group's description and enabled flag.

        Fields left as None keep their current value, read from the
        appliance before the update.
        """
        description = request.description
        enabled = request.enabled
        if description is None or enabled is None:
            current = self.get(request.name)
            if description is None:
                description = current.description
            if enabled is None:
                enabled = current.enabled

        body = {"name": request.name, "comment": description, "enabled": enabled}

        prepared = self._http.request_with_session_json("PUT", group_path(request.name), body)
        self._http.send(prepared, expected_status=200, action="update group")

        logger.debug("Updated group %s", request.name)
        return self.get(request.name)

    def delete(self, name: str) -> None:
        """Delete a group by name."""
        prepared = self._http.request_with_session_json("DELETE", group_path(name))
        self._http.send(prepared, expected_status=204, action="delete group")

        logger.debug("Deleted group %s", name)
