"""Shared types for the ticketdb package."""

from typing import Any

Row = dict[str, Any]
Params = tuple | list | dict
ParamsList = list[tuple] | list[list]
