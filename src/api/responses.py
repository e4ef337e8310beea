"""
Response envelopes shared by every route.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.domain.result import Error


def success(message: str, data: Any = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        if isinstance(data, BaseModel):
            data = data.model_dump()
        elif isinstance(data, list):
            data = [item.model_dump() if isinstance(item, BaseModel) else item for item in data]
        body["data"] = data
    return body


def failure(
    error: Error, message: Optional[str] = None, errors: Optional[Dict[str, List[str]]] = None
) -> Dict[str, Any]:
    message = message or error.message
    body: Dict[str, Any] = {
        "success": False,
        "message": message,
        "error": {"code": error.code, "message": message},
    }
    if errors is not None:
        body["errors"] = errors
    return body
