from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_response(success: bool, message: str, status_code: int = 200, data: Optional[Any] = None) -> JSONResponse:
    """Wraps every reply in the ``{success, message, data}`` envelope."""
    content = {"success": success, "message": message}
    if data is not None:
        content["data"] = jsonable_encoder(data, by_alias=True)
    return JSONResponse(status_code=status_code, content=content)
