"""Response models shared by several routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Acknowledgement for operations that return no entity."""

    message: str
