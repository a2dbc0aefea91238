from pydantic import BaseModel

class MessageResponse(BaseModel):
    """
    A generic message response model.
    """
    message: str

class ErrorResponse(BaseModel):
    """
    A generic error response model.
    """
    detail: str

class ModelOption(BaseModel):
    """
    A code-generation model clients can pick from.
    """
    label: str
    value: str
