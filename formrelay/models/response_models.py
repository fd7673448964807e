"""
formrelay/models/response_models.py

Response shapes shared by every endpoint.
"""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """
    200 body:
        { "message": "Message sent successfully" }
    """

    message: str


class ErrorResponse(BaseModel):
    """
    4xx / 5xx body:
        { "error": "Champs invalides ou manquants." }
    """

    error: str
