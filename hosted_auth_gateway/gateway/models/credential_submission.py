from typing import Optional

from pydantic import BaseModel


class CredentialSubmission(BaseModel):
    """E-mail and password exactly as posted by the login or signup form."""

    # checking these is the identity provider's job; missing fields stay None
    email: Optional[str] = None
    password: Optional[str] = None
