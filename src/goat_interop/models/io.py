"""Input/output models for the interfaces."""

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Message shown when the CLI is started without a command."""

    message: str = Field(default="Welcome to Goat Interop!")
    hint: str = Field(default="Type --help for more information")
