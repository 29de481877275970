from pydantic import BaseModel, Field
from typing import Any, Dict, List


class EventRecord(BaseModel):
    """A decoded event: its name and arguments in declaration order."""
    name: str
    args: List[Any] = Field(default_factory=list)


class StatusSummary(BaseModel):
    """Status and block height of a settled transaction.

    Both fields are ``""`` when the receipt carried no status.
    """
    status: Any = ""
    height: Any = ""


class ProcessedEventDetail(BaseModel):
    name: str
    abi: Dict[str, Any]  # The event ABI dictionary
