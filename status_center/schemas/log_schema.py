from pydantic import BaseModel, Field
from typing import Any, Dict, List, Union


class LogEventIn(BaseModel):
    source: str = Field(..., description="component name e.g. TW Forms")
    message: Union[str, Dict[str, Any], List[Any]] = Field(..., description="text or structured payload")
    level: str = Field("INFO", description="DEBUG/INFO/WARNING/ERROR")
