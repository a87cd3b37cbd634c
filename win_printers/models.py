from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple


class Printer(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    device_id: str = Field(alias="deviceId", min_length=1)
    name: str = Field(min_length=1)
    # tupla: el registro no cambia después de construido
    paper_sizes: Tuple[str, ...] = Field(default=(), alias="paperSizes")


class PrinterParseResult(BaseModel):
    is_valid: bool
    printer_data: Optional[Printer] = None
