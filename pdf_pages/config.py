from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt


class ConversionRequest(BaseModel):
    output_format: Literal["png", "svg"]
    input_path: Path
    output_dir: Path = Path(".")
    pages: List[NonNegativeInt] = []
    scale: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    prefix: Optional[str] = None
    quiet: bool = False
