"""Restaurant configuration schemas.

Pydantic models for restaurant settings submitted as raw input.
"""

from pydantic import BaseModel, Field

from src.domain.types import ParsedHour
from src.domain.value_objects.operating_hours import OperatingHours


class OperatingHoursRequest(BaseModel):
    """Daily opening window as submitted.

    Attributes:
        opens: Opening hour (0-23).
        closes: Closing hour (0-23); earlier than opens for overnight service.
    """

    opens: ParsedHour = Field(..., description="Opening hour (0-23)", examples=[9])
    closes: ParsedHour = Field(..., description="Closing hour (0-23)", examples=[17])

    def to_domain(self) -> OperatingHours:
        return OperatingHours(self.opens, self.closes)
