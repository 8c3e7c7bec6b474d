from datetime import datetime
from pydantic import BaseModel


class DashboardStatsDTO(BaseModel):
    """Headline counts for the admin dashboard"""

    total_dead_letters: int
    replayable_dead_letters: int
    total_incoming_envelopes: int
    active_nodes: int
    timestamp: datetime
