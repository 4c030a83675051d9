from dataclasses import dataclass

@dataclass(slots=True)
class PendingRise:
    """Deferred row advance owned by one round; dropped if that round ends first."""
    round_id: int
    remaining: float
